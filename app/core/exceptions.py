"""
Иерархия ошибок сервиса поиска репетиторов.
"""


class TutorServiceError(Exception):
    """Базовый класс для всех ошибок приложения."""


class InvalidInput(TutorServiceError):
    """Не передан обязательный фильтр поиска или время не удалось разобрать."""


class ValidationError(TutorServiceError):
    """Запрос на регистрацию не содержит ни одного слота расписания."""


class RegistrationFailed(TutorServiceError):
    """
    Регистрация не выполнена, транзакция откачена.

    Детали ошибки хранилища наружу не передаются, исходная причина доступна
    только через __cause__ и логи.
    """

    def __init__(self, message: str = "Не удалось зарегистрировать занятие"):
        super().__init__(message)
