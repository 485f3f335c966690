"""
Централизованная конфигурация логирования для приложения.
Обеспечивает единообразное форматирование и цветовое выделение логов.
"""

import logging
import sys


class ColoredFormatter(logging.Formatter):
    """
    Кастомный форматер с цветовым выделением уровней логирования.
    """

    # ANSI коды цветов
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    # Символы для уровней
    LEVEL_SYMBOLS = {
        'DEBUG': '🔍',
        'INFO': 'ℹ️',
        'WARNING': '⚠️',
        'ERROR': '❌',
        'CRITICAL': '🚨'
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']
        symbol = self.LEVEL_SYMBOLS.get(record.levelname, '📝')

        timestamp = self.formatTime(record, self.datefmt)

        colored_level = f"{color}{record.levelname}{reset}"
        colored_symbol = f"{color}{symbol}{reset}"

        formatted_message = (
            f"{colored_symbol} {timestamp} | "
            f"{colored_level:8} | "
            f"{record.name:20} | "
            f"{record.getMessage()}"
        )

        # Стек исключения печатаем под сообщением, иначе exc_info теряется
        if record.exc_info:
            formatted_message += "\n" + self.formatException(record.exc_info)

        return formatted_message


PLAIN_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'


def setup_logging(level: str = "INFO", enable_colors: bool = True, suppress_sql_echo: bool = True) -> None:
    """
    Настраивает централизованное логирование для всего приложения.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_colors: Включить цветовое выделение в консоли
        suppress_sql_echo: Подавлять SQL-эхо SQLAlchemy (по умолчанию True)
    """
    root_logger = logging.getLogger()

    # Очищаем существующие обработчики
    root_logger.handlers.clear()

    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if enable_colors and sys.stdout.isatty():
        formatter = ColoredFormatter(
            fmt='%(message)s',
            datefmt='%H:%M:%S'
        )
    else:
        # Простой форматер для файлов или не-терминалов
        formatter = logging.Formatter(
            fmt=PLAIN_FORMAT,
            datefmt='%H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    _configure_module_levels(suppress_sql_echo)

    logger = logging.getLogger(__name__)
    logger.info("╔═══════════════════════════════════════════════════════════")
    logger.info("║ 🎨 Система логирования инициализирована")
    logger.info(f"║ 📊 Уровень логирования: {level}")
    logger.info(f"║ 🌈 Цветовое выделение: {'включено' if enable_colors else 'отключено'}")
    logger.info(f"║ 🔇 Подавление SQL-эха: {'включено' if suppress_sql_echo else 'отключено'}")
    logger.info("╚═══════════════════════════════════════════════════════════")


def _configure_module_levels(suppress_sql_echo: bool = True):
    """
    Настраивает уровни логирования для конкретных модулей.

    Args:
        suppress_sql_echo: Подавлять SQL-эхо SQLAlchemy
    """
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)

    if suppress_sql_echo:
        logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
        logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)

    logging.getLogger('app.services.registration_service').setLevel(logging.DEBUG)


def log_error(logger: logging.Logger, error: Exception, context: str = "") -> None:
    """
    Логирует ошибку с полным стеком и контекстом.

    Args:
        logger: Логгер для записи
        error: Исключение
        context: Дополнительный контекст
    """
    logger.error("╔═══════════════════════════════════════════════════════════")
    logger.error("║ ❌ ОШИБКА ОБРАБОТКИ")
    if context:
        logger.error(f"║ 📍 Контекст: {context}")
    logger.error(f"║ 🔥 Тип ошибки: {type(error).__name__}")
    logger.error(f"║ 💥 Сообщение: {str(error)}")
    logger.error("╚═══════════════════════════════════════════════════════════", exc_info=error)
