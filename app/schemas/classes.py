from pydantic import BaseModel, ConfigDict, Field, StrictInt
from typing import List


class TutorProfile(BaseModel):
    """Профиль репетитора."""
    name: str
    avatar: str
    whatsapp: str
    bio: str


class SubjectOffering(BaseModel):
    """Предмет и стоимость занятия."""
    subject: str
    cost: float


class ScheduleItem(BaseModel):
    """Слот расписания в том виде, в котором он приходит от клиента."""
    model_config = ConfigDict(populate_by_name=True)

    week_day: StrictInt  # true/"1" не превращаются в 1; диапазон 0-6 проверяет сервис
    from_: str = Field(alias="from")
    to: str


class ClassCreate(BaseModel):
    """Тело запроса POST /classes."""
    name: str
    avatar: str
    whatsapp: str
    bio: str
    subject: str
    cost: float
    schedule: List[ScheduleItem] = []

    def profile(self) -> TutorProfile:
        return TutorProfile(name=self.name, avatar=self.avatar, whatsapp=self.whatsapp, bio=self.bio)

    def offering(self) -> SubjectOffering:
        return SubjectOffering(subject=self.subject, cost=self.cost)


class ScheduleSlotOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    week_day: int
    from_: str = Field(serialization_alias="from")
    to: str


class AvailableClass(BaseModel):
    """Найденное занятие вместе с данными репетитора."""
    id: int
    subject: str
    cost: float
    user_id: int
    name: str
    avatar: str
    whatsapp: str
    bio: str
    schedule: List[ScheduleSlotOut] = []


class ErrorResponse(BaseModel):
    error: str
