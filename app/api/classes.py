from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse
from typing import List, Optional
import logging
from app.core.exceptions import InvalidInput, RegistrationFailed, ValidationError
from app.schemas.classes import AvailableClass, ClassCreate, ErrorResponse, ScheduleSlotOut
from app.services.availability_service import AvailabilityService
from app.services.registration_service import RegistrationService
from app.utils.time_converter import convert_minutes_to_hour

# Получаем логгер для этого модуля
logger = logging.getLogger(__name__)

router = APIRouter()

REGISTRATION_ERROR = "Произошла непредвиденная ошибка при создании занятия."


def get_availability_service() -> AvailabilityService:
    return AvailabilityService()


def get_registration_service() -> RegistrationService:
    return RegistrationService()


@router.get(
    "",
    response_model=List[AvailableClass],
    responses={400: {"model": ErrorResponse}},
)
def list_classes(
    subject: Optional[str] = Query(None),
    week_day: Optional[str] = Query(None),
    time: Optional[str] = Query(None),
    service: AvailabilityService = Depends(get_availability_service),
):
    """Ищет занятия по предмету, у которых есть свободный слот в указанный день и время."""
    try:
        matches = service.find_available_with_schedules(subject, week_day, time)
    except InvalidInput as e:
        logger.info(f"ℹ️ [CLASSES] Некорректный поисковый запрос: {e}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(e)})

    return [
        AvailableClass(
            id=offering.id,
            subject=offering.subject,
            cost=offering.cost,
            user_id=user.id,
            name=user.name,
            avatar=user.avatar,
            whatsapp=user.whatsapp,
            bio=user.bio,
            schedule=[
                ScheduleSlotOut(
                    week_day=slot.week_day,
                    from_=convert_minutes_to_hour(slot.from_),
                    to=convert_minutes_to_hour(slot.to),
                )
                for slot in schedule
            ],
        )
        for user, offering, schedule in matches
    ]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={400: {"model": ErrorResponse}},
)
def create_class(
    payload: ClassCreate,
    service: RegistrationService = Depends(get_registration_service),
):
    """Регистрирует репетитора, его занятие и расписание одной транзакцией."""
    try:
        service.register_tutor(payload.profile(), payload.offering(), payload.schedule)
    except ValidationError as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(e)})
    except RegistrationFailed:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": REGISTRATION_ERROR})

    return Response(status_code=status.HTTP_201_CREATED)
