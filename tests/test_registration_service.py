"""
Tests for the atomic tutor registration.
"""

import logging

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session, sessionmaker

from app.core.exceptions import RegistrationFailed, ValidationError
from app.models import Class, ClassSchedule, User
from app.schemas.classes import ScheduleItem, SubjectOffering, TutorProfile


def _profile(name="Ana", **overrides):
    data = {"name": name, "avatar": "ana.png", "whatsapp": "5511999990001", "bio": "Math tutor"}
    data.update(overrides)
    return TutorProfile(**data)


def _slot(week_day=1, time_from="08:00", time_to="10:00"):
    return ScheduleItem(week_day=week_day, from_=time_from, to=time_to)


def test_register_persists_profile_offering_and_slots(registration_service, session_factory):
    registration_service.register_tutor(
        _profile(),
        SubjectOffering(subject="Math", cost=50),
        [_slot(1, "08:00", "10:00"), _slot(3, "14:00", "24:00")],
    )

    with session_factory() as session:
        user = session.scalars(select(User)).one()
        offering = session.scalars(select(Class)).one()
        slots = session.scalars(select(ClassSchedule).order_by(ClassSchedule.id)).all()

        assert user.name == "Ana"
        assert offering.user_id == user.id
        assert offering.subject == "Math"
        assert offering.cost == 50
        assert [(s.class_id, s.week_day, s.from_, s.to) for s in slots] == [
            (offering.id, 1, 480, 600),
            (offering.id, 3, 840, 1440),
        ]


def test_register_returns_nothing(registration_service):
    result = registration_service.register_tutor(_profile(), SubjectOffering(subject="Math", cost=50), [_slot()])
    assert result is None


def test_overlapping_slots_are_kept_as_is(registration_service, row_counts):
    registration_service.register_tutor(
        _profile(),
        SubjectOffering(subject="Math", cost=50),
        [_slot(1, "08:00", "10:00"), _slot(1, "09:00", "11:00"), _slot(1, "08:00", "10:00")],
    )

    assert row_counts()["class_schedules"] == 3


def test_empty_schedule_fails_before_transaction(row_counts):
    from app.services.registration_service import RegistrationService

    def forbidden_factory():
        raise AssertionError("session must not be opened for an empty schedule")

    service = RegistrationService(session_factory=forbidden_factory)

    with pytest.raises(ValidationError):
        service.register_tutor(_profile(), SubjectOffering(subject="Math", cost=50), [])

    assert row_counts() == {"users": 0, "classes": 0, "class_schedules": 0}


@pytest.mark.parametrize(
    "bad_slot",
    [
        ScheduleItem(week_day=1, from_="8h", to="10:00"),
        ScheduleItem(week_day=1, from_="10:00", to="09:00"),
        ScheduleItem(week_day=9, from_="08:00", to="10:00"),
    ],
)
def test_malformed_slot_rolls_back_everything(registration_service, availability_service, row_counts, bad_slot):
    with pytest.raises(RegistrationFailed):
        registration_service.register_tutor(
            _profile(),
            SubjectOffering(subject="Math", cost=50),
            [_slot(1, "08:00", "10:00"), bad_slot],
        )

    assert row_counts() == {"users": 0, "classes": 0, "class_schedules": 0}
    assert availability_service.find_available("Math", 1, "09:00") == []


class FailingClassInsertSession(Session):
    """Сессия, в которой INSERT в classes падает после успешного INSERT профиля."""

    def flush(self, objects=None):
        if any(isinstance(obj, Class) for obj in self.new):
            raise IntegrityError("INSERT INTO classes", {}, Exception("disk I/O error on classes"))
        super().flush(objects)


def test_insertion_error_rolls_back_everything(engine, row_counts):
    from app.services.registration_service import RegistrationService

    factory = sessionmaker(autoflush=False, bind=engine, class_=FailingClassInsertSession)
    service = RegistrationService(session_factory=factory)

    with pytest.raises(RegistrationFailed) as exc_info:
        service.register_tutor(
            _profile(),
            SubjectOffering(subject="Math", cost=50),
            [_slot()],
        )

    # Детали ошибки хранилища не попадают в сообщение, но доступны как причина
    assert "disk I/O" not in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, IntegrityError)
    assert row_counts() == {"users": 0, "classes": 0, "class_schedules": 0}


def test_failure_is_logged_for_operators(registration_service, caplog):
    with caplog.at_level(logging.ERROR, logger="app.services.registration_service"):
        with pytest.raises(RegistrationFailed):
            registration_service.register_tutor(
                _profile(),
                SubjectOffering(subject="Math", cost=50),
                [ScheduleItem(week_day=1, from_="xx:yy", to="10:00")],
            )

    assert any("InvalidTimeFormat" in record.getMessage() for record in caplog.records)


def test_registration_is_not_idempotent(registration_service, row_counts):
    for _ in range(2):
        registration_service.register_tutor(_profile(), SubjectOffering(subject="Math", cost=50), [_slot()])

    assert row_counts() == {"users": 2, "classes": 2, "class_schedules": 2}


def test_failed_registration_does_not_affect_earlier_ones(registration_service, row_counts):
    registration_service.register_tutor(_profile("Ana"), SubjectOffering(subject="Math", cost=50), [_slot()])

    with pytest.raises(RegistrationFailed):
        registration_service.register_tutor(
            _profile("Bruno"),
            SubjectOffering(subject="Physics", cost=70),
            [_slot(2, "25:00", "26:00")],
        )

    assert row_counts() == {"users": 1, "classes": 1, "class_schedules": 1}


class BrokenRollbackSession(Session):
    """Сессия, у которой откат не проходит, как при обрыве соединения."""

    def rollback(self):
        raise OperationalError("ROLLBACK", {}, Exception("connection lost"))


def test_unconfirmed_rollback_is_logged_not_swallowed(engine, caplog):
    from app.services.registration_service import RegistrationService

    factory = sessionmaker(autoflush=False, bind=engine, class_=BrokenRollbackSession)
    service = RegistrationService(session_factory=factory)

    with caplog.at_level(logging.ERROR, logger="app.core.database"):
        with pytest.raises(RegistrationFailed):
            service.register_tutor(
                _profile(),
                SubjectOffering(subject="Math", cost=50),
                [ScheduleItem(week_day=1, from_="bad", to="10:00")],
            )

    assert any("неоднозначно" in record.getMessage() for record in caplog.records)
