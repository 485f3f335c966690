"""
Общие фикстуры: in-memory SQLite и сервисы, привязанные к нему.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.api.classes import get_availability_service, get_registration_service
from app.core.database import Base, enable_sqlite_foreign_keys
from app.main import app as fastapi_app
from app.models import Class, ClassSchedule, User
from app.services.availability_service import AvailabilityService
from app.services.registration_service import RegistrationService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def registration_service(session_factory):
    return RegistrationService(session_factory=session_factory)


@pytest.fixture
def availability_service(session_factory):
    return AvailabilityService(session_factory=session_factory)


@pytest.fixture
def row_counts(session_factory):
    """Возвращает функцию, считающую строки во всех трех таблицах."""

    def count():
        with session_factory() as session:
            return {
                "users": session.scalar(select(func.count()).select_from(User)),
                "classes": session.scalar(select(func.count()).select_from(Class)),
                "class_schedules": session.scalar(select(func.count()).select_from(ClassSchedule)),
            }

    return count


@pytest.fixture
def client(registration_service, availability_service):
    fastapi_app.dependency_overrides[get_registration_service] = lambda: registration_service
    fastapi_app.dependency_overrides[get_availability_service] = lambda: availability_service
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()
