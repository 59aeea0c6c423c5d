import os

os.environ.setdefault("JWT_SECRET", "test-access-secret")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ["TESTING"] = "true"

import asyncio
from datetime import date
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

import bowen_hooks.infrastructure.orm  # noqa: F401
from bowen_hooks.api.dependencies import get_cache, get_email_service
from bowen_hooks.application.dtos.user_dtos import RegisterUserDto
from bowen_hooks.application.services.token_service import TokenService
from bowen_hooks.application.use_cases.register_user import RegisterUserUseCase
from bowen_hooks.db.database import SessionLocal, engine
from bowen_hooks.db.models import Base
from bowen_hooks.domain.repositories.cache_client import ICacheClient
from bowen_hooks.domain.value_objects.email import Email
from bowen_hooks.infrastructure.external_services.email_service import EmailService
from bowen_hooks.infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from bowen_hooks.main import create_app

API = "/api/v1"
PASSWORD = "Abcdefg1"


class InMemoryCache(ICacheClient):
    """Dict-backed stand-in for Redis; TTLs are recorded but never enforced"""

    def __init__(self):
        self.store: Dict[str, str] = {}
        self.ttls: Dict[str, int] = {}
        self.closed = False

    def get(self, key: str) -> Optional[str]:
        return self.store.get(key)

    def set_with_expiry(self, key: str, value: str, ttl_seconds: int) -> None:
        self.store[key] = value
        self.ttls[key] = ttl_seconds

    def delete(self, key: str) -> None:
        self.store.pop(key, None)
        self.ttls.pop(key, None)

    def ping(self) -> bool:
        return not self.closed

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def uow(db_session):
    return UnitOfWorkImpl(db_session)


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def token_service(cache):
    return TokenService(cache)


@pytest.fixture
def email_service():
    return EmailService()


@pytest.fixture
def register(uow, token_service, email_service):
    """Register a user through the use case and return the AuthResult"""

    def _register(email="ada@uni.edu", password=PASSWORD, clock=None, **fields):
        fields.setdefault("first_name", "Ada")
        fields.setdefault("date_of_birth", date(2000, 1, 1))
        dto = RegisterUserDto(email=email, password=password, **fields)
        kwargs = {"clock": clock} if clock else {}
        use_case = RegisterUserUseCase(uow, token_service, email_service, **kwargs)
        return asyncio.run(use_case.execute(dto))

    return _register


@pytest.fixture
def load_user(db_session, uow):
    """Fresh read of a user, bypassing anything cached in the session"""

    def _load(email="ada@uni.edu"):
        db_session.expire_all()
        return asyncio.run(uow.users.get_by_email(Email(email)))

    return _load


@pytest.fixture
def save_user(uow):
    def _save(user):
        async def _run():
            async with uow:
                await uow.users.update(user)
        asyncio.run(_run())
        return user

    return _save


@pytest.fixture
def app(db_session, cache, email_service):
    application = create_app()
    application.state.cache = cache
    application.dependency_overrides[get_cache] = lambda: cache
    application.dependency_overrides[get_email_service] = lambda: email_service
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


def auth_header(access_token: str) -> dict:
    return {"Authorization": f"Bearer {access_token}"}
