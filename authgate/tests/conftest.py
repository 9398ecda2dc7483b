from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from authgate.app import create_app
from authgate.application.services.password_hashing import WerkzeugPasswordHasher
from authgate.application.services.token_service import JwtTokenService
from authgate.domain.users.entities import User, UserCredentials
from authgate.domain.users.exceptions import ConflictError
from authgate.domain.users.repositories import UserRepository
from authgate.infrastructure.container import Container
from authgate.shared.config import AppConfig

TEST_SECRET = "test-secret-value"
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, UserCredentials] = {}
        self._seq = 1

    def create(self, username: str, password_hash: str) -> User:
        if username in self._users:
            raise ConflictError()
        credentials = UserCredentials(id=self._seq, username=username, password_hash=password_hash)
        self._seq += 1
        self._users[username] = credentials
        return credentials.to_user()

    def find_by_username(self, username: str) -> UserCredentials | None:
        return self._users.get(username)

    def find_by_id(self, user_id: int) -> User | None:
        for credentials in self._users.values():
            if credentials.id == user_id:
                return credentials.to_user()
        return None

    def delete(self, username: str) -> None:
        self._users.pop(username, None)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method=FAST_HASH_METHOD)


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService()


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        DATABASE_URL="sqlite://",
        JWT_SECRET=TEST_SECRET,
        METRICS_ENABLED=True,
        _env_file=None,
    )


@pytest.fixture()
def container(config: AppConfig, hasher: WerkzeugPasswordHasher) -> Iterator[Container]:
    container = Container(config)
    container.password_hasher = hasher
    yield container
    container.engine.dispose()


@pytest.fixture()
def app(config: AppConfig, container: Container) -> Flask:
    flask_app = create_app(config, container=container)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
