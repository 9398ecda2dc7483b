"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from authgate.application.services.auth_service import AuthService
from authgate.application.services.password_hashing import WerkzeugPasswordHasher
from authgate.application.services.profile_service import ProfileService
from authgate.application.services.token_service import JwtTokenService
from authgate.infrastructure.db import build_engine, build_session_factory
from authgate.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from authgate.interfaces.http.controllers.auth_controller import AuthController
from authgate.interfaces.http.controllers.misc_controller import MiscController
from authgate.interfaces.http.controllers.profile_controller import ProfileController
from authgate.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def auth_service(self) -> AuthService:
        return AuthService(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
        )

    @cached_property
    def profile_service(self) -> ProfileService:
        return ProfileService(users=self.user_repository, tokens=self.token_service)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(auth_service=self.auth_service, secret=self.config.jwt_secret)

    @cached_property
    def profile_controller(self) -> ProfileController:
        return ProfileController(
            profile_service=self.profile_service,
            secret=self.config.jwt_secret,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine, metrics_enabled=self.config.metrics_enabled)
