# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from authgate.domain.users.entities import User as DomainUser
from authgate.domain.users.entities import UserCredentials
from authgate.domain.users.exceptions import ConflictError, InternalError
from authgate.domain.users.repositories import UserRepository
from authgate.infrastructure.db.models import User
from authgate.infrastructure.db.session import session_scope
from authgate.shared.logging import logger


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(self, username: str, password_hash: str) -> DomainUser:
        try:
            with session_scope(self._session_factory) as session:
                row = User(username=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                return DomainUser(id=row.id, username=row.username)
        except IntegrityError as exc:
            raise ConflictError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"users.create: {type(exc).__name__}")
            raise InternalError("failed to create user") from exc

    def find_by_username(self, username: str) -> UserCredentials | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.scalars(select(User).where(User.username == username)).first()
                if not row:
                    return None
                return UserCredentials(
                    id=row.id,
                    username=row.username,
                    password_hash=row.password_hash,
                )
        except SQLAlchemyError as exc:
            logger.error(f"users.find_by_username: {type(exc).__name__}")
            raise InternalError("failed to query user") from exc

    def find_by_id(self, user_id: int) -> DomainUser | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(User, user_id)
                if not row:
                    return None
                return DomainUser(id=row.id, username=row.username)
        except SQLAlchemyError as exc:
            logger.error(f"users.find_by_id: {type(exc).__name__}")
            raise InternalError("failed to query user") from exc
