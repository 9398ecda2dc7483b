# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from authgate.domain.users.entities import LoginResult, User
from authgate.domain.users.exceptions import ConflictError, InvalidCredentialsError
from authgate.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from authgate.infrastructure.observability import record_auth_event
from authgate.shared.logging import logger


class AuthService:
    """Registration and login.

    Errors raised by the hasher, the repository and the token service are
    already classified and pass through unchanged.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    def register(self, username: str, password: str) -> User:
        hashed = self._password_hasher.hash(password)
        try:
            user = self._users.create(username, hashed)
        except ConflictError:
            record_auth_event("register", "conflict")
            logger.info("auth.register: username taken")
            raise
        record_auth_event("register", "ok")
        logger.info(f"auth.register: ok user_id={user.id}")
        return user

    @cached_property
    def _decoy_hash(self) -> str:
        return self._password_hasher.hash("authgate-decoy-password")

    def login(self, username: str, password: str, secret: str) -> LoginResult:
        credentials = self._users.find_by_username(username)
        # Unknown user and wrong password must be indistinguishable to the caller,
        # in the response and in the time spent hashing.
        if credentials is None:
            self._password_hasher.verify(password, self._decoy_hash)
        if credentials is None or not self._password_hasher.verify(
            password, credentials.password_hash
        ):
            record_auth_event("login", "rejected")
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        token = self._tokens.issue(credentials.id, secret)
        record_auth_event("login", "ok")
        logger.info(f"auth.login: ok user_id={credentials.id}")
        return LoginResult(access_token=token)
