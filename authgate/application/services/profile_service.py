# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authgate.domain.users.entities import User
from authgate.domain.users.exceptions import NotFoundError
from authgate.domain.users.repositories import TokenService, UserRepository
from authgate.shared.logging import logger


class ProfileService:
    def __init__(self, *, users: UserRepository, tokens: TokenService) -> None:
        self._users = users
        self._tokens = tokens

    def get_profile(self, token: str, secret: str) -> User:
        claims = self._tokens.validate(token, secret)
        user = self._users.find_by_id(claims.sub)
        if user is None:
            # Tokens are stateless and can outlive the account they name.
            logger.warning(f"profile: token subject {claims.sub} no longer exists")
            raise NotFoundError()
        return user
