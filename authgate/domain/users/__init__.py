# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Claims, LoginResult, User, UserCredentials
from .exceptions import (
    ConflictError,
    InternalError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    UnauthorizedError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "Claims",
    "ConflictError",
    "InternalError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "LoginResult",
    "NotFoundError",
    "PasswordHasher",
    "TokenService",
    "UnauthorizedError",
    "User",
    "UserCredentials",
    "UserRepository",
]
