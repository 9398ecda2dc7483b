# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from authgate.shared.errors.base import DomainError, InfrastructureError


class ConflictError(DomainError):
    code = "conflict"
    status = HTTPStatus.CONFLICT
    message = "username already exists"


class UnauthorizedError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
    message = "unauthorized"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message=message)


class InvalidCredentialsError(UnauthorizedError):
    """Raised for both an unknown username and a wrong password."""

    message = "invalid username or password"


class InvalidTokenError(UnauthorizedError):
    message = "invalid token"


class NotFoundError(DomainError):
    code = "not_found"
    status = HTTPStatus.NOT_FOUND
    message = "user not found"


class InternalError(InfrastructureError):
    def __init__(self, message: str = "internal server error") -> None:
        super().__init__("internal_error", message=message)
