# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authgate.domain.users.exceptions import UnauthorizedError

_SCHEME = "Bearer "


def extract_bearer_token(header: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header value."""
    if not header:
        raise UnauthorizedError("missing authorization header")
    if not header.startswith(_SCHEME):
        raise UnauthorizedError("invalid authorization header")
    token = header[len(_SCHEME):].strip()
    if not token:
        raise UnauthorizedError("invalid authorization header")
    return token


__all__ = ["extract_bearer_token"]
