# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.auth_service import AuthService
from .services.password_hashing import WerkzeugPasswordHasher
from .services.profile_service import ProfileService
from .services.token_service import JwtTokenService

__all__ = [
    "AuthService",
    "JwtTokenService",
    "ProfileService",
    "WerkzeugPasswordHasher",
]
