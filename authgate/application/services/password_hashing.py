"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import re

from werkzeug.security import check_password_hash, generate_password_hash

from authgate.domain.users.exceptions import InternalError
from authgate.domain.users.repositories import PasswordHasher
from authgate.shared.logging import logger

DEFAULT_METHOD = "scrypt"
_HEX_DIGEST = re.compile(r"[0-9a-f]+")
# werkzeug derives 64-byte scrypt keys.
_SCRYPT_DIGEST_LENGTH = 128


def _expected_digest_length(method: str) -> int | None:
    name, _, params = method.partition(":")
    if name == "scrypt":
        return _SCRYPT_DIGEST_LENGTH
    if name == "pbkdf2":
        hash_name = params.partition(":")[0] or "sha256"
        try:
            return hashlib.new(hash_name).digest_size * 2
        except ValueError:
            return None
    return None


def _is_well_formed(hashed: str) -> bool:
    parts = hashed.split("$", 2)
    if len(parts) != 3 or not all(parts):
        return False
    method, _salt, digest = parts
    expected = _expected_digest_length(method)
    if not expected or len(digest) != expected:
        return False
    return _HEX_DIGEST.fullmatch(digest) is not None


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = DEFAULT_METHOD, salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        try:
            return str(
                generate_password_hash(password, method=self._method, salt_length=self._salt_length)
            )
        except (ValueError, TypeError) as exc:
            logger.error(f"password_hasher.hash: {type(exc).__name__}")
            raise InternalError("failed to hash password") from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(hashed, str) or not _is_well_formed(hashed):
            logger.error("password_hasher.verify: stored hash is malformed")
            raise InternalError("password verification failed")
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            logger.error(f"password_hasher.verify: {type(exc).__name__}")
            raise InternalError("password verification failed") from exc
