"""Signed, time-limited session tokens (HS256 JWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from jose import jwt
from jose.exceptions import JOSEError

from authgate.domain.users.entities import Claims
from authgate.domain.users.exceptions import InternalError, InvalidTokenError
from authgate.domain.users.repositories import TokenService

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=24)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        ttl: timedelta = TOKEN_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = ttl
        self._clock = clock

    def issue(self, subject: int, secret: str) -> str:
        expires_at = self._clock() + self._ttl
        claims = {"sub": str(subject), "exp": int(expires_at.timestamp())}
        try:
            return jwt.encode(claims, secret, algorithm=ALGORITHM)
        except JOSEError as exc:
            raise InternalError("failed to create token") from exc

    def validate(self, token: str, secret: str) -> Claims:
        # Signature, format and expiry failures are reported identically.
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[ALGORITHM],
                options={"require_exp": True, "require_sub": True, "leeway": 0},
            )
            # jose checks exp against the wall clock; recheck against ours.
            exp = int(payload["exp"])
            if exp <= int(self._clock().timestamp()):
                raise InvalidTokenError()
            return Claims(sub=int(payload["sub"]), exp=exp)
        except (JOSEError, KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc
