# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "username": self.username}


@dataclass(slots=True, frozen=True)
class UserCredentials:
    """A stored user together with its password hash; never leaves the service layer."""

    id: int
    username: str
    password_hash: str

    def to_user(self) -> User:
        return User(id=self.id, username=self.username)


@dataclass(slots=True, frozen=True)
class Claims:

    sub: int
    exp: int


@dataclass(slots=True, frozen=True)
class LoginResult:

    access_token: str

    def to_dict(self) -> dict[str, str]:
        return {"access_token": self.access_token}
