from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class CredentialsRequestDTO(BaseModel):
    # No shape policy on purpose; the store is the only constraint.
    username: str
    password: str

    model_config = ConfigDict(strict=True, hide_input_in_errors=True)

    @field_validator("username", "password")
    @classmethod
    def _encodable(cls, value: str) -> str:
        # JSON can carry lone surrogates ("\ud800"); they have no UTF-8 form.
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid unicode text") from None
        return value


class RegisterRequestDTO(CredentialsRequestDTO):
    pass


class LoginRequestDTO(CredentialsRequestDTO):
    pass


class UserDTO(BaseModel):
    id: int
    username: str


class LoginResponseDTO(BaseModel):
    access_token: str
