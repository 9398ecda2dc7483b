# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_INSECURE_SECRETS = ("dev", "development", "test", "secret", "change-me")
_MIN_PRODUCTION_SECRET_LENGTH = 32


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")

    # Database
    database_url: str = Field(..., alias="DATABASE_URL")
    max_connections: int = Field(5, ge=1, alias="MAX_CONNECTIONS")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    # Token signing
    jwt_secret: str = Field(..., min_length=1, alias="JWT_SECRET")

    # Server
    server_host: str = Field("127.0.0.1", alias="SERVER_HOST")
    server_port: int = Field(8080, ge=1, le=65535, alias="SERVER_PORT")
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # Observability
    metrics_enabled: bool = Field(True, alias="METRICS_ENABLED")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("metrics_enabled", "debug_logging", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self
        if (
            self.jwt_secret.lower() in _INSECURE_SECRETS
            or len(self.jwt_secret) < _MIN_PRODUCTION_SECRET_LENGTH
        ):
            raise ValueError(
                "JWT_SECRET must be a random value of at least "
                f"{_MIN_PRODUCTION_SECRET_LENGTH} characters in production"
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "load_config"]
