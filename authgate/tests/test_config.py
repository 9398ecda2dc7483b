from __future__ import annotations

import pytest
from loguru import logger as loguru_logger
from pydantic import ValidationError

from authgate.__main__ import main
from authgate.shared.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DATABASE_URL",
        "JWT_SECRET",
        "MAX_CONNECTIONS",
        "SERVER_HOST",
        "SERVER_PORT",
        "ALLOWED_ORIGINS",
        "APP_ENV",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/auth")
    monkeypatch.setenv("JWT_SECRET", "abc")

    config = AppConfig(_env_file=None)

    assert config.max_connections == 5
    assert config.server_host == "127.0.0.1"
    assert config.server_port == 8080
    assert config.allowed_origins == ["*"]


def test_missing_secret_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/auth")

    with pytest.raises(ValidationError) as excinfo:
        AppConfig(_env_file=None)

    assert "JWT_SECRET" in str(excinfo.value)


def test_empty_secret_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/auth")
    monkeypatch.setenv("JWT_SECRET", "")

    with pytest.raises(ValidationError):
        AppConfig(_env_file=None)


def test_missing_database_url_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "abc")

    with pytest.raises(ValidationError):
        AppConfig(_env_file=None)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/auth")
    monkeypatch.setenv("JWT_SECRET", "abc")
    monkeypatch.setenv("MAX_CONNECTIONS", "12")
    monkeypatch.setenv("SERVER_PORT", "9000")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")

    config = AppConfig(_env_file=None)

    assert config.max_connections == 12
    assert config.server_port == 9000
    assert config.allowed_origins == ["http://a.test", "http://b.test"]


def test_config_is_immutable() -> None:
    config = AppConfig(DATABASE_URL="sqlite://", JWT_SECRET="abc", _env_file=None)

    with pytest.raises(ValidationError):
        config.jwt_secret = "changed"  # type: ignore[misc]


def test_production_requires_strong_secret() -> None:
    with pytest.raises(ValidationError):
        AppConfig(APP_ENV="production", DATABASE_URL="sqlite://", JWT_SECRET="short", _env_file=None)

    config = AppConfig(
        APP_ENV="production",
        DATABASE_URL="sqlite://",
        JWT_SECRET="x" * 40,
        _env_file=None,
    )
    assert config.is_production()


@pytest.fixture()
def _fresh_config_cache():
    load_config.cache_clear()
    yield
    load_config.cache_clear()
    loguru_logger.remove()


@pytest.mark.usefixtures("_fresh_config_cache")
def test_startup_names_the_missing_variable(capsys: pytest.CaptureFixture[str]) -> None:
    assert main() == 1

    err = capsys.readouterr().err
    assert "refusing to start" in err
    assert "DATABASE_URL" in err


@pytest.mark.usefixtures("_fresh_config_cache")
def test_startup_reports_model_level_check_message(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("JWT_SECRET", "short")

    assert main() == 1

    err = capsys.readouterr().err
    assert "JWT_SECRET must be a random value" in err
