from __future__ import annotations

import pytest

from authgate.application.services.password_hashing import WerkzeugPasswordHasher
from authgate.domain.users.exceptions import InternalError


def test_hash_is_salted_and_verifies(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("hunter2")
    second = hasher.hash("hunter2")

    assert first != second
    assert "hunter2" not in first
    assert hasher.verify("hunter2", first)
    assert hasher.verify("hunter2", second)


def test_wrong_password_returns_false(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("hunter2")

    assert hasher.verify("wrong", hashed) is False


def test_default_method_is_scrypt() -> None:
    hashed = WerkzeugPasswordHasher().hash("hunter2")

    assert hashed.startswith("scrypt:")


@pytest.mark.parametrize(
    "corrupt",
    [
        "",
        "not-a-hash",
        "pbkdf2:sha256:1000$salt",
        "$salt$digest",
        "md5$salt$digest",
        "pbkdf2:nosuchalgo:1000$salt$digest",
        "scrypt:abc:8:1$salt$digest",
        "pbkdf2:sha256:1000$salt$not-hex-and-wrong-length",
        "pbkdf2:sha256:1000$salt$abcd",
        "pbkdf2:sha256:1000$salt$" + "g" * 64,
        "pbkdf2:sha256:1000$salt$" + "AB" * 32,
        "scrypt:32768:8:1$salt$" + "0" * 64,
        "scrypt$salt$" + "0" * 128 + "$extra",
    ],
)
def test_malformed_hash_is_an_internal_error(
    hasher: WerkzeugPasswordHasher, corrupt: str
) -> None:
    with pytest.raises(InternalError) as excinfo:
        hasher.verify("hunter2", corrupt)

    assert excinfo.value.message == "password verification failed"


def test_unknown_method_fails_hashing() -> None:
    hasher = WerkzeugPasswordHasher(method="rot13")

    with pytest.raises(InternalError):
        hasher.hash("hunter2")


def test_truncated_digest_is_an_internal_error(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("hunter2")

    with pytest.raises(InternalError):
        hasher.verify("hunter2", hashed[:-2])


def test_well_formed_hash_with_foreign_digest_does_not_verify(
    hasher: WerkzeugPasswordHasher,
) -> None:
    hashed = "pbkdf2:sha256:1000$salt$" + "0" * 64

    assert hasher.verify("hunter2", hashed) is False
