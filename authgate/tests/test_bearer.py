import pytest

from authgate.domain.users.exceptions import UnauthorizedError
from authgate.interfaces.http import extract_bearer_token


def test_extracts_token() -> None:
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer ", "bearer abc", "Token abc"])
def test_rejects_missing_or_foreign_scheme(header: str | None) -> None:
    with pytest.raises(UnauthorizedError):
        extract_bearer_token(header)
