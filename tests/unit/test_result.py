import pytest

from src.libs.result import Error, Return


def test_ok_result():
    result = Return.ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.value == 42
    with pytest.raises(ValueError):
        result.error


def test_err_result():
    result = Return.err(Error("DUPLICATE_EMAIL", "Email already exists"))

    assert result.is_err()
    assert result.error.code == "DUPLICATE_EMAIL"
    assert result.error.message == "Email already exists"
    with pytest.raises(ValueError):
        result.value
