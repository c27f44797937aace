import pytest

from pghostel.core.exceptions import ValidationError
from pghostel.utils.security import hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("admin123", rounds=4)

    assert hashed.startswith("$2")
    assert verify_password("admin123", hashed)
    assert not verify_password("admin124", hashed)


def test_long_passwords_are_supported():
    password = "x" * 100
    hashed = hash_password(password, rounds=4)

    assert verify_password(password, hashed)
    assert not verify_password("x" * 99, hashed)


def test_empty_password_is_rejected():
    with pytest.raises(ValidationError):
        hash_password("")


def test_malformed_hash_does_not_verify():
    assert not verify_password("admin123", "not-a-hash")
    assert not verify_password("", "whatever")
