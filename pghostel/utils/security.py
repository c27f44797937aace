"""
Password hashing with bcrypt.
"""

import hashlib

import bcrypt

from pghostel.config.settings import settings
from pghostel.core.exceptions import ValidationError


def _prepare_password_for_bcrypt(password: str) -> bytes:
    """
    Prepare a password for bcrypt by handling the 72-byte limit.

    Passwords that might exceed the limit are replaced by their SHA-256
    hex digest, which is a fixed 64 bytes.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > 71:
        return hashlib.sha256(encoded).hexdigest().encode("ascii")
    return encoded


def hash_password(password: str, rounds: int = None) -> str:
    """
    Hash a plaintext password using bcrypt.

    Args:
        password: Plaintext password
        rounds: Work factor, defaults to ``PASSWORD_BCRYPT_ROUNDS``

    Returns:
        Hashed password string

    Raises:
        ValidationError: If password is empty
    """
    if not password:
        raise ValidationError("Password cannot be empty")

    salt = bcrypt.gensalt(rounds=rounds or settings.PASSWORD_BCRYPT_ROUNDS)
    return bcrypt.hashpw(_prepare_password_for_bcrypt(password), salt).decode("ascii")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against a stored hash."""
    if not plain_password or not hashed_password:
        return False

    try:
        return bcrypt.checkpw(
            _prepare_password_for_bcrypt(plain_password),
            hashed_password.encode("ascii"),
        )
    except ValueError:
        # Malformed stored hash
        return False
