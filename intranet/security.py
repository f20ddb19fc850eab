# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Password hashing helpers (argon2 via pwdlib)."""

from pwdlib import PasswordHash
from pwdlib.exceptions import PwdlibError

password_hash = PasswordHash.recommended()


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh salt."""
    if not password:
        raise ValueError("Password must not be empty")
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if the password matches the stored hash."""
    try:
        return password_hash.verify(plain_password, hashed_password)
    except (PwdlibError, ValueError):
        return False
