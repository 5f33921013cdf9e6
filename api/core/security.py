"""
Password hashing helpers.
"""

from __future__ import annotations

import bcrypt


class PasswordError(ValueError):
    pass


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordError("Password is empty.")
    # bcrypt only looks at the first 72 bytes and newer releases refuse longer input.
    if len(password) > 72:
        raise PasswordError("Password is longer than 72 bytes.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")
