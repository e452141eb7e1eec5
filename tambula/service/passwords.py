"""
Passwords
---------

Salted one-way password hashing with bcrypt. The hashing is deliberately
slow, so it is pushed onto the default executor to keep the loop responsive.
"""
import asyncio
import secrets
from functools import partial

import bcrypt

from tambula.config import bcrypt_rounds

BCRYPT_MAX_BYTES = 72
"""bcrypt only ever looks at the first 72 bytes of a password."""

_placeholder_hash = None


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def _hash(password: str, rounds: int) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def _check(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("ascii"))
    except ValueError:
        # the stored hash is not a bcrypt hash
        return False


async def hash_password(password: str, rounds: int = None) -> str:
    """Hashes the password with a fresh salt."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(_hash, password, rounds or bcrypt_rounds))


async def check_password(password: str, password_hash: str) -> bool:
    """Checks the password against a hash made by :func:`hash_password`."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(_check, password, password_hash))


async def placeholder_hash() -> str:
    """
    A hash of a random password nobody knows. Checking against it costs
    the same as checking against a real user's hash.
    """
    global _placeholder_hash
    if _placeholder_hash is None:
        _placeholder_hash = await hash_password(secrets.token_urlsafe(16))
    return _placeholder_hash
