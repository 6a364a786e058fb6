"""bcrypt helpers.

Hashing is CPU-bound for a noticeable fraction of a second, so both
helpers run bcrypt in a worker thread and leave the event loop free.
"""

import asyncio

import bcrypt


def _hash(password: str, rounds: int) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def _check(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


async def hash_password(password: str, rounds: int) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: Plain-text password
        rounds: bcrypt work factor

    Returns:
        The bcrypt digest as text
    """
    return await asyncio.to_thread(_hash, password, rounds)


async def check_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored bcrypt digest."""
    return await asyncio.to_thread(_check, password, password_hash)
