"""Unit tests for the bcrypt helpers."""

import asyncio
import threading

import pytest

from citadel.domain.service import password
from citadel.domain.service.password import check_password, hash_password


class TestPasswordHashing:
    """Tests for hash_password and check_password."""

    @pytest.mark.asyncio
    async def test_hash_then_check(self):
        """A digest should accept its own password and nothing else."""
        digest = await hash_password("valar morghulis", rounds=4)

        assert digest.startswith("$2b$04$")
        assert await check_password("valar morghulis", digest)
        assert not await check_password("valar dohaeris", digest)

    @pytest.mark.asyncio
    async def test_hashing_leaves_event_loop_free(self, monkeypatch):
        """Other coroutines should keep running while a hash is computed."""
        started = threading.Event()
        release = threading.Event()

        def slow_hash(plain: str, rounds: int) -> str:
            started.set()
            release.wait(timeout=5)
            return "digest"

        monkeypatch.setattr(password, "_hash", slow_hash)

        task = asyncio.create_task(hash_password("pw", rounds=4))
        assert await asyncio.to_thread(started.wait, 5)

        # Still pending: the hash runs in a worker thread, not on the loop
        assert not task.done()
        release.set()
        assert await task == "digest"
