"""Shared fixtures for loopx tests."""

import asyncio

import pytest

from loopx.challenges import ChallengeRegistry
from loopx.errors import MirrorError
from loopx.session import SessionEngine
from loopx.storage import MemoryStore, ProgressStore


class FakeMirror:
    """Records mirror calls; optionally fails or hangs."""

    enabled = True

    def __init__(self, fail: bool = False, hang: bool = False):
        self.fail = fail
        self.hang = hang
        self.calls = []
        self._never = asyncio.Event()

    async def _call(self, kind, name, fields):
        self.calls.append((kind, name, fields))
        if self.hang:
            await self._never.wait()
        if self.fail:
            raise MirrorError("scoreboard unreachable")

    async def create(self, name, fields):
        await self._call("create", name, fields)

    async def upsert(self, name, fields):
        await self._call("upsert", name, fields)

    async def leaderboard(self, limit=10):
        return []

    async def close(self):
        return None


@pytest.fixture
def registry():
    return ChallengeRegistry.from_ids(["A", "B", "C", "D"])


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def progress(store):
    return ProgressStore(store)


@pytest.fixture
def mirror():
    return FakeMirror()


@pytest.fixture
def engine(registry, progress, mirror):
    return SessionEngine(registry, progress, mirror)
