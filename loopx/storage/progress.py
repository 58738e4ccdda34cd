"""Participant progress records on top of a key-value store."""

import logging
from typing import Optional, Protocol

from ..errors import CorruptRecordError, StorageWriteError
from ..models import PersistedProgress

logger = logging.getLogger(__name__)

PROGRESS_KEY_PREFIX = "progress:"
LAST_ACTIVE_KEY = "lastActiveParticipant"


class KeyValueStore(Protocol):
    """Storage contract shared by Database and MemoryStore."""

    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def keys(self, prefix: str = "") -> list[str]: ...


def progress_key(name: str) -> str:
    return f"{PROGRESS_KEY_PREFIX}{name}"


class ProgressStore:
    """Read and write PersistedProgress records and the last-active pointer."""

    def __init__(self, store: KeyValueStore):
        """Initialize the progress store.

        Args:
            store: Backing key-value store
        """
        self.store = store

    # Progress records
    async def load(self, name: str) -> Optional[PersistedProgress]:
        """Load a participant's record.

        Returns:
            The record, or None if nothing is stored

        Raises:
            CorruptRecordError: If a record exists but cannot be parsed
        """
        raw = await self.store.get(progress_key(name))
        if raw is None:
            return None

        progress = PersistedProgress.from_json(raw)
        if progress.participant_name != name:
            raise CorruptRecordError(
                f"Record under {progress_key(name)!r} belongs to {progress.participant_name!r}"
            )
        return progress

    async def save(self, progress: PersistedProgress) -> None:
        """Write a participant's record.

        Raises:
            StorageWriteError: If the backing store fails
        """
        await self._write(progress_key(progress.participant_name), progress.to_json())

    async def delete(self, name: str) -> None:
        await self._remove(progress_key(name))

    async def all_progress(self) -> list[PersistedProgress]:
        """Load every readable record, skipping corrupt ones."""
        records = []
        for key in await self.store.keys(PROGRESS_KEY_PREFIX):
            raw = await self.store.get(key)
            if raw is None:
                continue
            try:
                records.append(PersistedProgress.from_json(raw))
            except CorruptRecordError:
                logger.warning("Skipping unreadable progress record %s", key)
        return records

    # Last active participant
    async def get_last_active(self) -> Optional[str]:
        name = await self.store.get(LAST_ACTIVE_KEY)
        return name or None

    async def set_last_active(self, name: str) -> None:
        await self._write(LAST_ACTIVE_KEY, name)

    async def clear_last_active(self) -> None:
        await self._remove(LAST_ACTIVE_KEY)

    async def _write(self, key: str, value: str) -> None:
        try:
            await self.store.set(key, value)
        except Exception as e:
            raise StorageWriteError(f"Could not write {key!r}: {e}") from e

    async def _remove(self, key: str) -> None:
        try:
            await self.store.delete(key)
        except Exception as e:
            raise StorageWriteError(f"Could not delete {key!r}: {e}") from e
