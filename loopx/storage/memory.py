"""In-memory key-value store."""

from typing import Optional


class MemoryStore:
    """Dict-backed store with the same interface as Database.

    Used by tests and when running without a data directory. Setting
    ``fail_writes`` makes ``set`` and ``delete`` raise, to exercise the
    write-failure path.
    """

    def __init__(self, data: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(data or {})
        self.fail_writes = False
        self.writes: list[tuple[str, str]] = []

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("storage is read-only")
        self.data[key] = value
        self.writes.append((key, value))

    async def delete(self, key: str) -> None:
        if self.fail_writes:
            raise OSError("storage is read-only")
        self.data.pop(key, None)

    async def keys(self, prefix: str = "") -> list[str]:
        return sorted(k for k in self.data if k.startswith(prefix))
