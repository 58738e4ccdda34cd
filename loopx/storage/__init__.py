"""Storage module for persistence."""

from .database import Database
from .memory import MemoryStore
from .mirror import HttpMirror, Mirror, NullMirror
from .progress import KeyValueStore, ProgressStore

__all__ = [
    "Database",
    "HttpMirror",
    "KeyValueStore",
    "MemoryStore",
    "Mirror",
    "NullMirror",
    "ProgressStore",
]
