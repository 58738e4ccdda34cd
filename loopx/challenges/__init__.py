"""Challenge catalog and canonical ordering."""

from .types import (
    BUILTIN_CHALLENGES,
    DONE,
    SENTINELS,
    WELCOME,
    Challenge,
    ChallengeId,
    ChallengeKind,
)
from .registry import ChallengeRegistry

__all__ = [
    "BUILTIN_CHALLENGES",
    "DONE",
    "SENTINELS",
    "WELCOME",
    "Challenge",
    "ChallengeId",
    "ChallengeKind",
    "ChallengeRegistry",
]
