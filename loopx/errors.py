"""Exception types raised by loopx."""


class LoopxError(Exception):
    """Base class for all loopx errors."""


class UnknownChallengeError(LoopxError, KeyError):
    """A challenge id is a sentinel or not part of the registry."""

    def __init__(self, challenge_id: str):
        super().__init__(challenge_id)
        self.challenge_id = challenge_id

    def __str__(self) -> str:
        return f"Unknown challenge id: {self.challenge_id!r}"


class CorruptRecordError(LoopxError, ValueError):
    """A stored progress record could not be parsed."""


class StorageWriteError(LoopxError):
    """Local progress could not be written."""


class MirrorError(LoopxError):
    """The remote scoreboard rejected or failed a request."""


class NoActiveSessionError(LoopxError, RuntimeError):
    """An engine operation needs a participant but none is active."""


class InvalidNameError(LoopxError, ValueError):
    """A participant name failed validation."""
