"""Pydantic models for session state and its serialized forms."""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .challenges.types import DONE, SENTINELS, ChallengeId
from .errors import CorruptRecordError, InvalidNameError

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 30


def round_score(score: float) -> int:
    """Round a score to an integer, halves rounding up."""
    return math.floor(score + 0.5)


def validate_name(raw: str) -> str:
    """Trim and validate a participant name.

    Raises:
        InvalidNameError: With a message suitable for the welcome screen.
    """
    name = (raw or "").strip()
    if not name:
        raise InvalidNameError("Please enter your name.")
    if len(name) < NAME_MIN_LENGTH:
        raise InvalidNameError(f"Name must be at least {NAME_MIN_LENGTH} characters long.")
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidNameError(f"Name must be {NAME_MAX_LENGTH} characters or less.")
    return name


class Session(BaseModel):
    """Live progress for one participant. Mutated only by the engine."""

    model_config = ConfigDict(validate_assignment=True)

    participant_name: str = Field(min_length=1)
    current_challenge: ChallengeId
    completed: set[ChallengeId] = Field(default_factory=set)
    score: float = Field(default=0, ge=0)

    @property
    def is_active(self) -> bool:
        """True while the session is somewhere inside the sequence."""
        return self.current_challenge not in SENTINELS

    @property
    def is_done(self) -> bool:
        return self.current_challenge == DONE

    def to_progress(self) -> "PersistedProgress":
        return PersistedProgress(
            participant_name=self.participant_name,
            current_challenge=self.current_challenge,
            score=self.score,
            completed=sorted(self.completed),
        )


class PersistedProgress(BaseModel):
    """Durable record of a session, stored as JSON under ``progress:<name>``."""

    model_config = ConfigDict(populate_by_name=True)

    participant_name: str = Field(alias="name", min_length=1)
    current_challenge: ChallengeId = Field(alias="challenge", min_length=1)
    score: float = Field(ge=0)
    completed: list[ChallengeId] = Field(alias="completedChallenges")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str) -> "PersistedProgress":
        """Parse a stored record.

        Raises:
            CorruptRecordError: If the JSON is malformed or fields are missing.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise CorruptRecordError(str(e)) from e

    def to_session(self) -> Session:
        return Session(
            participant_name=self.participant_name,
            current_challenge=self.current_challenge,
            completed=set(self.completed),
            score=self.score,
        )


class MirrorFields(BaseModel):
    """Fields mirrored to the remote scoreboard on every progress event."""

    model_config = ConfigDict(populate_by_name=True)

    score: int
    last_challenge: ChallengeId = Field(alias="lastChallenge")
    completed: list[ChallengeId] = Field(alias="completedChallenges")

    @classmethod
    def from_session(cls, session: Session) -> "MirrorFields":
        return cls(
            score=round_score(session.score),
            last_challenge=session.current_challenge,
            completed=sorted(session.completed),
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class CompletionEvent(BaseModel):
    """What a challenge unit reports back to the engine."""

    challenge_id: ChallengeId
    success: bool = True
    score_value: Optional[float] = Field(
        default=None, description="Absolute score the unit wants recorded"
    )


class UserScore(BaseModel):
    """A leaderboard row."""

    name: str
    score: int = 0
