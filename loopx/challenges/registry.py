"""Ordered, immutable registry of challenges."""

from typing import Iterable, Iterator, Optional

from ..errors import UnknownChallengeError
from .types import BUILTIN_CHALLENGES, DONE, SENTINELS, Challenge, ChallengeId


class ChallengeRegistry:
    """The canonical challenge sequence.

    Positions are fixed at construction; there are no mutation operations.
    Looking up a sentinel or an unknown id raises ``UnknownChallengeError``.
    """

    def __init__(self, challenges: Optional[Iterable[Challenge]] = None):
        """Initialize the registry.

        Args:
            challenges: Challenges in run order. Defaults to BUILTIN_CHALLENGES.

        Raises:
            ValueError: If an id is duplicated or is a sentinel.
        """
        if challenges is None:
            challenges = BUILTIN_CHALLENGES

        self._challenges: tuple[Challenge, ...] = tuple(challenges)
        self._index: dict[ChallengeId, int] = {}

        for position, challenge in enumerate(self._challenges):
            if challenge.id in SENTINELS:
                raise ValueError(f"Sentinel id cannot be registered: {challenge.id!r}")
            if challenge.id in self._index:
                raise ValueError(f"Duplicate challenge id: {challenge.id!r}")
            self._index[challenge.id] = position

        if not self._challenges:
            raise ValueError("A registry needs at least one challenge")

        self._order: tuple[ChallengeId, ...] = tuple(c.id for c in self._challenges)

    @classmethod
    def from_ids(cls, ids: Iterable[ChallengeId]) -> "ChallengeRegistry":
        """Build a registry from bare ids, using each id as its title."""
        return cls(Challenge(id=challenge_id, title=challenge_id) for challenge_id in ids)

    @property
    def order(self) -> tuple[ChallengeId, ...]:
        """Challenge ids in run order."""
        return self._order

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Challenge]:
        return iter(self._challenges)

    def __contains__(self, challenge_id: object) -> bool:
        return challenge_id in self._index

    def length(self) -> int:
        return len(self._order)

    def index_of(self, challenge_id: ChallengeId) -> int:
        """Get the zero-based position of a challenge."""
        try:
            return self._index[challenge_id]
        except KeyError:
            raise UnknownChallengeError(challenge_id) from None

    def get(self, challenge_id: ChallengeId) -> Challenge:
        """Get a challenge by id."""
        return self._challenges[self.index_of(challenge_id)]

    def first(self) -> ChallengeId:
        return self._order[0]

    def next_after(self, challenge_id: ChallengeId) -> ChallengeId:
        """Get the id following ``challenge_id``, or DONE after the last one."""
        position = self.index_of(challenge_id) + 1
        if position >= len(self._order):
            return DONE
        return self._order[position]

    def first_incomplete_after(
        self,
        challenge_id: ChallengeId,
        completed: Iterable[ChallengeId],
    ) -> ChallengeId:
        """Find the first challenge strictly after ``challenge_id`` not yet completed.

        Args:
            challenge_id: Where the scan starts (exclusive)
            completed: Ids already completed

        Returns:
            The first incomplete id, or DONE if every later challenge is complete
        """
        done = set(completed)
        for candidate in self._order[self.index_of(challenge_id) + 1 :]:
            if candidate not in done:
                return candidate
        return DONE

    def display_title(self, challenge_id: ChallengeId) -> str:
        """Get a header title like 'Challenge 5: HTML Debugging'."""
        challenge = self.get(challenge_id)
        return f"Challenge {self.index_of(challenge_id) + 1}: {challenge.title}"
