"""Session and progress engine."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from ..challenges import DONE, SENTINELS, WELCOME, Challenge, ChallengeId, ChallengeRegistry
from ..errors import CorruptRecordError, NoActiveSessionError
from ..models import CompletionEvent, MirrorFields, PersistedProgress, Session
from ..storage.mirror import Mirror, NullMirror
from ..storage.progress import ProgressStore

logger = logging.getLogger(__name__)

MirrorCall = Callable[[str, MirrorFields], Awaitable[None]]


@dataclass
class RailEntry:
    """One row of the navigation rail."""

    position: int
    challenge: Challenge
    completed: bool
    is_current: bool


class SessionEngine:
    """Owns the active session, its navigation rules and its persistence.

    Every mutation is written through to local storage before the call
    returns, then mirrored to the remote scoreboard in a background task
    that is never awaited by the operation itself. Mutations are serialised
    with a lock so that local writes land in the order they were made.
    """

    def __init__(
        self,
        registry: ChallengeRegistry,
        progress: ProgressStore,
        mirror: Optional[Mirror] = None,
    ):
        """Initialize the engine.

        Args:
            registry: Canonical challenge order
            progress: Local progress storage
            mirror: Remote scoreboard mirror (defaults to a disabled one)
        """
        self.registry = registry
        self.progress = progress
        self.mirror = mirror or NullMirror()
        self.resumed = False
        self._session: Optional[Session] = None
        self._lock = asyncio.Lock()
        self._mirror_tasks: set[asyncio.Task] = set()

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def current_challenge(self) -> ChallengeId:
        if self._session is None:
            return WELCOME
        return self._session.current_challenge

    @property
    def completed_count(self) -> int:
        return len(self._session.completed) if self._session else 0

    @property
    def total(self) -> int:
        return len(self.registry)

    # -------------------------------------------------------------------------
    # Session lifecycle
    # -------------------------------------------------------------------------

    async def start_or_resume(self, name: str) -> Session:
        """Resume a participant's stored progress, or start them fresh.

        Args:
            name: Trimmed, validated participant name

        Returns:
            The active session
        """
        async with self._lock:
            session = await self._load_session(name)

            if session is not None:
                self._session = session
                self.resumed = True
                logger.info(
                    "Resumed %s at %s (%d/%d complete)",
                    name, session.current_challenge, len(session.completed), self.total,
                )
                if session.is_active:
                    await self.progress.set_last_active(name)
                else:
                    await self.progress.clear_last_active()
                return session

            session = Session(participant_name=name, current_challenge=self.registry.first())
            self._session = session
            self.resumed = False
            logger.info("Started new session for %s", name)

            await self.progress.save(session.to_progress())
            await self.progress.set_last_active(name)
            self._schedule_mirror(self.mirror.create, session)
            return session

    async def resume_last_active(self) -> Optional[Session]:
        """Hydrate the most recently active participant, if any.

        Returns:
            The resumed session, or None if there is nothing to resume
        """
        name = await self.progress.get_last_active()
        if not name:
            return None

        async with self._lock:
            session = await self._load_session(name)
            if session is None or not session.is_active:
                await self.progress.clear_last_active()
                return None

            self._session = session
            self.resumed = True
            logger.info("Restored last active participant %s", name)
            return session

    async def finish(self, name: Optional[str] = None) -> None:
        """Forget a participant's progress so the next visit starts fresh.

        Args:
            name: Participant to finish (defaults to the active one)
        """
        async with self._lock:
            if name is None:
                name = self._require_session().participant_name

            await self.progress.delete(name)
            await self.progress.clear_last_active()

            if self._session is not None and self._session.participant_name == name:
                self._session = None
                self.resumed = False
            logger.info("Finished session for %s", name)

    # -------------------------------------------------------------------------
    # Progress events
    # -------------------------------------------------------------------------

    async def record_completion(self, challenge_id: ChallengeId) -> bool:
        """Mark the current challenge complete.

        Completions for anything other than the current challenge are stale
        callbacks and are ignored.

        Returns:
            True if the completed set changed
        """
        async with self._lock:
            session = self._require_session()
            if not self._accepts_event(session, challenge_id):
                return False
            if challenge_id in session.completed:
                return False

            session.completed.add(challenge_id)
            await self._write_through()
            return True

    async def update_score(self, value: float) -> float:
        """Set the absolute score.

        Returns:
            The score after the update
        """
        async with self._lock:
            session = self._require_session()
            if session.is_done:
                return session.score
            if self._apply_score(session, value):
                await self._write_through()
            return session.score

    async def add_score(self, delta: float) -> float:
        """Add a delta to the score; stored as the resulting absolute value."""
        async with self._lock:
            session = self._require_session()
            if session.is_done:
                return session.score
            if self._apply_score(session, session.score + delta):
                await self._write_through()
            return session.score

    async def handle_event(self, event: CompletionEvent) -> bool:
        """Apply a challenge unit's report.

        The score is only honoured while the challenge is still incomplete,
        up to and including the event that completes it.

        Returns:
            True if the session changed
        """
        async with self._lock:
            session = self._require_session()
            if not self._accepts_event(session, event.challenge_id):
                return False
            if event.challenge_id in session.completed:
                logger.debug("Ignoring late event for completed %s", event.challenge_id)
                return False

            changed = False
            if event.score_value is not None:
                changed = self._apply_score(session, event.score_value)
            if event.success:
                session.completed.add(event.challenge_id)
                changed = True

            if changed:
                await self._write_through()
            return changed

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    async def advance(self) -> ChallengeId:
        """Move to the next challenge in order, or to DONE after the last one."""
        async with self._lock:
            session = self._require_session()
            if session.is_done:
                return DONE

            if session.current_challenge == WELCOME:
                session.current_challenge = self.registry.first()
            else:
                session.current_challenge = self.registry.next_after(session.current_challenge)

            await self._write_through()
            return session.current_challenge

    async def jump_to(self, target_id: ChallengeId) -> ChallengeId:
        """Jump from the navigation rail.

        An incomplete target is opened directly. A completed target cannot be
        replayed; the jump lands on the first incomplete challenge after it,
        or DONE if there is none.

        Raises:
            UnknownChallengeError: If target_id is not a registered challenge
        """
        async with self._lock:
            session = self._require_session()
            self.registry.index_of(target_id)
            if session.is_done:
                return DONE

            if target_id in session.completed:
                destination = self.registry.first_incomplete_after(target_id, session.completed)
            else:
                destination = target_id

            if destination != session.current_challenge:
                session.current_challenge = destination
                await self._write_through()
            return destination

    def rail(self) -> list[RailEntry]:
        """Build the navigation rail for the active session."""
        session = self._session
        completed = session.completed if session else set()
        current = self.current_challenge
        return [
            RailEntry(
                position=position,
                challenge=challenge,
                completed=challenge.id in completed,
                is_current=challenge.id == current,
            )
            for position, challenge in enumerate(self.registry, start=1)
        ]

    # -------------------------------------------------------------------------
    # Remote mirror tasks
    # -------------------------------------------------------------------------

    async def wait_for_mirror(self) -> None:
        """Wait for all scheduled mirror calls to settle."""
        while pending := [t for t in self._mirror_tasks if not t.done()]:
            await asyncio.gather(*pending, return_exceptions=True)

    async def close(self) -> None:
        """Cancel mirror calls that are still pending."""
        tasks = list(self._mirror_tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _require_session(self) -> Session:
        if self._session is None:
            raise NoActiveSessionError("No participant has started a session")
        return self._session

    def _accepts_event(self, session: Session, challenge_id: ChallengeId) -> bool:
        if challenge_id != session.current_challenge or challenge_id in SENTINELS:
            logger.debug(
                "Ignoring stale event for %s (current: %s)",
                challenge_id, session.current_challenge,
            )
            return False
        return True

    def _apply_score(self, session: Session, value: float) -> bool:
        value = float(value)
        if value < 0:
            logger.debug("Clamping negative score %s to 0", value)
            value = 0.0
        if value == session.score:
            return False
        session.score = value
        return True

    async def _load_session(self, name: str) -> Optional[Session]:
        try:
            record = await self.progress.load(name)
            if record is None:
                return None
            return self._hydrate(record)
        except CorruptRecordError as e:
            logger.warning("Discarding corrupt progress record for %s: %s", name, e)
            await self.progress.delete(name)
            return None

    def _hydrate(self, record: PersistedProgress) -> Session:
        current = record.current_challenge
        if current not in SENTINELS and current not in self.registry:
            raise CorruptRecordError(f"Unknown current challenge {current!r}")

        unknown = [c for c in record.completed if c not in self.registry]
        if unknown:
            logger.warning(
                "Dropping unknown completed challenges for %s: %s",
                record.participant_name, ", ".join(unknown),
            )

        session = record.to_session()
        session.completed = {c for c in record.completed if c in self.registry}
        return session

    async def _write_through(self) -> None:
        """Persist the active session: local record, pointer, then remote mirror."""
        session = self._require_session()

        if not session.is_active:
            await self.progress.clear_last_active()
            if session.is_done:
                logger.info(
                    "%s finished the run with %d/%d complete",
                    session.participant_name, len(session.completed), self.total,
                )
            return

        await self.progress.save(session.to_progress())
        await self.progress.set_last_active(session.participant_name)
        self._schedule_mirror(self.mirror.upsert, session)

    def _schedule_mirror(self, call: MirrorCall, session: Session) -> None:
        fields = MirrorFields.from_session(session)
        task = asyncio.create_task(self._mirror_safely(call, session.participant_name, fields))
        self._mirror_tasks.add(task)
        task.add_done_callback(self._mirror_tasks.discard)

    async def _mirror_safely(self, call: MirrorCall, name: str, fields: MirrorFields) -> None:
        try:
            await call(name, fields)
        except Exception as e:
            logger.warning("Remote mirror update for %s failed: %s", name, e)
