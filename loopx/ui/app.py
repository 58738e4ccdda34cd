"""Main Textual application."""

import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.logging import TextualHandler
from textual.widgets import Footer, Header

from ..challenges import DONE, WELCOME, ChallengeRegistry
from ..config import Settings, build_mirror, configure_logging
from ..errors import MirrorError, StorageWriteError
from ..models import UserScore, round_score
from ..session import SessionEngine
from ..storage import Database, ProgressStore
from .screens.challenge import ChallengeScreen
from .screens.continue_prompt import ContinueScreen
from .screens.done import DoneScreen
from .screens.leaderboard import LeaderboardScreen
from .screens.welcome import WelcomeScreen

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoopxApp(App):
    """Terminal front end for a challenge run."""

    TITLE = "loopx"
    SUB_TITLE = "The LoopX Challenge"

    CSS = """
    Screen {
        background: $surface;
    }

    #main-content {
        width: 100%;
        height: 100%;
        padding: 1 2;
    }

    .title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    .subtitle {
        color: $text-muted;
        margin-bottom: 2;
    }

    .hint {
        color: $text-muted;
        text-style: italic;
    }

    .error {
        color: $error;
    }

    *:focus {
        border: solid $success;
    }
    """

    BINDINGS = [
        Binding("ctrl+l", "leaderboard", "Leaderboard", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("f1", "help", "Help", show=True),
    ]

    def __init__(self, settings: Optional[Settings] = None, **kwargs):
        super().__init__(**kwargs)
        self.settings = settings or Settings.from_env()
        self.database = Database(self.settings.database_path)
        self.mirror = build_mirror(self.settings)
        self.registry = ChallengeRegistry()
        self.engine = SessionEngine(self.registry, ProgressStore(self.database), self.mirror)
        self._ready = asyncio.Event()

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        yield Header()
        yield Footer()

    def on_mount(self) -> None:
        """Open storage and restore the last participant, if any."""
        configure_logging(self.settings.log_level, handler=TextualHandler())
        self.push_screen(WelcomeScreen())
        self.run_worker(self._boot(), exclusive=True, group="boot")

    async def _boot(self) -> None:
        await self.database.connect()
        self._ready.set()

        session = await self.engine.resume_last_active()
        if session is not None:
            self.show_current()

    # -------------------------------------------------------------------------
    # Flow
    # -------------------------------------------------------------------------

    async def start_participant(self, name: str) -> None:
        """Start or resume a participant and show where they are."""
        await self._ready.wait()
        await self.call_engine(self.engine.start_or_resume(name))
        session = self.engine.session
        if session is None:
            return
        if session.current_challenge == WELCOME:
            await self.call_engine(self.engine.advance())

        if self.engine.resumed and session.is_active:
            self.push_screen(ContinueScreen(name), lambda _: self.show_current())
        else:
            self.show_current()

    def show_current(self) -> None:
        """Switch to the screen matching the engine state."""
        if self.engine.session is None:
            self.switch_screen(WelcomeScreen())
        elif self.engine.current_challenge == DONE:
            self.switch_screen(DoneScreen())
        else:
            self.switch_screen(ChallengeScreen())

    async def call_engine(self, operation: Awaitable[T]) -> Optional[T]:
        """Await an engine operation, reporting local save failures."""
        try:
            return await operation
        except StorageWriteError as e:
            logger.error("Progress could not be saved: %s", e)
            self.notify(
                "Your progress could not be saved on this device.",
                title="Storage error",
                severity="error",
                timeout=8,
            )
            return None

    async def load_leaderboard(self, limit: int = 10) -> list[UserScore]:
        """Top scores from the remote scoreboard, or from local records when it is off."""
        if self.mirror.enabled:
            try:
                return await self.mirror.leaderboard(limit)
            except MirrorError as e:
                logger.warning("Could not load leaderboard: %s", e)
                self.notify("Leaderboard unavailable", title="Leaderboard", severity="warning")
                return []

        records = await self.engine.progress.all_progress()
        scores = [UserScore(name=r.participant_name, score=round_score(r.score)) for r in records]
        scores.sort(key=lambda s: s.score, reverse=True)
        return scores[:limit]

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_leaderboard(self) -> None:
        """Show the leaderboard."""
        if not isinstance(self.screen, LeaderboardScreen):
            self.push_screen(LeaderboardScreen())

    def action_help(self) -> None:
        """Show help."""
        self.notify(
            "Challenge screen: r=Jump rail, Enter=Select\n"
            "Ctrl+L=Leaderboard, Esc=Back, Ctrl+Q=Quit",
            title="Keys",
            timeout=10,
        )

    async def action_quit(self) -> None:
        """Quit the application and close storage."""
        await self.engine.close()
        await self.mirror.close()
        await self.database.close()
        self.exit()
