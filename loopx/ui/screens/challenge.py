"""Screen showing the active challenge and the navigation rail."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Static

from ...models import round_score
from ..widgets.challenge_unit import ChallengeUnit, unit_for
from ..widgets.nav_rail import NavRail


class ChallengeScreen(Screen):
    """The active challenge unit, progress header and jump rail."""

    CSS = """
    #challenge-area {
        height: 1fr;
    }

    #challenge-main {
        width: 1fr;
        padding: 0 2;
    }

    #progress {
        color: $accent;
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("r", "focus_rail", "Jump rail", show=True),
    ]

    def compose(self) -> ComposeResult:
        """Compose the challenge screen."""
        engine = self.app.engine
        session = engine.session
        challenge = engine.registry.get(engine.current_challenge)

        with Horizontal(id="challenge-area"):
            yield NavRail(engine.rail(), id="nav-rail")
            with Vertical(id="challenge-main"):
                yield Static(
                    f"{session.participant_name} / {engine.registry.display_title(challenge.id)}",
                    classes="title",
                )
                yield Static(
                    f"Progress: {engine.completed_count} / {engine.total} challenges completed"
                    f"   Score: {round_score(session.score)}",
                    id="progress",
                )
                yield unit_for(challenge, current_score=session.score)

    def action_focus_rail(self) -> None:
        self.query_one(NavRail).focus()

    def on_challenge_unit_completed(self, message: ChallengeUnit.Completed) -> None:
        message.stop()
        self.run_worker(self._complete(message), exclusive=True)

    def on_nav_rail_jump(self, message: NavRail.Jump) -> None:
        message.stop()
        self.run_worker(self._jump(message.challenge_id), exclusive=True)

    async def _complete(self, message: ChallengeUnit.Completed) -> None:
        app = self.app
        event = message.event
        engine = app.engine
        await app.call_engine(engine.handle_event(event))

        if (
            event.success
            and engine.current_challenge == event.challenge_id
            and event.challenge_id in engine.session.completed
        ):
            app.notify("Challenge complete!", title=event.challenge_id, timeout=2)
            await app.call_engine(engine.advance())
        app.show_current()

    async def _jump(self, challenge_id: str) -> None:
        app = self.app
        await app.call_engine(app.engine.jump_to(challenge_id))
        app.show_current()
