"""End-of-run screen."""

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Button, Static

from ...models import round_score
from .welcome import WelcomeScreen


class DoneScreen(Screen):
    """Final score and the way out of a finished session."""

    CSS = """
    #done-actions {
        height: auto;
        margin: 1 0;
    }

    #done-actions Button {
        width: 100%;
        margin: 1 0;
    }
    """

    def compose(self) -> ComposeResult:
        engine = self.app.engine
        session = engine.session

        with Container(id="main-content"):
            yield Static(f"Well done, {session.participant_name}!", classes="title")
            yield Static(
                f"Final score: {round_score(session.score)}   "
                f"Completed: {engine.completed_count} / {engine.total}",
                classes="subtitle",
            )
            with Vertical(id="done-actions"):
                yield Button("Finish", id="btn-finish", variant="primary")
                yield Button("Leaderboard", id="btn-leaderboard", variant="default")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-finish":
            self.run_worker(self._finish(), exclusive=True)
        elif event.button.id == "btn-leaderboard":
            self.app.action_leaderboard()

    async def _finish(self) -> None:
        await self.app.call_engine(self.app.engine.finish())
        if self.app.engine.session is not None:
            return
        self.app.switch_screen(WelcomeScreen())
