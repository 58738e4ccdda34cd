"""Leaderboard screen."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import DataTable, Static


class LeaderboardScreen(Screen):
    """Top scores."""

    BINDINGS = [
        Binding("escape", "go_back", "Back", show=True),
    ]

    def compose(self) -> ComposeResult:
        with Container(id="main-content"):
            yield Static("Leaderboard", classes="title")
            yield DataTable(id="scores", cursor_type="row")

    def on_mount(self) -> None:
        table = self.query_one("#scores", DataTable)
        table.add_columns("#", "Name", "Score")
        self.run_worker(self._load(), exclusive=True)

    async def _load(self) -> None:
        scores = await self.app.load_leaderboard()
        table = self.query_one("#scores", DataTable)
        for rank, row in enumerate(scores, start=1):
            table.add_row(str(rank), row.name, str(row.score))
        if not scores:
            self.mount(Static("No scores yet.", classes="hint"))

    def action_go_back(self) -> None:
        self.app.pop_screen()
