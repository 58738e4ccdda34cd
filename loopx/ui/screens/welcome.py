"""Welcome screen with name entry."""

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Button, Input, Label, Static

from ...errors import InvalidNameError
from ...models import NAME_MAX_LENGTH, validate_name


class WelcomeScreen(Screen):
    """Ask for the participant's name before the run starts."""

    CSS = """
    #name-form {
        height: auto;
        margin: 1 0;
        padding: 1;
        background: $surface-darken-1;
        border: solid $primary;
    }

    #name-form Button {
        width: 100%;
        margin-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the welcome screen."""
        with Container(id="main-content"):
            yield Static("Welcome to the LoopX Challenge!", classes="title")
            yield Static(
                "Enter your full name to start, or to continue where you left off.",
                classes="subtitle",
            )

            with Vertical(id="name-form"):
                yield Input(placeholder="Full Name", max_length=NAME_MAX_LENGTH, id="name-input")
                yield Label("", id="name-error", classes="error")
                yield Button("Start Challenges", id="btn-start", variant="primary")

            yield Static("Press F1 for keyboard shortcuts", classes="hint")

    def on_mount(self) -> None:
        self.query_one("#name-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_input_changed(self, event: Input.Changed) -> None:
        self.query_one("#name-error", Label).update("")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-start":
            self._submit()

    def _submit(self) -> None:
        raw = self.query_one("#name-input", Input).value
        try:
            name = validate_name(raw)
        except InvalidNameError as e:
            self.query_one("#name-error", Label).update(str(e))
            return

        self.query_one("#btn-start", Button).disabled = True
        self.app.run_worker(self.app.start_participant(name), exclusive=True, group="start")
