"""Prompt shown when a returning participant is resumed."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ContinueScreen(ModalScreen[bool]):
    """Tell a returning participant they will pick up where they left off."""

    CSS = """
    ContinueScreen {
        align: center middle;
    }

    #continue-dialog {
        width: 50;
        height: auto;
        padding: 1 2;
        border: solid $primary;
        background: $surface-darken-1;
    }

    #continue-dialog Button {
        width: 100%;
        margin-top: 1;
    }
    """

    def __init__(self, participant_name: str, **kwargs):
        super().__init__(**kwargs)
        self.participant_name = participant_name

    def compose(self) -> ComposeResult:
        with Vertical(id="continue-dialog"):
            yield Static(f"Welcome Back, {self.participant_name}!", classes="title")
            yield Static("You will continue from where you left off.")
            yield Button("Agree", id="btn-agree", variant="success")

    def on_mount(self) -> None:
        self.query_one("#btn-agree", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-agree":
            self.dismiss(True)
