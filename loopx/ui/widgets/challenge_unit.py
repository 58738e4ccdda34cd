"""Base widget for challenge units and the placeholder unit."""

from typing import Optional, Type

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input, Label, Static

from ...challenges import Challenge, ChallengeId
from ...models import CompletionEvent


class ChallengeUnit(Widget):
    """A self-contained challenge.

    Units know nothing about sessions, ordering or persistence. They render,
    take input and post a Completed message carrying a CompletionEvent.
    """

    DEFAULT_CSS = """
    ChallengeUnit {
        height: auto;
        margin: 1 0;
        padding: 1 2;
        border: solid $primary;
        background: $surface-darken-1;
    }
    """

    class Completed(Message):
        """Message emitted when the unit has a result to report."""

        def __init__(self, event: CompletionEvent) -> None:
            self.event = event
            super().__init__()

    def __init__(self, challenge: Challenge, current_score: float = 0, **kwargs) -> None:
        super().__init__(**kwargs)
        self.challenge = challenge
        self.current_score = current_score

    def report(self, success: bool = True, score: Optional[float] = None) -> None:
        """Report a result.

        Args:
            success: Whether the challenge was solved
            score: Total score the participant should now have
        """
        self.post_message(
            self.Completed(
                CompletionEvent(
                    challenge_id=self.challenge.id,
                    success=success,
                    score_value=score,
                )
            )
        )


class PlaceholderUnit(ChallengeUnit):
    """Fallback unit: the participant self-reports completion and points."""

    def compose(self) -> ComposeResult:
        yield Label(self.challenge.title, classes="title")
        yield Static(
            self.challenge.description
            or "Complete this challenge at the station, then record it here.",
            classes="hint",
        )
        yield Input(placeholder="Points earned (optional)", type="integer", id="unit-points")
        with Horizontal():
            yield Button("Mark complete", id="btn-complete", variant="success")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id != "btn-complete":
            return

        raw = self.query_one("#unit-points", Input).value.strip()
        score = self.current_score + int(raw) if raw else None
        self.report(success=True, score=score)


UNIT_REGISTRY: dict[ChallengeId, Type[ChallengeUnit]] = {}


def register_unit(challenge_id: ChallengeId):
    """Class decorator registering a unit for a challenge id."""

    def decorator(cls: Type[ChallengeUnit]) -> Type[ChallengeUnit]:
        UNIT_REGISTRY[challenge_id] = cls
        return cls

    return decorator


def unit_for(challenge: Challenge, current_score: float = 0) -> ChallengeUnit:
    """Instantiate the unit registered for a challenge, or the placeholder."""
    unit_class = UNIT_REGISTRY.get(challenge.id, PlaceholderUnit)
    return unit_class(challenge, current_score=current_score)
