"""Navigation rail listing every challenge."""

from textual.message import Message
from textual.widgets import Label, ListItem, ListView

from ...challenges import ChallengeId
from ...session import RailEntry


class RailItem(ListItem):
    """One challenge in the rail."""

    def __init__(self, entry: RailEntry) -> None:
        label = f"{entry.position}. {entry.challenge.title}"
        if entry.completed:
            label += " ✅"
        super().__init__(Label(label))
        self.challenge_id = entry.challenge.id
        if entry.completed:
            self.add_class("-completed")
        if entry.is_current:
            self.add_class("-current")


class NavRail(ListView):
    """Jump list. Selecting an entry asks the engine to jump there."""

    DEFAULT_CSS = """
    NavRail {
        width: 32;
        border: solid $primary;
    }

    NavRail > RailItem.-completed {
        color: $success;
    }

    NavRail > RailItem.-current {
        text-style: bold;
        background: $primary-darken-2;
    }
    """

    class Jump(Message):
        """Message emitted when the participant picks a rail entry."""

        def __init__(self, challenge_id: ChallengeId) -> None:
            self.challenge_id = challenge_id
            super().__init__()

    def __init__(self, entries: list[RailEntry], **kwargs) -> None:
        current = next((i for i, e in enumerate(entries) if e.is_current), None)
        super().__init__(*(RailItem(e) for e in entries), initial_index=current, **kwargs)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        if isinstance(event.item, RailItem):
            self.post_message(self.Jump(event.item.challenge_id))
