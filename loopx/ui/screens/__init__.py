"""UI Screens."""

from .challenge import ChallengeScreen
from .continue_prompt import ContinueScreen
from .done import DoneScreen
from .leaderboard import LeaderboardScreen
from .welcome import WelcomeScreen

__all__ = [
    "ChallengeScreen",
    "ContinueScreen",
    "DoneScreen",
    "LeaderboardScreen",
    "WelcomeScreen",
]
