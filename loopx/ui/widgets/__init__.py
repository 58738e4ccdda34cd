"""UI widgets."""

from .challenge_unit import UNIT_REGISTRY, ChallengeUnit, PlaceholderUnit, register_unit, unit_for
from .nav_rail import NavRail, RailItem

__all__ = [
    "UNIT_REGISTRY",
    "ChallengeUnit",
    "NavRail",
    "PlaceholderUnit",
    "RailItem",
    "register_unit",
    "unit_for",
]
