"""Tests for the challenge unit plug-in registry."""

from loopx.challenges import Challenge
from loopx.ui.widgets import UNIT_REGISTRY, ChallengeUnit, PlaceholderUnit, register_unit, unit_for


class TestUnitRegistry:
    """Test unit lookup by challenge id."""

    def test_placeholder_fallback(self):
        unit = unit_for(Challenge(id="typing", title="Speed Typing"), current_score=12)
        assert isinstance(unit, PlaceholderUnit)
        assert unit.current_score == 12

    def test_registered_unit(self):
        @register_unit("custom_quiz")
        class QuizUnit(ChallengeUnit):
            pass

        try:
            unit = unit_for(Challenge(id="custom_quiz", title="Quiz"))
            assert isinstance(unit, QuizUnit)
            assert unit.challenge.id == "custom_quiz"
        finally:
            UNIT_REGISTRY.pop("custom_quiz", None)
