"""Session state machine and navigation."""

from .engine import RailEntry, SessionEngine

__all__ = ["RailEntry", "SessionEngine"]
