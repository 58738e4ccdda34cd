"""loopx - session and progress engine for timed challenge runs."""

__version__ = "0.1.0"
