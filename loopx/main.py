"""Entry point for loopx."""

import sys

from .ui.app import LoopxApp


def main() -> int:
    """Run the loopx application."""
    app = LoopxApp()
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
