"""Entry point for the Little Lemon menu app."""

from __future__ import annotations

from little_lemon.logs import setup_logging
from little_lemon.menu_app import LittleLemonApp


def main() -> None:
    """Run the Textual application."""
    setup_logging()
    LittleLemonApp().run()


if __name__ == "__main__":
    main()
