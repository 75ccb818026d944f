"""Text console front end for the blackjack engine."""

from console_ui.ui import ConsoleUI

__all__ = ["ConsoleUI"]
