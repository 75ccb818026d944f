"""Player decisions and parsing of typed commands."""

from enum import Enum


class PlayerAction(Enum):
    """Choices available on the player's turn."""

    HIT = "h"
    STAND = "s"

    def __str__(self) -> str:
        return self.name.lower()


_ACTION_TOKENS = {
    "h": PlayerAction.HIT,
    "hit": PlayerAction.HIT,
    "s": PlayerAction.STAND,
    "stand": PlayerAction.STAND,
}


def parse_action(token: str) -> PlayerAction | None:
    """
    Map a typed command to an action.

    Args:
        token: Raw text entered by the player

    Returns:
        The matching action, or None if the text is not recognised
    """
    return _ACTION_TOKENS.get(token.strip().lower())
