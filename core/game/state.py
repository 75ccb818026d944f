"""Round phases, player-turn states and round outcomes."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: READY → DEALING → PLAYER_TURN → DEALER_TURN → ROUND_COMPLETE
    """

    # Deck shuffled, nothing dealt
    READY = auto()

    # Initial cards being dealt
    DEALING = auto()

    # Player decides hit or stand
    PLAYER_TURN = auto()

    # Dealer draws against the player's score
    DEALER_TURN = auto()

    # Outcome decided, nothing more to play
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class TurnState(Enum):
    """States of the interactive player turn."""

    AWAITING_CHOICE = auto()
    BUSTED = auto()
    STANDING = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not TurnState.AWAITING_CHOICE


class EndState(Enum):
    """Outcome of a round from the player's point of view."""

    WIN = auto()
    LOSS = auto()
    TIE = auto()

    def __str__(self) -> str:
        return self.name.lower()
