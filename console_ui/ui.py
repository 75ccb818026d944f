"""Console rendering of game events and the hit/stand prompt."""

import sys
from typing import Callable, TextIO

from core.game import EndState, EventType, GameEvent, PlayerAction, parse_action
from core.participant import Participant

PROMPT = "Hit or Stand (h/s)? "
INVALID_INPUT_HINT = "Please enter 'h' to hit or 's' to stand."

OUTCOME_MESSAGES = {
    EndState.WIN: "You won!!!",
    EndState.TIE: "A tie!",
    EndState.LOSS: "You lost :(",
}


class ConsoleUI:
    """
    Prints what happens at the table and reads the player's decisions.

    Subscribe ``handle_event`` to a game and pass ``ask_action`` as its
    action source.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._input = input_fn or input
        self._out = out or sys.stdout
        self._renderers: dict[EventType, Callable[[GameEvent], None]] = {
            EventType.ROUND_STARTED: self._on_round_started,
            EventType.CARD_DRAWN: self._on_card_drawn,
            EventType.HANDS_SHOWN: self._on_hands_shown,
            EventType.PLAYER_TURN_STARTED: self._on_turn_started,
            EventType.DEALER_TURN_STARTED: self._on_turn_started,
            EventType.DEALER_STANDS: self._on_dealer_stands,
            EventType.PLAYER_BUSTS: self._on_bust,
            EventType.DEALER_BUSTS: self._on_bust,
        }

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def handle_event(self, event: GameEvent) -> None:
        """Render a game event; events without a renderer are skipped."""
        renderer = self._renderers.get(event.event_type)
        if renderer is not None:
            renderer(event)

    def _on_round_started(self, event: GameEvent) -> None:
        self._print("Welcome to Blackjack!")

    def _on_card_drawn(self, event: GameEvent) -> None:
        self._print(f"{event.data['participant']} draws a card: {event.data['card']}")

    def _on_hands_shown(self, event: GameEvent) -> None:
        for hand in event.data["hands"]:
            self._print()
            cards = " ".join(str(card) for card in hand["cards"])
            self._print(f"{hand['name']} hand: {cards}")
            self._print(f"Score: {hand['score']}")
        self._print()

    def _on_turn_started(self, event: GameEvent) -> None:
        self._print(f"{event.data['name']}'s turn")

    def _on_dealer_stands(self, event: GameEvent) -> None:
        self._print("Dealer Stands")

    def _on_bust(self, event: GameEvent) -> None:
        self._print("Bust!")

    def ask_action(self, participant: Participant) -> PlayerAction:
        """Prompt until the player types a hit or stand command."""
        while True:
            action = parse_action(self._input(PROMPT))
            if action is not None:
                return action
            self._print(INVALID_INPUT_HINT)

    def show_outcome(self, outcome: EndState) -> None:
        self._print(OUTCOME_MESSAGES[outcome])
