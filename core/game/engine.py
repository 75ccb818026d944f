"""Blackjack round engine with state machines for the round and the player turn."""

from random import Random
from typing import Callable

from transitions import Machine, MachineError

from core.cards import Deck, create_rng
from core.participant import Participant
from core.game.actions import PlayerAction
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import EndState, GameState, TurnState
from logging_utils import get_logger

logger = get_logger(__name__)

# Asked once per decision point until the player turn ends
ActionSource = Callable[[Participant], PlayerAction]


def draw_card(participant: Participant, deck: Deck, events: EventEmitter) -> int:
    """Draw one card for a participant and announce it."""
    value = participant.draw(deck)
    card = participant.hand[-1]
    logger.debug("%s drew %s, score now %d", participant.name, card, participant.score)
    events.emit_new(
        EventType.CARD_DRAWN,
        participant=participant.name,
        card=card,
        value=value,
        score=participant.score,
    )
    return value


def evaluate_scores(player_score: int, dealer_score: int) -> EndState:
    """
    Compare final scores once neither side has busted.

    Returns:
        WIN if the player is ahead, TIE on equal scores, LOSS otherwise
    """
    if player_score > dealer_score:
        return EndState.WIN
    if player_score == dealer_score:
        return EndState.TIE
    return EndState.LOSS


def _hand_data(participant: Participant) -> dict:
    cards, score = participant.hand_summary()
    return {"name": participant.name, "cards": cards, "score": score}


class PlayerTurn:
    """
    Interactive player turn.

    AWAITING_CHOICE loops on hits until the player stands (STANDING)
    or goes over 21 (BUSTED).
    """

    STATES = [s.name.lower() for s in TurnState]

    TRANSITIONS = [
        # Conditions are checked in order; the first match wins
        {
            "trigger": "record_hit",
            "source": "awaiting_choice",
            "dest": "busted",
            "conditions": "_player_is_bust",
        },
        {"trigger": "record_hit", "source": "awaiting_choice", "dest": "awaiting_choice"},
        {"trigger": "record_stand", "source": "awaiting_choice", "dest": "standing"},
    ]

    def __init__(
        self,
        player: Participant,
        deck: Deck,
        events: EventEmitter | None = None,
    ) -> None:
        self.player = player
        self.deck = deck
        self.events = events or EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="awaiting_choice",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> TurnState:
        """Get current turn state as enum."""
        return TurnState[self._machine_state.upper()]  # type: ignore

    @property
    def is_finished(self) -> bool:
        return self.state.is_terminal

    @property
    def busted(self) -> bool:
        return self.state is TurnState.BUSTED

    def _player_is_bust(self) -> bool:
        return self.player.is_bust

    def hit(self) -> int:
        """
        Draw one card for the player.

        Returns:
            The value of the drawn card

        Raises:
            MachineError: If the turn is already over
        """
        if self.is_finished:
            raise MachineError(f"Cannot hit, player turn is {self.state.name}")

        value = draw_card(self.player, self.deck, self.events)
        self.events.emit_new(EventType.PLAYER_HIT, value=value, score=self.player.score)
        self.events.emit_new(EventType.HANDS_SHOWN, hands=[_hand_data(self.player)])
        self.record_hit()  # type: ignore[attr-defined]
        return value

    def stand(self) -> None:
        """End the turn keeping the current score."""
        self.record_stand()  # type: ignore[attr-defined]
        self.events.emit_new(EventType.PLAYER_STAND, score=self.player.score)

    def apply(self, action: PlayerAction) -> TurnState:
        """Apply one player decision and return the resulting state."""
        if action is PlayerAction.HIT:
            self.hit()
        elif action is PlayerAction.STAND:
            self.stand()
        else:
            raise ValueError(f"Unknown player action: {action!r}")
        return self.state


class BlackjackGame:
    """
    One round of blackjack against the dealer.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_dealing", "source": "ready", "dest": "dealing"},
        {"trigger": "start_player_turn", "source": "dealing", "dest": "player_turn"},
        {"trigger": "start_dealer_turn", "source": "player_turn", "dest": "dealer_turn"},
        {
            "trigger": "finish_round",
            "source": ["dealing", "player_turn", "dealer_turn"],
            "dest": "round_complete",
        },
    ]

    def __init__(
        self,
        rng: Random | None = None,
        deck: Deck | None = None,
        dealer_name: str = "Dealer",
        player_name: str = "Player",
    ) -> None:
        """
        Initialize a new round.

        Args:
            rng: Random number generator used to shuffle a fresh deck
            deck: Pre-arranged deck to deal from as-is (not shuffled)
            dealer_name: Display name of the dealer
            player_name: Display name of the player
        """
        if deck is None:
            deck = Deck(rng=rng or create_rng())
            deck.shuffle()
        self.deck = deck

        self.dealer = Participant(dealer_name)
        self.player = Participant(player_name)
        self.events = EventEmitter()
        self.player_turn: PlayerTurn | None = None
        self.outcome: EndState | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="ready",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current round state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def play_round(self, choose_action: ActionSource) -> EndState:
        """
        Play the whole round.

        Args:
            choose_action: Called with the player whenever a hit/stand
                decision is needed

        Returns:
            The outcome for the player

        Raises:
            MachineError: If this game has already been played
        """
        self.start_dealing()  # type: ignore[attr-defined]
        self.events.emit_new(EventType.ROUND_STARTED)

        draw_card(self.dealer, self.deck, self.events)
        draw_card(self.player, self.deck, self.events)
        draw_card(self.player, self.deck, self.events)

        # Only two aces can do this
        if self.player.is_bust:
            self.events.emit_new(EventType.PLAYER_BUSTS, score=self.player.score)
            return self._finish(EndState.LOSS)

        self.events.emit_new(
            EventType.HANDS_SHOWN,
            hands=[_hand_data(self.dealer), _hand_data(self.player)],
        )

        self.start_player_turn()  # type: ignore[attr-defined]
        if self.play_player_turn(choose_action):
            self.events.emit_new(EventType.PLAYER_BUSTS, score=self.player.score)
            return self._finish(EndState.LOSS)

        self.start_dealer_turn()  # type: ignore[attr-defined]
        if self.play_dealer_turn(self.player.score):
            return self._finish(EndState.WIN)

        return self._finish(evaluate_scores(self.player.score, self.dealer.score))

    def play_player_turn(self, choose_action: ActionSource) -> bool:
        """
        Run the interactive player turn until the player stands or busts.

        Returns:
            True if the player busted
        """
        self.events.emit_new(EventType.PLAYER_TURN_STARTED, name=self.player.name)
        turn = PlayerTurn(self.player, self.deck, self.events)
        self.player_turn = turn

        while not turn.is_finished:
            action = choose_action(self.player)
            logger.debug("%s chose %s at %d", self.player.name, action, self.player.score)
            turn.apply(action)

        return turn.busted

    def play_dealer_turn(self, player_score: int) -> bool:
        """
        Dealer draws while behind the player's final score.

        Bust is only checked once drawing stops, so a dealer still below
        ``player_score`` keeps drawing even past 21.

        Returns:
            True if the dealer busted
        """
        self.events.emit_new(EventType.DEALER_TURN_STARTED, name=self.dealer.name)

        while self.dealer.score < player_score:
            draw_card(self.dealer, self.deck, self.events)

        busted = self.dealer.is_bust
        if not busted:
            self.events.emit_new(EventType.DEALER_STANDS, score=self.dealer.score)

        self.events.emit_new(EventType.HANDS_SHOWN, hands=[_hand_data(self.dealer)])

        if busted:
            self.events.emit_new(EventType.DEALER_BUSTS, score=self.dealer.score)
        return busted

    def _finish(self, outcome: EndState) -> EndState:
        """Close the round and record its outcome."""
        self.finish_round()  # type: ignore[attr-defined]
        self.outcome = outcome
        logger.debug(
            "Round ended: %s (player %d, dealer %d)",
            outcome,
            self.player.score,
            self.dealer.score,
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome,
            player_score=self.player.score,
            dealer_score=self.dealer.score,
        )
        return outcome
