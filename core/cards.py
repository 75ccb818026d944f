"""Card and Deck classes - immutable cards dealt from a single 52-card deck."""

import secrets
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

from logging_utils import get_logger

logger = get_logger(__name__)

DECK_SIZE = 52


class DeckExhaustedError(IndexError):
    """Raised when a card is dealt after all 52 cards have been dealt."""


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the point value (Ace is always 11, face cards 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards


_RANK_TOKENS = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

_SUIT_TOKENS = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the point value of the card."""
        return self.rank.blackjack_value

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '7♣', 'AS', 'Td' or '10H'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_TOKENS:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_TOKENS:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_TOKENS[rank_str], _SUIT_TOKENS[suit_str])


def _canonical_order() -> list[Card]:
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def create_rng(seed: int | None = None) -> Random:
    """
    Build the random source used to shuffle decks.

    Args:
        seed: Fixed seed for reproducible games, or None to seed from
            the operating system's entropy pool.
    """
    if seed is None:
        seed = secrets.randbits(256)
    return Random(seed)


class Deck:
    """
    A standard 52-card deck dealt front to back.

    The deck always holds each of the 52 cards exactly once; dealing only
    advances a cursor over the current order.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a deck in canonical rank-within-suit order."""
        self._rng = rng or Random()
        self._cards: list[Card] = _canonical_order()
        self._next_index = 0

    @classmethod
    def stacked(cls, top_cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Create a deck whose next cards are exactly ``top_cards``.

        The rest of the deck follows in canonical order.

        Args:
            top_cards: Cards to deal first, in dealing order
            rng: Random number generator used if the deck is shuffled

        Raises:
            ValueError: If ``top_cards`` repeats a card
        """
        top = list(top_cards)
        if len(set(top)) != len(top):
            raise ValueError("Stacked cards must be distinct")

        deck = cls(rng=rng)
        chosen = set(top)
        deck._cards = top + [card for card in deck._cards if card not in chosen]
        return deck

    def shuffle(self) -> None:
        """
        Shuffle the whole deck.

        Raises:
            RuntimeError: If cards have already been dealt
        """
        if self._next_index:
            raise RuntimeError("Cannot shuffle a deck that has been dealt from")
        self._rng.shuffle(self._cards)
        logger.debug("Deck shuffled")

    def deal(self) -> Card:
        """
        Deal the next card and advance the cursor.

        Raises:
            DeckExhaustedError: If all 52 cards have been dealt
        """
        if self._next_index >= len(self._cards):
            logger.error("Deal attempted on an exhausted deck")
            raise DeckExhaustedError(f"All {DECK_SIZE} cards have been dealt")
        card = self._cards[self._next_index]
        self._next_index += 1
        return card

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return every card in the current deck order, dealt or not."""
        return tuple(self._cards)

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards dealt."""
        return self._next_index

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards) - self._next_index

    def __len__(self) -> int:
        return self.cards_remaining

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards[self._next_index:])
