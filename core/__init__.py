"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, DeckExhaustedError, Rank, Suit, create_rng
from core.participant import Participant, TARGET_SCORE

__all__ = [
    "Card",
    "Deck",
    "DeckExhaustedError",
    "Rank",
    "Suit",
    "create_rng",
    "Participant",
    "TARGET_SCORE",
]
