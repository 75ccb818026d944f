"""Pytest fixtures for console blackjack tests."""

from random import Random

import pytest
from hypothesis import strategies as st

from core.cards import Card, Deck, Rank, Suit
from core.game import BlackjackGame, PlayerAction
from core.participant import Participant


def cards(*tokens: str) -> list[Card]:
    """Build cards from short strings like '7C' or 'A♠'."""
    return [Card.from_string(token) for token in tokens]


def scripted_actions(*actions: PlayerAction):
    """Action source that replays the given decisions in order."""
    remaining = iter(actions)
    return lambda player: next(remaining)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def player():
    """A player with an empty hand."""
    return Participant("Player")


@pytest.fixture
def stacked_game():
    """Factory for a game dealing the given cards first."""

    def _make(*tokens: str) -> BlackjackGame:
        return BlackjackGame(deck=Deck.stacked(cards(*tokens)))

    return _make


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)
