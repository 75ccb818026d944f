"""Participants (player or dealer) and their running score."""

from dataclasses import dataclass, field

from core.cards import Card, Deck

TARGET_SCORE = 21


@dataclass
class Participant:
    """A named participant with a hand and an incrementally kept score."""

    name: str
    hand: list[Card] = field(default_factory=list)
    score: int = 0

    def draw(self, deck: Deck) -> int:
        """
        Draw the next card from the deck into the hand.

        Returns:
            The value the card added to the score
        """
        card = deck.deal()
        self.hand.append(card)
        self.score += card.value
        return card.value

    @property
    def is_bust(self) -> bool:
        """Check if the score is over 21."""
        return self.score > TARGET_SCORE

    def hand_summary(self) -> tuple[tuple[Card, ...], int]:
        """Return the cards held and the score."""
        return tuple(self.hand), self.score

    def __len__(self) -> int:
        return len(self.hand)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.hand)
        return f"{self.name} hand: {cards_str} (score {self.score})"
