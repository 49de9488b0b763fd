"""Card abstractions and deck helpers for Crazy Eights."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Protocol, Sequence


class Suit(str, Enum):
    """Enumeration of the four suits; declaration order is the tie-break order."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


_SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


class Rank(str, Enum):
    """Enumeration of ranks in display order."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @classmethod
    def deck_order(cls) -> tuple["Rank", ...]:
        """Return ranks in the order a fresh deck is assembled (Ace first)."""

        return (
            cls.ACE,
            cls.TWO,
            cls.THREE,
            cls.FOUR,
            cls.FIVE,
            cls.SIX,
            cls.SEVEN,
            cls.EIGHT,
            cls.NINE,
            cls.TEN,
            cls.JACK,
            cls.QUEEN,
            cls.KING,
        )


WILD_RANK = Rank.EIGHT
DECK_SIZE = 52


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single playing card."""

    rank: Rank
    suit: Suit

    @property
    def id(self) -> str:
        return f"{self.rank.value}-{self.suit.value}"

    @property
    def is_wild(self) -> bool:
        """Return ``True`` for rank-8 cards."""

        return self.rank is WILD_RANK

    def label(self) -> str:
        """Create a display label suitable for CLI representations."""

        return f"{self.rank.value}{self.suit.symbol}"

    @classmethod
    def from_id(cls, card_id: str) -> "Card":
        rank, sep, suit = card_id.partition("-")
        if not sep:
            raise ValueError(f"invalid card id '{card_id}'")
        return cls(rank=Rank(rank), suit=Suit(suit))


class RandomSource(Protocol):
    """Subset of :class:`random.Random` used by the deck and opponent helpers."""

    def randrange(self, stop: int) -> int: ...

    def choice(self, seq: Sequence[Card]) -> Card: ...


def create_deck() -> List[Card]:
    """Return the 52 cards in a deterministic order, suit by suit."""

    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank.deck_order()]


def shuffle(cards: Sequence[Card], rng: RandomSource | None = None) -> List[Card]:
    """Return a uniformly shuffled copy of ``cards`` (Fisher-Yates).

    ``rng`` only needs a ``randrange`` method; the input sequence is left
    untouched.
    """

    source = rng if rng is not None else random.Random()
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = source.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(card.label() for card in cards)
