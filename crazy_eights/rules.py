"""Rule utilities for Crazy Eights."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .cards import Card, Suit
from .state import GameState, GameStatus, Side

__all__ = [
    "IllegalPlay",
    "InvalidTransition",
    "is_playable",
    "playable_cards",
    "has_legal_move",
    "can_draw",
    "suit_counts",
    "most_frequent_suit",
]


class IllegalPlay(RuntimeError):
    """Raised when a card is not in hand or cannot follow the top card."""


class InvalidTransition(RuntimeError):
    """Raised when an action does not fit the current status or turn."""


def is_playable(card: Card, top_card: Card, current_suit: Suit | None) -> bool:
    """Return ``True`` when ``card`` may be played on ``top_card``.

    Eights are always playable; otherwise the rank must match the top card or
    the suit must match the active suit.
    """

    return card.is_wild or card.rank is top_card.rank or card.suit is current_suit


def playable_cards(hand: Sequence[Card], top_card: Card | None, current_suit: Suit | None) -> List[Card]:
    """Return the cards of ``hand`` that are legal to play, in hand order."""

    if top_card is None:
        return []
    return [card for card in hand if is_playable(card, top_card, current_suit)]


def has_legal_move(state: GameState, side: Side) -> bool:
    return bool(playable_cards(state.hand_for(side), state.top_card, state.current_suit))


def can_draw(state: GameState) -> bool:
    """Return whether the human's draw affordance should be enabled."""

    if state.status is not GameStatus.PLAYING or state.turn is not Side.PLAYER:
        return False
    return not has_legal_move(state, Side.PLAYER)


def suit_counts(cards: Iterable[Card]) -> dict[Suit, int]:
    counts = {suit: 0 for suit in Suit}
    for card in cards:
        counts[card.suit] += 1
    return counts


def most_frequent_suit(cards: Iterable[Card]) -> Suit:
    """Return the most common suit in ``cards``.

    Ties go to the suit declared first in :class:`Suit`.
    """

    counts = suit_counts(cards)
    return max(Suit, key=lambda suit: counts[suit])
