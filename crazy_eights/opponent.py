"""Computer opponent move selection."""

from __future__ import annotations

import random
from typing import Callable, Mapping, Sequence, Union

from . import rules
from .actions import DrawCard, PlayCard
from .cards import Card, RandomSource, Suit
from .state import Difficulty, GameState, GameStatus, Side

__all__ = ["Move", "STRATEGIES", "playable_for", "choose_card", "choose_move", "choose_suit", "opponent_to_move"]

Move = Union[PlayCard, DrawCard]
Strategy = Callable[[Sequence[Card], Sequence[Card], RandomSource], Card]


def _pick_easy(playable: Sequence[Card], hand: Sequence[Card], rng: RandomSource) -> Card:
    return rng.choice(playable)


def _pick_normal(playable: Sequence[Card], hand: Sequence[Card], rng: RandomSource) -> Card:
    for card in playable:
        if not card.is_wild:
            return card
    return playable[0]


def _pick_hard(playable: Sequence[Card], hand: Sequence[Card], rng: RandomSource) -> Card:
    # Shed the suit we hold most of; max() keeps the first card on ties.
    non_wild = [card for card in playable if not card.is_wild]
    if not non_wild:
        return playable[0]
    counts = rules.suit_counts(hand)
    return max(non_wild, key=lambda card: counts[card.suit])


STRATEGIES: Mapping[Difficulty, Strategy] = {
    Difficulty.EASY: _pick_easy,
    Difficulty.NORMAL: _pick_normal,
    Difficulty.HARD: _pick_hard,
}


def opponent_to_move(state: GameState) -> bool:
    """Return ``True`` when the computer should act on ``state``."""

    return state.status is GameStatus.PLAYING and state.turn is Side.AI


def playable_for(state: GameState, side: Side = Side.AI) -> list[Card]:
    return rules.playable_cards(state.hand_for(side), state.top_card, state.current_suit)


def choose_card(
    playable: Sequence[Card],
    hand: Sequence[Card],
    difficulty: Difficulty,
    rng: RandomSource | None = None,
) -> Card:
    """Pick one card from the non-empty ``playable`` list."""

    if not playable:
        raise ValueError("choose_card requires at least one playable card")
    source = rng if rng is not None else random.Random()
    return STRATEGIES[difficulty](playable, hand, source)


def choose_move(
    state: GameState,
    rng: RandomSource | None = None,
    side: Side = Side.AI,
    difficulty: Difficulty | None = None,
) -> Move:
    """Decide the next move for ``side`` without touching ``state``.

    ``difficulty`` defaults to the one the game was started with.
    """

    playable = playable_for(state, side)
    if not playable:
        return DrawCard(side=side)
    card = choose_card(playable, state.hand_for(side), difficulty or state.difficulty, rng)
    return PlayCard(card=card, side=side)


def choose_suit(state: GameState, side: Side = Side.PLAYER) -> Suit:
    """Suit a simulated side declares after its own 8."""

    return rules.most_frequent_suit(state.hand_for(side))
