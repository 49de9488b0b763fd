"""Action records and state transitions for Crazy Eights."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Union

from . import rules
from .cards import Card, RandomSource, Suit, create_deck, shuffle
from .rules import IllegalPlay, InvalidTransition
from .state import DEFAULT_CONFIG, Difficulty, GameConfig, GameState, GameStatus, Side, deal_new_game

logger = logging.getLogger(__name__)

__all__ = [
    "StartGame",
    "GoHome",
    "DrawCard",
    "PlayCard",
    "ChooseSuit",
    "Action",
    "start_game",
    "go_home",
    "draw_card",
    "play_card",
    "choose_suit",
    "reduce",
]


@dataclass(frozen=True)
class StartGame:
    """Deal a new game at the given difficulty."""

    difficulty: Difficulty = Difficulty.NORMAL


@dataclass(frozen=True)
class GoHome:
    """Return to the pre-game screen."""


@dataclass(frozen=True)
class DrawCard:
    """Draw one card from the deck for ``side``."""

    side: Side


@dataclass(frozen=True)
class PlayCard:
    """Play ``card`` from the hand of ``side``."""

    card: Card
    side: Side


@dataclass(frozen=True)
class ChooseSuit:
    """Declare the active suit after the human played an 8."""

    suit: Suit


Action = Union[StartGame, GoHome, DrawCard, PlayCard, ChooseSuit]


def start_game(
    difficulty: Difficulty,
    rng: RandomSource | None = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """Shuffle a fresh deck and deal a new game."""

    return deal_new_game(difficulty, shuffle(create_deck(), rng), config)


def go_home(state: GameState) -> None:
    """Force the state back to ``waiting``; piles are left as they are."""

    state.status = GameStatus.WAITING
    state.winner = None


def _require_turn(state: GameState, side: Side, verb: str) -> None:
    if state.status is not GameStatus.PLAYING:
        raise InvalidTransition(f"cannot {verb} while status is {state.status.value}")
    if state.turn is not side:
        raise InvalidTransition(f"cannot {verb} for {side.value}: it is {state.turn.value}'s turn")


def draw_card(state: GameState, side: Side) -> Card | None:
    """Move the deck's tail card into ``side``'s hand and settle the turn.

    Returns the drawn card, or ``None`` when the deck is exhausted (the turn
    passes without drawing).
    """

    _require_turn(state, side, "draw")
    if not state.deck:
        state.turn = state.turn.other
        logger.debug("%s tried to draw from an empty deck; turn passes", side.value)
        return None

    drawn = state.deck.pop()
    state.hand_for(side).append(drawn)
    top = state.top_card
    if top is None or not rules.is_playable(drawn, top, state.current_suit):
        state.turn = side.other
    logger.debug("%s drew %s, turn now %s", side.value, drawn.label(), state.turn.value)
    return drawn


def play_card(state: GameState, card: Card, side: Side) -> None:
    """Move ``card`` from ``side``'s hand to the discard pile.

    Validation happens before any mutation; :class:`IllegalPlay` leaves the
    state untouched.
    """

    _require_turn(state, side, "play")
    hand = state.hand_for(side)
    if card not in hand:
        raise IllegalPlay(f"{card.label()} is not in the {side.value} hand")
    top = state.top_card
    if top is None or not rules.is_playable(card, top, state.current_suit):
        raise IllegalPlay(f"{card.label()} cannot be played on the current pile")

    hand.remove(card)
    state.discard_pile.append(card)

    if not hand:
        state.status = GameStatus.GAME_OVER
        state.winner = side
        logger.info("%s wins by playing %s", side.value, card.label())
        return

    if card.is_wild:
        if side is Side.PLAYER:
            state.status = GameStatus.CHOOSING_SUIT
            logger.debug("player played %s, awaiting suit choice", card.label())
            return
        state.current_suit = rules.most_frequent_suit(hand)
        logger.debug("ai played %s and chose %s", card.label(), state.current_suit.value)
    else:
        state.current_suit = card.suit
        logger.debug("%s played %s", side.value, card.label())
    state.turn = side.other


def choose_suit(state: GameState, suit: Suit) -> None:
    """Apply the human's suit declaration and hand the turn to the computer."""

    if state.status is not GameStatus.CHOOSING_SUIT:
        raise InvalidTransition(f"cannot choose a suit while status is {state.status.value}")
    state.current_suit = suit
    state.status = GameStatus.PLAYING
    state.turn = Side.AI
    logger.debug("player chose %s", suit.value)


def reduce(
    state: GameState,
    action: Action,
    *,
    rng: RandomSource | None = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """Return the state that results from applying ``action`` to ``state``.

    ``state`` is never mutated. Rejected actions raise :class:`IllegalPlay`
    or :class:`InvalidTransition`.
    """

    if isinstance(action, StartGame):
        return start_game(action.difficulty, rng if rng is not None else random.Random(), config)

    next_state = state.clone()
    if isinstance(action, GoHome):
        go_home(next_state)
    elif isinstance(action, DrawCard):
        draw_card(next_state, action.side)
    elif isinstance(action, PlayCard):
        play_card(next_state, action.card, action.side)
    elif isinstance(action, ChooseSuit):
        choose_suit(next_state, action.suit)
    else:  # pragma: no cover - defensive branch
        raise ValueError(f"Unknown action {action!r}")
    return next_state
