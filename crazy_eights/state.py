"""Core game state data structures for Crazy Eights."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from .cards import DECK_SIZE, Card, Suit

logger = logging.getLogger(__name__)


class Side(str, Enum):
    """The two seats at the table."""

    PLAYER = "player"
    AI = "ai"

    @property
    def other(self) -> "Side":
        return Side.AI if self is Side.PLAYER else Side.PLAYER


class GameStatus(str, Enum):
    """Lifecycle phases of a single game."""

    WAITING = "waiting"
    PLAYING = "playing"
    CHOOSING_SUIT = "choosing_suit"
    GAME_OVER = "game_over"


class Difficulty(str, Enum):
    """Computer opponent strategies."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


@dataclass(slots=True)
class GameConfig:
    """Runtime configuration shared by the session, CLI and benchmark."""

    hand_size: int = 8
    opponent_delay: float = 1.5
    turn_limit: int = 500

    def __post_init__(self) -> None:
        if self.hand_size <= 0:
            raise ValueError("hand_size must be positive")
        if self.hand_size * 2 + 1 > DECK_SIZE:
            raise ValueError("hand_size leaves no card for the discard pile")
        if self.opponent_delay < 0:
            raise ValueError("opponent_delay must not be negative")
        if self.turn_limit <= 0:
            raise ValueError("turn_limit must be positive")


DEFAULT_CONFIG = GameConfig()


@dataclass(slots=True)
class GameState:
    """Authoritative state of one game; the reducer works on clones of it."""

    deck: List[Card] = field(default_factory=list)
    player_hand: List[Card] = field(default_factory=list)
    ai_hand: List[Card] = field(default_factory=list)
    discard_pile: List[Card] = field(default_factory=list)
    current_suit: Suit | None = None
    turn: Side = Side.PLAYER
    status: GameStatus = GameStatus.WAITING
    winner: Side | None = None
    difficulty: Difficulty = Difficulty.NORMAL

    @property
    def top_card(self) -> Card | None:
        return self.discard_pile[-1] if self.discard_pile else None

    def hand_for(self, side: Side) -> List[Card]:
        """Return the (mutable) hand list held by ``side``."""

        return self.player_hand if side is Side.PLAYER else self.ai_hand

    def card_count(self) -> int:
        return len(self.deck) + len(self.player_hand) + len(self.ai_hand) + len(self.discard_pile)

    def clone(self) -> "GameState":
        """Return a copy whose piles can be mutated independently."""

        return GameState(
            deck=list(self.deck),
            player_hand=list(self.player_hand),
            ai_hand=list(self.ai_hand),
            discard_pile=list(self.discard_pile),
            current_suit=self.current_suit,
            turn=self.turn,
            status=self.status,
            winner=self.winner,
            difficulty=self.difficulty,
        )


def waiting_state(difficulty: Difficulty = Difficulty.NORMAL) -> GameState:
    """Return the empty pre-game state shown on the home screen."""

    return GameState(difficulty=difficulty)


def deal_new_game(
    difficulty: Difficulty,
    deck_cards: Sequence[Card],
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """Deal a fresh game from ``deck_cards`` in the given order.

    Hands are taken from the head of the deck, player first. The opening
    discard comes off the tail; an 8 is rotated back to the head until a
    non-wild card turns up.
    """

    draw_pile = list(deck_cards)
    needed = config.hand_size * 2 + 1
    if len(draw_pile) < needed:
        raise ValueError("insufficient cards in deck for requested hand size")
    if all(card.is_wild for card in draw_pile[config.hand_size * 2 :]):
        raise ValueError("no non-wild card left to open the discard pile")

    player_hand = draw_pile[: config.hand_size]
    ai_hand = draw_pile[config.hand_size : config.hand_size * 2]
    del draw_pile[: config.hand_size * 2]

    opening = draw_pile.pop()
    while opening.is_wild:
        draw_pile.insert(0, opening)
        opening = draw_pile.pop()

    logger.info("dealt new %s game, opening card %s", difficulty.value, opening.label())
    return GameState(
        deck=draw_pile,
        player_hand=player_hand,
        ai_hand=ai_hand,
        discard_pile=[opening],
        current_suit=opening.suit,
        turn=Side.PLAYER,
        status=GameStatus.PLAYING,
        winner=None,
        difficulty=difficulty,
    )
