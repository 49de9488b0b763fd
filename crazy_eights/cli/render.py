"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable

from ..actions import Action, ChooseSuit, DrawCard, GoHome, PlayCard, StartGame
from ..cards import Card, Suit
from ..state import GameState, GameStatus, Side


def suit_style(suit: Suit) -> str:
    return "red" if suit.is_red else "white"


def format_suit(suit: Suit) -> str:
    """Return a Rich-rendered suit symbol."""

    style = suit_style(suit)
    return f"[{style}]{suit.symbol}[/{style}]"


def format_card(card: Card, *, highlight: bool = False) -> str:
    """Return a Rich-rendered label for ``card``."""

    style = suit_style(card.suit)
    if highlight:
        style = f"bold {style} on dark_green"
    return f"[{style}]{card.label()}[/{style}]"


def format_hand(cards: Iterable[Card], playable: Iterable[Card] = ()) -> str:
    playable_set = set(playable)
    parts = [format_card(card, highlight=card in playable_set) for card in cards]
    return "  ".join(parts) if parts else "[dim]Empty hand[/dim]"


def describe_transition(previous: GameState, current: GameState, action: Action) -> str:
    """Return the status line shown after ``action`` moved ``previous`` to ``current``."""

    if isinstance(action, StartGame):
        return f"Game started ({current.difficulty.value})! Your turn."
    if isinstance(action, GoHome):
        return "Welcome to Crazy Eights!"
    if isinstance(action, ChooseSuit):
        return f"You chose {format_suit(action.suit)} {action.suit.value}. Computer's turn."
    if isinstance(action, DrawCard):
        side = action.side
        if len(current.deck) == len(previous.deck):
            return "Deck is empty! Skipping draw."
        drawn = current.hand_for(side)[-1]
        if side is Side.PLAYER:
            if current.turn is side:
                return f"You drew {format_card(drawn)}, a playable card!"
            return f"You drew {format_card(drawn)}. Computer's turn."
        if current.turn is side:
            return "Computer drew a card."
        return "Computer drew a card and passed."
    if isinstance(action, PlayCard):
        card_text = format_card(action.card)
        if current.status is GameStatus.GAME_OVER:
            if action.side is Side.PLAYER:
                return f"[bold green]You played {card_text} and cleared your hand![/bold green]"
            return f"[bold red]Computer played {card_text} and cleared its hand.[/bold red]"
        if current.status is GameStatus.CHOOSING_SUIT:
            return "Crazy 8! Choose a new suit."
        if action.side is Side.PLAYER:
            return f"You played {card_text}. Computer's turn."
        if action.card.is_wild and current.current_suit is not None:
            suit = current.current_suit
            return f"Computer played {card_text} and chose {format_suit(suit)} {suit.value}!"
        return f"Computer played {card_text}."
    return ""
