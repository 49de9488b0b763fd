from __future__ import annotations

import random

import pytest

from crazy_eights import actions, state
from crazy_eights.cards import DECK_SIZE, Card, Rank, Suit, create_deck
from crazy_eights.state import Difficulty, GameConfig, GameStatus, Side


def _deck_with_tail(*tail: Card) -> list[Card]:
    deck = [c for c in create_deck() if c not in tail]
    return deck + list(tail)


def test_deal_new_game_assigns_hand_sizes() -> None:
    deck = create_deck()
    game_state = state.deal_new_game(Difficulty.HARD, deck)

    assert game_state.player_hand == deck[:8]
    assert game_state.ai_hand == deck[8:16]
    assert len(game_state.discard_pile) == 1
    assert len(game_state.deck) == 35
    assert game_state.top_card == deck[-1]
    assert game_state.current_suit is deck[-1].suit
    assert game_state.turn is Side.PLAYER
    assert game_state.status is GameStatus.PLAYING
    assert game_state.winner is None
    assert game_state.difficulty is Difficulty.HARD
    assert game_state.card_count() == DECK_SIZE


def test_deal_rotates_opening_eight_to_the_head() -> None:
    eight = Card(Rank.EIGHT, Suit.SPADES)
    deck = _deck_with_tail(eight)
    game_state = state.deal_new_game(Difficulty.NORMAL, deck)

    assert game_state.top_card == deck[-2]
    assert not game_state.top_card.is_wild
    assert game_state.deck[0] == eight
    assert game_state.card_count() == DECK_SIZE


def test_deal_skips_consecutive_eights() -> None:
    eights = [Card(Rank.EIGHT, suit) for suit in Suit]
    deck = _deck_with_tail(*eights)
    game_state = state.deal_new_game(Difficulty.NORMAL, deck)

    assert not game_state.top_card.is_wild
    assert set(game_state.deck[:4]) == set(eights)
    assert game_state.current_suit is game_state.top_card.suit


@pytest.mark.parametrize("seed", range(20))
def test_start_game_never_opens_on_an_eight(seed: int) -> None:
    game_state = actions.start_game(Difficulty.EASY, random.Random(seed))

    assert len(game_state.player_hand) == 8
    assert len(game_state.ai_hand) == 8
    assert len(game_state.deck) == 35
    assert not game_state.top_card.is_wild
    every_card = game_state.deck + game_state.player_hand + game_state.ai_hand + game_state.discard_pile
    assert sorted(every_card, key=lambda c: c.id) == sorted(create_deck(), key=lambda c: c.id)


def test_deal_respects_configured_hand_size() -> None:
    game_state = state.deal_new_game(Difficulty.NORMAL, create_deck(), GameConfig(hand_size=5))

    assert len(game_state.player_hand) == 5
    assert len(game_state.ai_hand) == 5
    assert len(game_state.deck) == DECK_SIZE - 11


def test_deal_rejects_short_decks() -> None:
    with pytest.raises(ValueError):
        state.deal_new_game(Difficulty.NORMAL, create_deck()[:16])


def test_deal_rejects_decks_with_only_eights_left() -> None:
    cards = create_deck()
    non_wild = [c for c in cards if not c.is_wild][:16]
    eights = [c for c in cards if c.is_wild]
    with pytest.raises(ValueError):
        state.deal_new_game(Difficulty.NORMAL, non_wild + eights)


@pytest.mark.parametrize(
    "kwargs",
    [{"hand_size": 0}, {"hand_size": 26}, {"opponent_delay": -1.0}, {"turn_limit": 0}],
)
def test_game_config_validates(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)  # type: ignore[arg-type]


def test_waiting_state_is_empty() -> None:
    game_state = state.waiting_state(Difficulty.EASY)

    assert game_state.status is GameStatus.WAITING
    assert game_state.current_suit is None
    assert game_state.top_card is None
    assert game_state.card_count() == 0
    assert game_state.difficulty is Difficulty.EASY


def test_clone_copies_piles() -> None:
    original = state.deal_new_game(Difficulty.NORMAL, create_deck())
    clone = original.clone()

    clone.player_hand.pop()
    clone.deck.clear()
    clone.discard_pile.append(clone.ai_hand.pop())

    assert len(original.player_hand) == 8
    assert len(original.deck) == 35
    assert len(original.discard_pile) == 1
    assert len(original.ai_hand) == 8


def test_side_other() -> None:
    assert Side.PLAYER.other is Side.AI
    assert Side.AI.other is Side.PLAYER
