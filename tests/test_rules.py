"""Tests covering Crazy Eights rule helpers."""

from __future__ import annotations

import pytest

from crazy_eights import rules
from crazy_eights.cards import Card, Rank, Suit, create_deck
from crazy_eights.state import GameState, GameStatus, Side


def card(rank: str, suit: str) -> Card:
    return Card(Rank(rank), Suit(suit))


TOP = card("5", "diamonds")


@pytest.mark.parametrize("candidate", [c for c in create_deck() if c.is_wild])
@pytest.mark.parametrize("current_suit", list(Suit))
def test_eights_are_always_playable(candidate: Card, current_suit: Suit) -> None:
    assert rules.is_playable(candidate, card("K", "clubs"), current_suit)


@pytest.mark.parametrize(
    ("candidate", "current_suit", "expected"),
    [
        (card("5", "spades"), Suit.DIAMONDS, True),  # rank match
        (card("9", "diamonds"), Suit.DIAMONDS, True),  # suit match
        (card("9", "hearts"), Suit.DIAMONDS, False),
        (card("9", "diamonds"), Suit.HEARTS, False),  # declared suit overrides the top card
        (card("9", "hearts"), Suit.HEARTS, True),
        (card("5", "clubs"), Suit.HEARTS, True),  # rank still matches after a declaration
    ],
)
def test_is_playable_matches_rank_or_current_suit(candidate: Card, current_suit: Suit, expected: bool) -> None:
    assert rules.is_playable(candidate, TOP, current_suit) is expected


def test_is_playable_ignores_top_suit_when_rank_matches() -> None:
    candidate = card("Q", "hearts")
    for top_suit in Suit:
        assert rules.is_playable(candidate, Card(Rank.QUEEN, top_suit), Suit.SPADES)


def test_playable_cards_keeps_hand_order() -> None:
    hand = [card("2", "clubs"), card("5", "hearts"), card("8", "spades"), card("J", "diamonds")]

    assert rules.playable_cards(hand, TOP, Suit.DIAMONDS) == [hand[1], hand[2], hand[3]]
    assert rules.playable_cards(hand, None, Suit.DIAMONDS) == []


def _state(player_hand: list[Card], *, turn: Side = Side.PLAYER, status: GameStatus = GameStatus.PLAYING) -> GameState:
    return GameState(
        deck=[card("3", "clubs")],
        player_hand=player_hand,
        ai_hand=[card("4", "clubs")],
        discard_pile=[TOP],
        current_suit=Suit.DIAMONDS,
        turn=turn,
        status=status,
    )


def test_can_draw_only_without_a_legal_move() -> None:
    stuck = _state([card("2", "clubs"), card("K", "spades")])
    assert not rules.has_legal_move(stuck, Side.PLAYER)
    assert rules.can_draw(stuck)

    able = _state([card("2", "clubs"), card("8", "spades")])
    assert rules.has_legal_move(able, Side.PLAYER)
    assert not rules.can_draw(able)


@pytest.mark.parametrize(
    ("turn", "status"),
    [
        (Side.AI, GameStatus.PLAYING),
        (Side.PLAYER, GameStatus.CHOOSING_SUIT),
        (Side.PLAYER, GameStatus.GAME_OVER),
        (Side.PLAYER, GameStatus.WAITING),
    ],
)
def test_can_draw_requires_players_active_turn(turn: Side, status: GameStatus) -> None:
    assert not rules.can_draw(_state([card("2", "clubs")], turn=turn, status=status))


def test_most_frequent_suit_counts_hand() -> None:
    hand = [card("2", "clubs"), card("3", "clubs"), card("4", "hearts"), card("8", "spades")]
    assert rules.most_frequent_suit(hand) is Suit.CLUBS


@pytest.mark.parametrize(
    ("hand", "expected"),
    [
        ([card("2", "spades"), card("3", "diamonds")], Suit.DIAMONDS),
        ([card("2", "spades"), card("3", "clubs")], Suit.CLUBS),
        ([card("2", "clubs"), card("3", "hearts")], Suit.HEARTS),
        ([], Suit.HEARTS),
    ],
)
def test_most_frequent_suit_ties_go_to_enumeration_order(hand: list[Card], expected: Suit) -> None:
    assert rules.most_frequent_suit(hand) is expected


def test_suit_counts_covers_every_suit() -> None:
    counts = rules.suit_counts([card("2", "clubs"), card("9", "clubs")])
    assert counts == {Suit.HEARTS: 0, Suit.DIAMONDS: 0, Suit.CLUBS: 2, Suit.SPADES: 0}
