"""Benchmark harness for pitting computer difficulties against each other."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Mapping

import numpy as np

from . import actions, opponent, rules, scoreboard
from .actions import ChooseSuit
from .state import DEFAULT_CONFIG, Difficulty, GameConfig, GameState, GameStatus, Side

logger = logging.getLogger(__name__)

__all__ = ["AgentBreakdown", "HeadToHeadReport", "run_head_to_head"]


@dataclass(frozen=True, slots=True)
class AgentBreakdown:
    """Aggregate statistics collected for a single agent across a benchmark."""

    difficulty: Difficulty
    wins: int
    losses: int
    stalemates: int
    mean_cards_left: float


@dataclass(frozen=True, slots=True)
class HeadToHeadReport:
    """Summary of a head-to-head benchmark between two difficulties."""

    history: scoreboard.MatchHistory
    baseline: AgentBreakdown
    challenger: AgentBreakdown
    mean_turns: float
    turn_std: float


def _is_stuck(game_state: GameState) -> bool:
    """Nobody can play and nothing is left to draw."""

    if game_state.deck:
        return False
    return not (
        rules.has_legal_move(game_state, Side.PLAYER) or rules.has_legal_move(game_state, Side.AI)
    )


def _play_game(
    game_number: int,
    seats: Mapping[Side, Difficulty],
    labels: Mapping[Side, str],
    rng: random.Random,
    config: GameConfig,
) -> scoreboard.GameSummary:
    # The state carries the AI seat's difficulty; the player seat is passed explicitly.
    game_state = actions.start_game(seats[Side.AI], rng, config)

    turns = 0
    while game_state.status is not GameStatus.GAME_OVER and turns < config.turn_limit:
        if game_state.status is GameStatus.CHOOSING_SUIT:
            move: actions.Action = ChooseSuit(opponent.choose_suit(game_state, Side.PLAYER))
        else:
            if _is_stuck(game_state):
                break
            side = game_state.turn
            move = opponent.choose_move(game_state, rng, side=side, difficulty=seats[side])
            turns += 1
        game_state = actions.reduce(game_state, move, rng=rng, config=config)

    winner = labels[game_state.winner] if game_state.winner is not None else None
    if winner is None:
        logger.info("game %d ended without a winner after %d turns", game_number, turns)

    results = [
        scoreboard.SeatResult(
            agent=labels[side],
            cards_left=len(game_state.hand_for(side)),
            won=game_state.winner is side,
        )
        for side in Side
    ]
    return scoreboard.GameSummary(game_number=game_number, winner=winner, turns=turns, results=results)


def run_head_to_head(
    rounds: int,
    baseline: Difficulty,
    challenger: Difficulty,
    *,
    seed: int = 123,
    config: GameConfig = DEFAULT_CONFIG,
) -> HeadToHeadReport:
    """Play ``rounds`` games, swapping seats every game, and aggregate the results."""

    if rounds <= 0:
        raise ValueError("rounds must be positive")

    rng = random.Random(seed)
    history = scoreboard.MatchHistory(agents=("baseline", "challenger"))
    cards_left: dict[str, list[int]] = {"baseline": [], "challenger": []}

    for game_number in range(1, rounds + 1):
        if game_number % 2 == 1:
            seats = {Side.PLAYER: baseline, Side.AI: challenger}
            labels = {Side.PLAYER: "baseline", Side.AI: "challenger"}
        else:
            seats = {Side.PLAYER: challenger, Side.AI: baseline}
            labels = {Side.PLAYER: "challenger", Side.AI: "baseline"}

        summary = _play_game(game_number, seats, labels, rng, config)
        history.record(summary)
        for result in summary.results:
            cards_left[result.agent].append(result.cards_left)

    turns = np.asarray([game.turns for game in history.games], dtype=np.float64)
    totals = {total.agent: total for total in history.totals()}

    def breakdown(agent: str, difficulty: Difficulty) -> AgentBreakdown:
        total = totals[agent]
        return AgentBreakdown(
            difficulty=difficulty,
            wins=total.wins,
            losses=total.losses,
            stalemates=total.stalemates,
            mean_cards_left=float(np.mean(cards_left[agent])),
        )

    return HeadToHeadReport(
        history=history,
        baseline=breakdown("baseline", baseline),
        challenger=breakdown("challenger", challenger),
        mean_turns=float(turns.mean()),
        turn_std=float(turns.std()),
    )
