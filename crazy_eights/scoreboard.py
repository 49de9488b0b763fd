"""Helpers for tracking multi-game Crazy Eights match results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

__all__ = ["SeatResult", "GameSummary", "AgentTotal", "MatchHistory"]


@dataclass(frozen=True, slots=True)
class SeatResult:
    """Outcome for one agent in a single game."""

    agent: str
    cards_left: int
    won: bool


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Summary captured after a single game; ``winner`` is ``None`` on a stalemate."""

    game_number: int
    winner: str | None
    turns: int
    results: Sequence[SeatResult]


@dataclass(frozen=True, slots=True)
class AgentTotal:
    """Aggregate totals accumulated across all recorded games."""

    agent: str
    wins: int
    losses: int
    stalemates: int
    cards_left: int


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates game summaries for a fixed set of agents."""

    agents: tuple[str, ...]
    games: list[GameSummary] = field(default_factory=list)
    _wins: dict[str, int] = field(init=False, repr=False)
    _losses: dict[str, int] = field(init=False, repr=False)
    _stalemates: dict[str, int] = field(init=False, repr=False)
    _cards_left: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.agents) != 2 or len(set(self.agents)) != 2:
            raise ValueError("a match needs exactly two distinct agents")
        self._wins = {agent: 0 for agent in self.agents}
        self._losses = {agent: 0 for agent in self.agents}
        self._stalemates = {agent: 0 for agent in self.agents}
        self._cards_left = {agent: 0 for agent in self.agents}

    def record(self, summary: GameSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if {result.agent for result in summary.results} != set(self.agents):
            raise ValueError("results do not match the agents in this match")
        if summary.winner is not None and summary.winner not in self.agents:
            raise ValueError(f"unknown winner {summary.winner!r}")
        self.games.append(summary)
        for result in summary.results:
            self._cards_left[result.agent] += result.cards_left
            if summary.winner is None:
                self._stalemates[result.agent] += 1
            elif result.won:
                self._wins[result.agent] += 1
            else:
                self._losses[result.agent] += 1

    def totals(self) -> list[AgentTotal]:
        """Return the cumulative totals for each agent in registration order."""

        return [
            AgentTotal(
                agent=agent,
                wins=self._wins[agent],
                losses=self._losses[agent],
                stalemates=self._stalemates[agent],
                cards_left=self._cards_left[agent],
            )
            for agent in self.agents
        ]
