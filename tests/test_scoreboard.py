from __future__ import annotations

import pytest

from crazy_eights import scoreboard


def _summary(number: int, winner: str | None, left: dict[str, int]) -> scoreboard.GameSummary:
    return scoreboard.GameSummary(
        game_number=number,
        winner=winner,
        turns=20,
        results=[
            scoreboard.SeatResult(agent=agent, cards_left=count, won=agent == winner)
            for agent, count in left.items()
        ],
    )


def test_match_history_accumulates_totals() -> None:
    history = scoreboard.MatchHistory(agents=("baseline", "challenger"))
    history.record(_summary(1, "baseline", {"baseline": 0, "challenger": 4}))
    history.record(_summary(2, "challenger", {"baseline": 2, "challenger": 0}))
    history.record(_summary(3, None, {"baseline": 3, "challenger": 5}))

    totals = {total.agent: total for total in history.totals()}
    assert len(history.games) == 3
    assert totals["baseline"].wins == 1
    assert totals["baseline"].losses == 1
    assert totals["baseline"].stalemates == 1
    assert totals["baseline"].cards_left == 5
    assert totals["challenger"].wins == 1
    assert totals["challenger"].cards_left == 9
    assert [total.agent for total in history.totals()] == ["baseline", "challenger"]


def test_match_history_validates_agents() -> None:
    history = scoreboard.MatchHistory(agents=("baseline", "challenger"))
    with pytest.raises(ValueError):
        history.record(_summary(1, "baseline", {"baseline": 0}))
    with pytest.raises(ValueError):
        history.record(_summary(1, "nobody", {"baseline": 0, "challenger": 3}))


@pytest.mark.parametrize("agents", [("solo",), ("same", "same"), ("a", "b", "c")])
def test_match_history_needs_two_agents(agents: tuple[str, ...]) -> None:
    with pytest.raises(ValueError):
        scoreboard.MatchHistory(agents=agents)
