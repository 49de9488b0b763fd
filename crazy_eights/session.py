"""Session driver that applies actions and schedules the computer's turn."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, List

from . import opponent
from .actions import Action, GoHome, StartGame, reduce
from .rules import IllegalPlay, InvalidTransition
from .state import DEFAULT_CONFIG, Difficulty, GameConfig, GameState, waiting_state

logger = logging.getLogger(__name__)

Listener = Callable[[GameState, GameState, Action], None]


@dataclass(frozen=True, slots=True)
class OpponentTicket:
    """A pending computer move tied to the state snapshot it was issued for."""

    snapshot: GameState
    delay: float


class GameSession:
    """Owns the current :class:`GameState` and routes every action through the reducer."""

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        rng: random.Random | None = None,
        difficulty: Difficulty = Difficulty.NORMAL,
    ) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.state = waiting_state(difficulty)
        self._ticket: OpponentTicket | None = None
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def dispatch(self, action: Action) -> GameState:
        """Apply ``action``; rejections propagate and leave the state as it was."""

        previous = self.state
        self.state = reduce(previous, action, rng=self.rng, config=self.config)
        if isinstance(action, (StartGame, GoHome)):
            self.cancel_pending()
        for listener in self._listeners:
            listener(previous, self.state, action)
        return self.state

    def try_dispatch(self, action: Action) -> bool:
        """Apply ``action`` and report whether it was accepted."""

        try:
            self.dispatch(action)
        except (IllegalPlay, InvalidTransition) as exc:
            logger.warning("rejected %s: %s", type(action).__name__, exc)
            return False
        return True

    def start(self, difficulty: Difficulty | None = None) -> GameState:
        return self.dispatch(StartGame(difficulty or self.state.difficulty))

    def go_home(self) -> GameState:
        return self.dispatch(GoHome())

    def schedule_opponent(self) -> OpponentTicket | None:
        """Issue a ticket when the computer is due to move on the current state."""

        if not opponent.opponent_to_move(self.state):
            return None
        if self._ticket is not None and self._ticket.snapshot is self.state:
            return self._ticket
        self._ticket = OpponentTicket(snapshot=self.state, delay=self.config.opponent_delay)
        return self._ticket

    def cancel_pending(self) -> None:
        self._ticket = None

    @property
    def pending(self) -> OpponentTicket | None:
        return self._ticket

    def resolve(self, ticket: OpponentTicket) -> bool:
        """Run the computer's move for ``ticket`` if it is still current.

        Returns ``False`` for stale tickets: the state moved on (new game,
        return home, any other action) after the ticket was issued.
        """

        if ticket is not self._ticket or ticket.snapshot is not self.state:
            logger.debug("discarding stale opponent ticket")
            return False
        self._ticket = None
        if not opponent.opponent_to_move(self.state):
            return False
        move = opponent.choose_move(self.state, self.rng)
        self.dispatch(move)
        return True
