"""Top-level package for the Crazy Eights game engine."""

from . import actions, cards, opponent, rules, session, state

__all__ = [
    "actions",
    "cards",
    "opponent",
    "rules",
    "session",
    "state",
]
