"""Per-turn shot quota rules."""

from __future__ import annotations

from battleship.core.board import Board
from battleship.core.models import Rule


def shot_cap(rule: Rule, home: Board, tracking: Board) -> int:
    """Return the maximum number of shots the firer may put in one volley.

    ``home`` is the firer's own board and ``tracking`` is the firer's record of
    the opponent.
    """
    if rule is Rule.SUPER_CHARGE:
        return home.alive_count
    if rule is Rule.DESPERATION:
        return tracking.kill_count + 1
    return 1


def is_valid_rule(rule: Rule, existing_shots: int, home: Board, tracking: Board) -> bool:
    """Return whether one more shot may be added to a selection of ``existing_shots``."""
    return existing_shots < shot_cap(rule, home, tracking)
