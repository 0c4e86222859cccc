"""Placeholder strategy for the hard difficulty."""

from __future__ import annotations

from battleship.ai.strategy import BotStrategy
from battleship.core.models import Coord

TOP_LEFT = Coord(0, 0)


class FixedTargetBot(BotStrategy):
    """Always targets the top-left cell.

    Hard difficulty has no targeting algorithm yet; this keeps the variant
    selectable without inventing one.
    """

    def choose_shot(self) -> Coord:
        return TOP_LEFT
