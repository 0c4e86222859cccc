"""Uniform random targeting used by the easy bot."""

from __future__ import annotations

import random

from battleship.ai.strategy import BotStrategy
from battleship.core.models import COLUMNS, ROWS, Coord


class RandomVolleyBot(BotStrategy):
    """Fires at uniformly random cells anywhere on the grid, hit or not."""

    def __init__(self, rng: random.Random, rows: int = ROWS, columns: int = COLUMNS) -> None:
        self._rng = rng
        self._rows = rows
        self._columns = columns

    def choose_shot(self) -> Coord:
        return Coord(self._rng.randrange(self._rows), self._rng.randrange(self._columns))
