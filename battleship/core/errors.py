"""Engine exception types."""

from __future__ import annotations

from battleship.core.models import COLUMNS, ROWS, Coord, ShipType


class BattleshipError(Exception):
    """Base class for engine errors."""


class PlacementError(BattleshipError, RuntimeError):
    """Raised when a ship cannot be placed within the retry bound."""

    def __init__(self, ship_type: ShipType, attempts: int) -> None:
        super().__init__(
            f"Failed to place ship {ship_type.value} without overlap after {attempts} attempts."
        )
        self.ship_type = ship_type
        self.attempts = attempts


class CoordinateError(BattleshipError, ValueError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, coord: Coord, rows: int = ROWS, columns: int = COLUMNS) -> None:
        super().__init__(
            f"Coordinate ({coord.row}, {coord.col}) is outside the {rows}x{columns} grid."
        )
        self.coord = coord
