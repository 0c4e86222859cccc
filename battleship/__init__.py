"""Human-vs-bot battleship engine."""

from battleship.core.board import Board
from battleship.core.errors import BattleshipError, CoordinateError, PlacementError
from battleship.core.game import Game, Player, create_game
from battleship.core.models import (
    COLUMNS,
    ROWS,
    Coord,
    Difficulty,
    GameState,
    Rule,
    ShipType,
    Status,
    Turn,
)

__all__ = [
    "COLUMNS",
    "ROWS",
    "BattleshipError",
    "Board",
    "Coord",
    "CoordinateError",
    "Difficulty",
    "Game",
    "GameState",
    "Player",
    "PlacementError",
    "Rule",
    "ShipType",
    "Status",
    "Turn",
    "create_game",
]
