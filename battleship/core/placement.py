"""Randomized, overlap-free fleet placement."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from battleship.core.errors import PlacementError
from battleship.core.models import INITIAL_FLEET, SHIP_SIZE, Coord, Rotation, Ship, ShipType
from battleship.core.shapes import footprint, random_rotation

if TYPE_CHECKING:
    from battleship.core.board import Board

logger = logging.getLogger(__name__)

DEFAULT_PLACEMENT_ATTEMPTS = 10_000


def random_anchor(rng: random.Random, rows: int, columns: int) -> Coord:
    """Draw a top-left corner whose 3x3 bounding box fits inside the grid."""
    return Coord(rng.randrange(rows - SHIP_SIZE + 1), rng.randrange(columns - SHIP_SIZE + 1))


def is_overlapping(board: Board, cells: list[Coord]) -> bool:
    """Return whether any footprint cell already holds a live ship cell."""
    return any(board.is_live(cell) for cell in cells)


def place_ship(
    board: Board,
    ship_id: int,
    ship_type: ShipType,
    rng: random.Random,
    *,
    max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
) -> Ship:
    """Place one ship, redrawing anchor and rotation until it fits."""
    for attempt in range(1, max_attempts + 1):
        anchor = random_anchor(rng, board.rows, board.columns)
        rotation = random_rotation(rng)
        cells = footprint(ship_type, rotation, anchor)
        if is_overlapping(board, cells):
            continue
        ship = Ship(id=ship_id, ship_type=ship_type, rotation=rotation, anchor=anchor)
        board.mark_ship(ship, cells)
        logger.debug(
            "ship_placed id=%d type=%s rotation=%s anchor=(%d, %d) attempts=%d",
            ship_id,
            ship_type.value,
            rotation.value,
            anchor.row,
            anchor.col,
            attempt,
        )
        return ship
    logger.error("ship_placement_exhausted type=%s attempts=%d", ship_type.value, max_attempts)
    raise PlacementError(ship_type, max_attempts)


def place_fixed(board: Board, ship_id: int, ship_type: ShipType, rotation: Rotation, anchor: Coord) -> Ship:
    """Place a ship at a known position; raises ``ValueError`` on overlap."""
    cells = footprint(ship_type, rotation, anchor)
    if not all(board.in_bounds(cell) for cell in cells):
        raise ValueError(f"Ship {ship_type.value} does not fit at ({anchor.row}, {anchor.col}).")
    if is_overlapping(board, cells):
        raise ValueError(f"Ship {ship_type.value} overlaps another ship.")
    ship = Ship(id=ship_id, ship_type=ship_type, rotation=rotation, anchor=anchor)
    board.mark_ship(ship, cells)
    return ship


def place_fleet(
    board: Board,
    rng: random.Random,
    *,
    max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
) -> list[Ship]:
    """Place one ship per archetype in fixed order; later ships avoid earlier ones."""
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1.")
    return [
        place_ship(board, ship_id, ship_type, rng, max_attempts=max_attempts)
        for ship_id, ship_type in enumerate(INITIAL_FLEET, start=1)
    ]
