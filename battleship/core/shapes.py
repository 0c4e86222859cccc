"""Canonical ship footprints and rotation transforms."""

from __future__ import annotations

import random

import numpy as np

from battleship.core.models import ROTATIONS, SHIP_SIZE, Coord, Rotation, ShipType, Status

SHAPE_TEMPLATES: dict[ShipType, tuple[str, str, str]] = {
    ShipType.X: (
        "*.*",
        ".*.",
        "*.*",
    ),
    ShipType.V: (
        "*.*",
        "*.*",
        ".*.",
    ),
    ShipType.H: (
        "*.*",
        "***",
        "*.*",
    ),
    ShipType.I: (
        ".*.",
        ".*.",
        ".*.",
    ),
}


def parse_mask(template: tuple[str, ...]) -> np.ndarray:
    """Convert a character template into a boolean live-cell mask."""
    rows = [[Status.from_char(char) is Status.LIVE for char in line] for line in template]
    mask = np.array(rows, dtype=bool)
    if mask.shape != (SHIP_SIZE, SHIP_SIZE):
        raise ValueError(f"Ship template must be {SHIP_SIZE}x{SHIP_SIZE}.")
    return mask


def render_mask(mask: np.ndarray) -> tuple[str, ...]:
    """Convert a boolean mask back into its character template."""
    return tuple(
        "".join(Status.LIVE.char if live else Status.SPACE.char for live in row) for row in mask
    )


def transpose(mask: np.ndarray) -> np.ndarray:
    return mask.T.copy()


def reverse_cols_of_rows(mask: np.ndarray) -> np.ndarray:
    """Reverse the column order within every row."""
    return mask[:, ::-1].copy()


def reverse_rows_of_cols(mask: np.ndarray) -> np.ndarray:
    """Reverse the row order within every column."""
    return mask[::-1, :].copy()


def rotate(mask: np.ndarray, rotation: Rotation) -> np.ndarray:
    """Apply one of the four quarter-turn transforms to a mask."""
    if rotation is Rotation.R90:
        return reverse_cols_of_rows(transpose(mask))
    if rotation is Rotation.R180:
        return reverse_rows_of_cols(reverse_cols_of_rows(mask))
    if rotation is Rotation.R270:
        return reverse_rows_of_cols(transpose(mask))
    return mask.copy()


_CANONICAL: dict[ShipType, np.ndarray] = {
    ship_type: parse_mask(template) for ship_type, template in SHAPE_TEMPLATES.items()
}


def shape_for(ship_type: ShipType, rotation: Rotation) -> np.ndarray:
    """Return the live-cell mask for a ship archetype in a given rotation."""
    return rotate(_CANONICAL[ship_type], rotation)


def footprint(ship_type: ShipType, rotation: Rotation, anchor: Coord) -> list[Coord]:
    """Compute board cells covered by a ship anchored at its bounding-box top-left."""
    rows, cols = np.nonzero(shape_for(ship_type, rotation))
    return sorted(Coord(anchor.row + int(r), anchor.col + int(c)) for r, c in zip(rows, cols))


def random_rotation(rng: random.Random) -> Rotation:
    return rng.choice(ROTATIONS)
