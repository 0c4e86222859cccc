"""Board state representation and firing resolution."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

import numpy as np

from battleship.core.errors import CoordinateError
from battleship.core.models import COLUMNS, ROWS, Coord, Position, Ship, Status
from battleship.core.placement import DEFAULT_PLACEMENT_ATTEMPTS, place_fleet
from battleship.core.shot_resolution import compose_volley_message

logger = logging.getLogger(__name__)

# Status values are stored as int8 indexes into this tuple.
STATUS_CODES: tuple[Status, ...] = (
    Status.SPACE,
    Status.LIVE,
    Status.MISS,
    Status.HIT,
    Status.KILL,
)
_CODE_BY_STATUS: dict[Status, int] = {status: code for code, status in enumerate(STATUS_CODES)}
_NO_SHIP = 0


@dataclass(slots=True)
class Board:
    """Numpy-backed grid of cell statuses plus the ship roster.

    A home board carries real ships. A tracking board has the same shape and an
    empty roster and records what its owner has learned about the opponent.
    """

    rows: int = ROWS
    columns: int = COLUMNS
    statuses: np.ndarray = field(
        default_factory=lambda: np.zeros((ROWS, COLUMNS), dtype=np.int8)
    )
    ship_ids: np.ndarray = field(
        default_factory=lambda: np.zeros((ROWS, COLUMNS), dtype=np.int16)
    )
    ships: dict[int, Ship] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.statuses.shape != (self.rows, self.columns):
            self.statuses = np.zeros((self.rows, self.columns), dtype=np.int8)
        if self.ship_ids.shape != (self.rows, self.columns):
            self.ship_ids = np.zeros((self.rows, self.columns), dtype=np.int16)

    @classmethod
    def home(cls, rng: random.Random, *, max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS) -> Board:
        """Create a board with one randomly placed ship per archetype."""
        board = cls()
        place_fleet(board, rng, max_attempts=max_attempts)
        return board

    @classmethod
    def tracking(cls) -> Board:
        """Create an all-space board with no ships."""
        return cls()

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.rows and 0 <= coord.col < self.columns

    def _require(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise CoordinateError(coord, self.rows, self.columns)

    def status_at(self, coord: Coord) -> Status:
        self._require(coord)
        return STATUS_CODES[int(self.statuses[coord.row, coord.col])]

    def set_status(self, coord: Coord, status: Status) -> None:
        self._require(coord)
        self.statuses[coord.row, coord.col] = _CODE_BY_STATUS[status]

    def ship_id_at(self, coord: Coord) -> int | None:
        self._require(coord)
        ship_id = int(self.ship_ids[coord.row, coord.col])
        return None if ship_id == _NO_SHIP else ship_id

    def has_ship_at(self, coord: Coord) -> bool:
        return self.ship_id_at(coord) is not None

    def position(self, coord: Coord) -> Position:
        return Position(coord=coord, status=self.status_at(coord), ship_id=self.ship_id_at(coord))

    def positions(self) -> Iterator[Position]:
        """Iterate over every cell in row-major order."""
        for row in range(self.rows):
            for col in range(self.columns):
                yield self.position(Coord(row, col))

    def ship_cells(self, ship_id: int) -> list[Coord]:
        rows, cols = np.nonzero(self.ship_ids == ship_id)
        return [Coord(int(r), int(c)) for r, c in zip(rows, cols)]

    def live_cells(self, ship_id: int) -> list[Coord]:
        mask = (self.ship_ids == ship_id) & (self.statuses == _CODE_BY_STATUS[Status.LIVE])
        rows, cols = np.nonzero(mask)
        return [Coord(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_live(self, coord: Coord) -> bool:
        return self.status_at(coord) is Status.LIVE

    def mark_ship(self, ship: Ship, cells: Iterable[Coord]) -> None:
        """Draw a placed ship onto the grid and register it as alive."""
        if ship.id == _NO_SHIP or ship.id in self.ships:
            raise ValueError(f"Ship id {ship.id} is reserved or already in use.")
        for cell in cells:
            self.set_status(cell, Status.LIVE)
            self.ship_ids[cell.row, cell.col] = ship.id
        ship.alive = True
        self.ships[ship.id] = ship

    def alive_ships(self) -> list[Ship]:
        return [ship for ship in self.ships.values() if ship.alive]

    @property
    def alive_count(self) -> int:
        return len(self.alive_ships())

    @property
    def kill_count(self) -> int:
        """Number of cells recorded as a kill; one per sunk ship."""
        return int(np.count_nonzero(self.statuses == _CODE_BY_STATUS[Status.KILL]))

    def all_ships_sunk(self) -> bool:
        """Return whether no ship on this board is still alive."""
        return not any(ship.alive for ship in self.ships.values())

    def take_fire(self, shots: Iterable[Coord]) -> tuple[dict[Coord, Status], bool]:
        """Resolve an incoming volley against this board.

        Returns the outcome recorded for every shot and whether the board has
        been cleared of alive ships. Cells already resolved as hit or kill are
        never overwritten.
        """
        volley = sorted(set(shots))
        for coord in volley:
            self._require(coord)

        response: dict[Coord, Status] = {}
        for coord in volley:
            outcome = Status.MISS
            if self.status_at(coord) is Status.LIVE:
                outcome = Status.HIT
                ship_id = self.ship_id_at(coord)
                ship = self.ships.get(ship_id) if ship_id is not None else None
                if ship is not None:
                    others = [cell for cell in self.live_cells(ship.id) if cell != coord]
                    if not others:
                        outcome = Status.KILL
                        ship.alive = False
            if not self.status_at(coord).is_resolved:
                self.set_status(coord, outcome)
            response[coord] = outcome

        cleared = self.all_ships_sunk()
        logger.debug(
            "volley_taken shots=%d alive_ships=%d cleared=%s",
            len(volley),
            self.alive_count,
            cleared,
        )
        return response, cleared

    def update_status(self, response: Mapping[Coord, Status], is_bot: bool) -> str:
        """Record a volley's outcomes on this tracking board and describe them."""
        for coord, status in response.items():
            if not self.status_at(coord).is_resolved:
                self.set_status(coord, status)
        return compose_volley_message(response, is_bot)

    def as_grid(self) -> list[str]:
        """Render each row as status characters."""
        return [
            "".join(STATUS_CODES[int(code)].char for code in row) for row in self.statuses
        ]

    def __str__(self) -> str:
        return "\n".join(self.as_grid())
