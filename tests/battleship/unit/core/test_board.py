import random

import pytest

from battleship.core.board import Board
from battleship.core.errors import CoordinateError
from battleship.core.models import COLUMNS, ROWS, Coord, Status


def test_tracking_board_starts_as_open_water() -> None:
    board = Board.tracking()
    assert not board.ships
    assert all(p.status is Status.SPACE and p.ship_id is None for p in board.positions())
    assert str(board) == "\n".join(["." * COLUMNS] * ROWS)


def test_home_board_holds_only_live_or_space(seeded_rng: random.Random) -> None:
    board = Board.home(seeded_rng)
    statuses = {p.status for p in board.positions()}
    assert statuses == {Status.LIVE, Status.SPACE}
    for position in board.positions():
        assert (position.status is Status.LIVE) == (position.ship_id is not None)


def test_take_fire_miss_and_hit(home_board: Board) -> None:
    response, cleared = home_board.take_fire({Coord(9, 9), Coord(0, 0)})
    assert response == {Coord(0, 0): Status.HIT, Coord(9, 9): Status.MISS}
    assert not cleared
    assert home_board.status_at(Coord(0, 0)) is Status.HIT
    assert home_board.status_at(Coord(9, 9)) is Status.MISS


def test_last_live_cell_is_reported_as_kill(home_board: Board) -> None:
    x_ship = home_board.ships[1]
    home_board.take_fire({Coord(0, 0), Coord(0, 2), Coord(1, 1), Coord(2, 0)})
    assert x_ship.alive

    response, cleared = home_board.take_fire({Coord(2, 2)})
    assert response == {Coord(2, 2): Status.KILL}
    assert not x_ship.alive
    assert not cleared
    assert home_board.alive_count == 3
    assert home_board.kill_count == 1


def test_killing_last_ship_clears_board(single_ship_board: Board) -> None:
    response, cleared = single_ship_board.take_fire({Coord(6, 5), Coord(4, 5), Coord(5, 5)})
    assert sorted(response.values()) == sorted([Status.HIT, Status.HIT, Status.KILL])
    assert response[Coord(6, 5)] is Status.KILL
    assert cleared
    assert single_ship_board.all_ships_sunk()


def test_refiring_resolved_cells_is_idempotent(home_board: Board) -> None:
    home_board.take_fire({Coord(0, 0), Coord(0, 2), Coord(1, 1), Coord(2, 0), Coord(2, 2)})
    assert home_board.status_at(Coord(2, 2)) is Status.KILL

    response, cleared = home_board.take_fire({Coord(2, 2), Coord(0, 0)})
    assert set(response) == {Coord(2, 2), Coord(0, 0)}
    assert home_board.status_at(Coord(2, 2)) is Status.KILL
    assert home_board.status_at(Coord(0, 0)) is Status.HIT
    assert not home_board.ships[1].alive
    assert home_board.alive_count == 3
    assert not cleared


def test_take_fire_rejects_out_of_bounds_without_mutation(home_board: Board) -> None:
    with pytest.raises(CoordinateError):
        home_board.take_fire({Coord(0, 0), Coord(ROWS, 0)})
    assert home_board.status_at(Coord(0, 0)) is Status.LIVE


def test_update_status_records_outcomes_and_keeps_resolved_cells() -> None:
    tracking = Board.tracking()
    message = tracking.update_status({Coord(1, 1): Status.KILL, Coord(3, 3): Status.MISS}, is_bot=False)
    assert message == "You have sunk 1 ship. You missed 1."
    assert tracking.status_at(Coord(1, 1)) is Status.KILL
    assert tracking.status_at(Coord(3, 3)) is Status.MISS

    tracking.update_status({Coord(1, 1): Status.MISS}, is_bot=False)
    assert tracking.status_at(Coord(1, 1)) is Status.KILL


def test_update_status_bot_hits_message() -> None:
    tracking = Board.tracking()
    message = tracking.update_status({Coord(0, 0): Status.HIT, Coord(0, 1): Status.HIT}, is_bot=True)
    assert message == "Computer have 2 hit."


def test_live_cells_shrink_as_ship_is_hit(home_board: Board) -> None:
    assert len(home_board.live_cells(4)) == 3
    home_board.take_fire({Coord(4, 5)})
    assert home_board.live_cells(4) == [Coord(5, 5), Coord(6, 5)]
    assert home_board.ship_cells(4) == [Coord(4, 5), Coord(5, 5), Coord(6, 5)]
