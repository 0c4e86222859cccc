from __future__ import annotations

import random

import pytest

from battleship.ai.strategy import BotStrategy
from battleship.core.board import Board
from battleship.core.game import Game
from battleship.core.models import Coord, Difficulty, Rotation, Rule, ShipType
from battleship.core.placement import place_fixed

# Canonical (R0) layout; (9, 9) and the whole bottom band stay empty.
FIXED_LAYOUT: tuple[tuple[ShipType, Coord], ...] = (
    (ShipType.X, Coord(0, 0)),
    (ShipType.V, Coord(0, 4)),
    (ShipType.H, Coord(4, 0)),
    (ShipType.I, Coord(4, 4)),
)


def make_home_board(layout: tuple[tuple[ShipType, Coord], ...] = FIXED_LAYOUT) -> Board:
    board = Board()
    for ship_id, (ship_type, anchor) in enumerate(layout, start=1):
        place_fixed(board, ship_id, ship_type, Rotation.R0, anchor)
    return board


def make_single_ship_board(ship_type: ShipType = ShipType.I, anchor: Coord = Coord(4, 4)) -> Board:
    return make_home_board(((ship_type, anchor),))


@pytest.fixture
def home_board() -> Board:
    return make_home_board()


@pytest.fixture
def single_ship_board() -> Board:
    return make_single_ship_board()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def game_factory():
    def _make(
        rule: Rule = Rule.DEFAULT,
        difficulty: Difficulty = Difficulty.EASY,
        *,
        strategy: BotStrategy | None = None,
        player_board: Board | None = None,
        opponent_board: Board | None = None,
        seed: int = 1337,
    ) -> Game:
        game = Game(rule, difficulty, rng=random.Random(seed), strategy=strategy)
        game.player.home = player_board if player_board is not None else make_home_board()
        game.opponent.home = opponent_board if opponent_board is not None else make_home_board()
        return game

    return _make
