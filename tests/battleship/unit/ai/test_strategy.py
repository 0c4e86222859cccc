import random

from battleship.ai import BotStrategy, FixedTargetBot, RandomVolleyBot, create_strategy
from battleship.core.models import COLUMNS, ROWS, Coord, Difficulty


def test_create_strategy_maps_difficulty() -> None:
    assert isinstance(create_strategy(Difficulty.EASY, random.Random(1)), RandomVolleyBot)
    assert isinstance(create_strategy(Difficulty.HARD, random.Random(1)), FixedTargetBot)


def test_random_volley_stays_in_grid_and_within_quota() -> None:
    bot = RandomVolleyBot(random.Random(7))
    for quota in (1, 2, 4):
        volley = bot.choose_volley(quota)
        assert 1 <= len(volley) <= quota
        assert all(0 <= c.row < ROWS and 0 <= c.col < COLUMNS for c in volley)


def test_random_volley_is_reproducible_with_seed() -> None:
    first = RandomVolleyBot(random.Random(11)).choose_volley(3)
    second = RandomVolleyBot(random.Random(11)).choose_volley(3)
    assert first == second


def test_fixed_target_volley_collapses_to_one_shot() -> None:
    bot = FixedTargetBot()
    assert isinstance(bot, BotStrategy)
    assert bot.choose_volley(4) == {Coord(0, 0)}


def test_zero_quota_gives_empty_volley() -> None:
    assert RandomVolleyBot(random.Random(1)).choose_volley(0) == set()
