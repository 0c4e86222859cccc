"""Bot targeting strategies."""

from battleship.ai.fixed_target import FixedTargetBot
from battleship.ai.random_volley import RandomVolleyBot
from battleship.ai.strategy import BotStrategy, create_strategy

__all__ = [
    "BotStrategy",
    "FixedTargetBot",
    "RandomVolleyBot",
    "create_strategy",
]
