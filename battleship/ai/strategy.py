"""Bot targeting strategy interface and selection utilities."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from battleship.core.models import Coord, Difficulty


class BotStrategy(ABC):
    """Interface for bot volley selection."""

    @abstractmethod
    def choose_shot(self) -> Coord:
        """Return next coordinate to fire."""

    def choose_volley(self, quota: int) -> set[Coord]:
        """Draw ``quota`` shots independently.

        Shots collect into a set, so a repeated draw leaves the volley smaller
        than the quota.
        """
        return {self.choose_shot() for _ in range(max(quota, 0))}


def create_strategy(difficulty: Difficulty, rng: random.Random) -> BotStrategy:
    """Return the targeting strategy for a difficulty level."""
    from battleship.ai.fixed_target import FixedTargetBot
    from battleship.ai.random_volley import RandomVolleyBot

    if difficulty is Difficulty.HARD:
        return FixedTargetBot()
    return RandomVolleyBot(rng)
