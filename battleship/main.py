"""Headless entry point: build a game from env config and show the home board."""

import logging

from battleship.core.game import Game
from battleship.infra.config import load_default_env_files, load_game_settings
from battleship.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Set up a game from environment settings and print the player's fleet."""
    load_default_env_files()
    settings = load_game_settings()
    setup_logging(settings)
    logger.info(
        "game_config rule=%s difficulty=%s seed=%s placement_attempts=%d",
        settings.rule.label,
        settings.difficulty.label,
        settings.seed,
        settings.placement_attempts,
        extra={"rule_description": settings.rule.description},
    )
    game = Game(
        settings.rule,
        settings.difficulty,
        rng=settings.make_rng(),
        max_placement_attempts=settings.placement_attempts,
    )
    print(game.player.home)
    print(game.message)
    shutdown_logging()


if __name__ == "__main__":
    main()
