"""Turn state machine for a human-vs-bot game."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass, field

from battleship.ai.strategy import BotStrategy, create_strategy
from battleship.core.board import Board
from battleship.core.models import Coord, Difficulty, GameState, Rule, Status, Turn
from battleship.core.placement import DEFAULT_PLACEMENT_ATTEMPTS
from battleship.core.rules import is_valid_rule, shot_cap
from battleship.core.shot_resolution import (
    EMPTY_VOLLEY_MESSAGE,
    GAME_OVER_MESSAGE,
    LOSS_MESSAGE,
    NOT_BOT_TURN_MESSAGE,
    NOT_YOUR_TURN_MESSAGE,
    WIN_MESSAGE,
    quota_exceeded_message,
)

logger = logging.getLogger(__name__)

START_MESSAGE = "Battle started. Your turn."


@dataclass(slots=True)
class Player:
    """One side of the game: real ships at home, learned state on tracking."""

    home: Board
    tracking: Board = field(default_factory=Board.tracking)
    is_bot: bool = False


class Game:
    """Owns both players, the active turn and the winner."""

    def __init__(
        self,
        rule: Rule = Rule.DEFAULT,
        difficulty: Difficulty = Difficulty.EASY,
        *,
        rng: random.Random | None = None,
        max_placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
        strategy: BotStrategy | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.rule = rule
        self.difficulty = difficulty
        self._players: tuple[Player, Player] = (
            Player(home=Board.home(self._rng, max_attempts=max_placement_attempts)),
            Player(home=Board.home(self._rng, max_attempts=max_placement_attempts), is_bot=True),
        )
        self._strategy = strategy if strategy is not None else create_strategy(difficulty, self._rng)
        self.turn = Turn.PLAYER
        self.winner: Turn | None = None
        self.message = START_MESSAGE
        self.history: list[str] = []
        logger.info("game_started rule=%s difficulty=%s", rule.label, difficulty.label)

    @property
    def player(self) -> Player:
        return self._players[0]

    @property
    def opponent(self) -> Player:
        return self._players[1]

    @property
    def state(self) -> GameState:
        if self.winner is not None:
            return GameState.WON
        if self.turn is Turn.PLAYER:
            return GameState.AWAITING_PLAYER_TURN
        return GameState.AWAITING_BOT_TURN

    def is_user_turn(self) -> bool:
        return self.turn is Turn.PLAYER

    def is_won(self) -> bool:
        return self.winner is not None

    def _attacker(self, turn: Turn) -> Player:
        return self.opponent if turn is Turn.BOT else self.player

    def _defender(self, turn: Turn) -> Player:
        return self.player if turn is Turn.BOT else self.opponent

    def quota_for(self, turn: Turn) -> int:
        """Return the volley size allowed for the given side under the active rule."""
        attacker = self._attacker(turn)
        return shot_cap(self.rule, attacker.home, attacker.tracking)

    def is_valid_rule(self, existing_shots: int) -> bool:
        """Return whether the human may add another shot to the current selection."""
        return is_valid_rule(self.rule, existing_shots, self.player.home, self.player.tracking)

    def cell_status(self, coord: Coord, *, tracking: bool = False) -> Status:
        """Return a cell status from the human's home board or tracking board."""
        board = self.player.tracking if tracking else self.player.home
        return board.status_at(coord)

    def ship_at(self, coord: Coord) -> bool:
        """Return whether one of the human's own ships occupies this cell."""
        return self.player.home.has_ship_at(coord)

    def fire(self, shots: Iterable[Coord], is_bot: bool = False) -> str:
        """Resolve one volley for the side whose turn it is and return the message."""
        volley = set(shots)
        turn = Turn.BOT if is_bot else Turn.PLAYER
        if self.winner is not None:
            return GAME_OVER_MESSAGE
        if self.turn is not turn:
            return NOT_BOT_TURN_MESSAGE if is_bot else NOT_YOUR_TURN_MESSAGE
        if not volley:
            return EMPTY_VOLLEY_MESSAGE
        cap = self.quota_for(turn)
        if not is_bot and len(volley) > cap:
            return quota_exceeded_message(cap)

        attacker = self._attacker(turn)
        defender = self._defender(turn)
        response, cleared = defender.home.take_fire(volley)
        message = attacker.tracking.update_status(response, is_bot)
        self.turn = Turn.PLAYER if is_bot else Turn.BOT
        logger.debug("volley_resolved turn=%s shots=%d message=%s", turn.value, len(volley), message)

        if cleared:
            self.winner = turn
            message = LOSS_MESSAGE if is_bot else WIN_MESSAGE
            logger.info("game_over winner=%s", turn.value)

        self.message = message
        self.history.append(message)
        return message

    def generate_firing_coordinates(self) -> set[Coord]:
        """Pick the bot's next volley under the active rule."""
        return self._strategy.choose_volley(self.quota_for(Turn.BOT))

    def bot_fire(self) -> str:
        if self.winner is not None:
            return GAME_OVER_MESSAGE
        if self.turn is not Turn.BOT:
            return NOT_BOT_TURN_MESSAGE
        return self.fire(self.generate_firing_coordinates(), is_bot=True)


def create_game(
    rule: Rule = Rule.DEFAULT,
    difficulty: Difficulty = Difficulty.EASY,
    *,
    seed: int | None = None,
    max_placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
) -> Game:
    """Create a game, optionally reproducible from a seed."""
    rng = random.Random(seed) if seed is not None else random.Random()
    return Game(rule, difficulty, rng=rng, max_placement_attempts=max_placement_attempts)
