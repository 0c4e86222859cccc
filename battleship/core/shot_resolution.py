"""Volley outcome tallying and result messages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from battleship.core.models import Coord, Status

WIN_MESSAGE = "You won 🙌"
LOSS_MESSAGE = "You lost 🙁"
GAME_OVER_MESSAGE = "The game is over. Start a new game to play again."
EMPTY_VOLLEY_MESSAGE = "Select at least one target before firing."
NOT_YOUR_TURN_MESSAGE = "It is not your turn."
NOT_BOT_TURN_MESSAGE = "It is not the computer's turn."


@dataclass(frozen=True, slots=True)
class VolleyTally:
    """Outcome counts for one resolved volley."""

    kills: int = 0
    hits: int = 0
    misses: int = 0


def tally_response(response: Mapping[Coord, Status]) -> VolleyTally:
    """Count kill/hit/miss outcomes in a volley response."""
    kills = hits = misses = 0
    for status in response.values():
        if status is Status.KILL:
            kills += 1
        elif status is Status.HIT:
            hits += 1
        elif status is Status.MISS:
            misses += 1
    return VolleyTally(kills=kills, hits=hits, misses=misses)


def actor_label(is_bot: bool) -> str:
    return "Computer" if is_bot else "You"


def compose_volley_message(response: Mapping[Coord, Status], is_bot: bool) -> str:
    """Build the status line shown after a volley resolves.

    Kills take precedence over hits in the body; misses are appended as a
    second sentence when present.
    """
    tally = tally_response(response)
    actor = actor_label(is_bot)
    if tally.kills > 0:
        noun = "ship" if tally.kills == 1 else "ships"
        body = f"sunk {tally.kills} {noun}."
    else:
        body = f"{tally.hits} hit."
    message = f"{actor} have {body}"
    if tally.misses > 0:
        message += f" {actor} missed {tally.misses}."
    return message


def quota_exceeded_message(cap: int) -> str:
    noun = "shot" if cap == 1 else "shots"
    return f"You can fire at most {cap} {noun} this turn."
