"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

ROWS = 10
COLUMNS = 10
SHIP_SIZE = 3


class Status(StrEnum):
    """State of a single board cell."""

    LIVE = "LIVE"
    SPACE = "SPACE"
    MISS = "MISS"
    HIT = "HIT"
    KILL = "KILL"

    @property
    def char(self) -> str:
        return STATUS_CHARS[self]

    @property
    def emoji(self) -> str:
        return STATUS_EMOJI[self]

    @property
    def is_resolved(self) -> bool:
        """Return whether no later shot may change this status."""
        return self is Status.HIT or self is Status.KILL

    @classmethod
    def from_char(cls, char: str) -> Status:
        for status, value in STATUS_CHARS.items():
            if value == char:
                return status
        raise ValueError(f"{char!r} is not a valid status character.")


STATUS_CHARS: dict[Status, str] = {
    Status.LIVE: "*",
    Status.SPACE: ".",
    Status.MISS: "-",
    Status.HIT: "X",
    Status.KILL: "K",
}

STATUS_EMOJI: dict[Status, str] = {
    Status.LIVE: "🚢",
    Status.SPACE: "",
    Status.MISS: "❌",
    Status.HIT: "💥",
    Status.KILL: "💀",
}


class ShipType(StrEnum):
    """Ship archetypes, each with a 3x3 footprint."""

    X = "X"
    V = "V"
    H = "H"
    I = "I"  # noqa: E741

    @property
    def size(self) -> int:
        return SHIP_LENGTHS[self]


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.X: 5,
    ShipType.V: 5,
    ShipType.H: 7,
    ShipType.I: 3,
}

INITIAL_FLEET: tuple[ShipType, ...] = (
    ShipType.X,
    ShipType.V,
    ShipType.H,
    ShipType.I,
)


class Rotation(StrEnum):
    """Ship orientation as a quarter-turn of the canonical footprint."""

    R0 = "R0"
    R90 = "R90"
    R180 = "R180"
    R270 = "R270"


ROTATIONS: tuple[Rotation, ...] = (Rotation.R0, Rotation.R90, Rotation.R180, Rotation.R270)


class _LabeledEnum(StrEnum):
    """String enum with a human label used by configuration and UIs."""

    @property
    def label(self) -> str:
        return LABELS[self]

    @classmethod
    def variants(cls) -> tuple[str, ...]:
        return tuple(member.label for member in cls)

    @classmethod
    def parse(cls, raw: str) -> _LabeledEnum:
        """Resolve a member from its label or value, case-insensitively."""
        normalized = raw.strip().lower()
        for member in cls:
            if normalized in {member.value.lower(), member.label.lower()}:
                return member
        raise ValueError(
            f"Unknown {cls.__name__.lower()} {raw!r}; expected one of: {', '.join(cls.variants())}."
        )


class Rule(_LabeledEnum):
    """Per-turn shot quota rule."""

    DEFAULT = "DEFAULT"
    SUPER_CHARGE = "SUPER_CHARGE"
    DESPERATION = "DESPERATION"

    @property
    def description(self) -> str:
        return RULE_DESCRIPTIONS[self]


class Difficulty(_LabeledEnum):
    """Bot targeting difficulty."""

    EASY = "EASY"
    HARD = "HARD"


LABELS: dict[StrEnum, str] = {
    Rule.DEFAULT: "Default",
    Rule.SUPER_CHARGE: "SuperCharge",
    Rule.DESPERATION: "Desperation",
    Difficulty.EASY: "Easy",
    Difficulty.HARD: "Hard",
}

RULE_DESCRIPTIONS: dict[Rule, str] = {
    Rule.DEFAULT: "One shot per turn.",
    Rule.SUPER_CHARGE: "One shot per ship you still have afloat.",
    Rule.DESPERATION: "One shot, plus one for every enemy ship you have sunk.",
}


class Turn(StrEnum):
    """Current turn owner."""

    PLAYER = "PLAYER"
    BOT = "BOT"


class GameState(StrEnum):
    """Game lifecycle state."""

    AWAITING_PLAYER_TURN = "AWAITING_PLAYER_TURN"
    AWAITING_BOT_TURN = "AWAITING_BOT_TURN"
    WON = "WON"


@dataclass(frozen=True, slots=True, order=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(slots=True)
class Ship:
    """A placed ship; its cells live on the board, keyed by id."""

    id: int
    ship_type: ShipType
    rotation: Rotation
    anchor: Coord
    alive: bool = True


@dataclass(frozen=True, slots=True)
class Position:
    """Read-only snapshot of one board cell."""

    coord: Coord
    status: Status
    ship_id: int | None = None
