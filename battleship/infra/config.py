"""Game configuration and env loading."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from battleship.core.models import Difficulty, Rule
from battleship.core.placement import DEFAULT_PLACEMENT_ATTEMPTS


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load ``.env`` then ``.env.local``; later files win."""
    to_load = tuple(paths) if paths is not None else (".env", ".env.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            return Path(executable).resolve().parent / path
    return Path(__file__).resolve().parents[2] / path


def _int(env: Mapping[str, str], name: str, default: int | None) -> int | None:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Immutable game configuration resolved from environment."""

    rule: Rule = Rule.DEFAULT
    difficulty: Difficulty = Difficulty.EASY
    seed: int | None = None
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    log_level: str = "INFO"
    log_format: str = "text"
    log_dir: str | None = None

    def make_rng(self) -> random.Random:
        """Return a random source, seeded when a seed is configured."""
        return random.Random(self.seed) if self.seed is not None else random.Random()


def load_game_settings(environ: Mapping[str, str] | None = None) -> GameSettings:
    """Resolve game settings from env vars.

    Unknown rule or difficulty names raise ``ValueError``; malformed numbers
    fall back to their defaults.
    """
    env = os.environ if environ is None else environ
    rule = Rule.parse(env.get("BATTLESHIP_RULE", "") or Rule.DEFAULT.label)
    difficulty = Difficulty.parse(env.get("BATTLESHIP_DIFFICULTY", "") or Difficulty.EASY.label)
    attempts = _int(env, "BATTLESHIP_PLACEMENT_ATTEMPTS", DEFAULT_PLACEMENT_ATTEMPTS)
    log_level = env.get("BATTLESHIP_LOG_LEVEL") or env.get("LOG_LEVEL") or "INFO"
    log_dir = env.get("BATTLESHIP_LOG_DIR", "").strip()
    return GameSettings(
        rule=rule,
        difficulty=difficulty,
        seed=_int(env, "BATTLESHIP_SEED", None),
        placement_attempts=max(1, DEFAULT_PLACEMENT_ATTEMPTS if attempts is None else attempts),
        log_level=log_level.strip().upper(),
        log_format=(env.get("LOG_FORMAT", "text").strip().lower() or "text"),
        log_dir=log_dir or None,
    )
