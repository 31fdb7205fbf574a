"""
Centralized configuration for lobby title evaluation.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Master switch - LobbyTitleService hands back no titles when disabled
TITLES_ENABLED = _parse_bool("TITLES_ENABLED", True)

# Match history window requested per player (newest-first)
MATCH_HISTORY_GAMES = _parse_int("MATCH_HISTORY_GAMES", 20)

# Exponential recency weighting: game i (0 = most recent) weighs DECAY ** i
TITLE_DECAY_FACTOR = _parse_float("TITLE_DECAY_FACTOR", 0.85)

# Pool inclusion chances per evaluation. Common titles are always in the pool.
TITLE_UNCOMMON_CHANCE = _parse_float("TITLE_UNCOMMON_CHANCE", 0.60)
TITLE_RARE_CHANCE = _parse_float("TITLE_RARE_CHANCE", 0.25)
