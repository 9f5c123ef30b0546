"""Environment-first settings for the search and the CLI.

Variables:
- TTT_MAX_DEPTH: ply bound for the search, -1 (default) searches to terminal states.
- TTT_LOG_LEVEL: logging level name used by the CLI when not verbose.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

UNLIMITED_DEPTH = -1

DEFAULT_LOG_LEVEL = "INFO"


def validate_max_depth(value: int) -> int:
    if value != UNLIMITED_DEPTH and value < 1:
        raise ValueError(f"max_depth must be {UNLIMITED_DEPTH} (unlimited) or >= 1, got {value}")
    return value


def max_depth() -> int:
    raw = os.getenv("TTT_MAX_DEPTH")
    if raw is None or not raw.strip():
        return UNLIMITED_DEPTH
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"TTT_MAX_DEPTH must be an integer, got {raw!r}") from None
    try:
        return validate_max_depth(value)
    except ValueError as e:
        raise ValueError(f"TTT_MAX_DEPTH: {e}") from None


def log_level() -> int:
    name = (os.getenv("TTT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"TTT_LOG_LEVEL is not a logging level: {name!r}")
    return level


@dataclass
class SearchConfig:
    max_depth: int = UNLIMITED_DEPTH
    log_level: int = logging.INFO

    def __post_init__(self) -> None:
        validate_max_depth(self.max_depth)

    @classmethod
    def from_env(cls) -> "SearchConfig":
        return cls(max_depth=max_depth(), log_level=log_level())
