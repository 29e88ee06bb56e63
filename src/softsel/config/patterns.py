"""Default pattern lists selected for a fresh installation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .env import env_value

DEFAULT_PATTERNS_VAR: Final[str] = "SOFTSEL_DEFAULT_PATTERNS"
OPTIONAL_DEFAULT_PATTERNS_VAR: Final[str] = "SOFTSEL_OPTIONAL_DEFAULT_PATTERNS"


@dataclass(frozen=True, slots=True)
class PatternConfig:
    default_patterns: tuple[str, ...] = field(default_factory=tuple)
    optional_default_patterns: tuple[str, ...] = field(default_factory=tuple)


def split_pattern_list(value: str | None) -> list[str]:
    """Split a whitespace separated pattern list (spaces, tabs or newlines)."""

    if not value:
        return []
    return value.split()


def get_pattern_config() -> PatternConfig:
    return PatternConfig(
        default_patterns=tuple(split_pattern_list(env_value(DEFAULT_PATTERNS_VAR))),
        optional_default_patterns=tuple(
            split_pattern_list(env_value(OPTIONAL_DEFAULT_PATTERNS_VAR))
        ),
    )
