"""
passmeter.levels

The ordered strength tier table and score classification.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import ConfigError


@dataclass(frozen=True)
class StrengthLevel:
    name: str
    tag: str  # display style, rendered by rich in the CLI
    max_score: int


DEFAULT_LEVELS: Tuple[StrengthLevel, ...] = (
    StrengthLevel("Extremely Weak", "red", 20),
    StrengthLevel("Weak", "dark_orange", 40),
    StrengthLevel("Medium", "yellow", 60),
    StrengthLevel("Strong", "green", 80),
    StrengthLevel("Very Strong", "blue", 100),
)


def validate_levels(levels: Sequence[StrengthLevel], top_score: int = 100) -> Tuple[StrengthLevel, ...]:
    """
    Check the tier table invariants and return it as a tuple:
    - at least one level
    - upper bounds strictly increasing
    - the last bound equals top_score
    """
    levels = tuple(levels)
    if not levels:
        raise ConfigError("strength level table must not be empty")
    previous = None
    for level in levels:
        if previous is not None and level.max_score <= previous:
            raise ConfigError(
                f"strength level bounds must be strictly increasing (got {level.max_score} after {previous})"
            )
        previous = level.max_score
    if levels[-1].max_score != top_score:
        raise ConfigError(f"last strength level must end at {top_score}, not {levels[-1].max_score}")
    return levels


def classify_score(score: int, levels: Sequence[StrengthLevel] = DEFAULT_LEVELS) -> StrengthLevel:
    """Return the first level whose upper bound is >= score (bounds are inclusive)."""
    for level in levels:
        if score <= level.max_score:
            return level
    return levels[-1]


def range_label(levels: Sequence[StrengthLevel], index: int) -> str:
    """Human-readable score band of levels[index], e.g. '> 20 and <= 40'."""
    level = levels[index]
    if index == 0:
        return f"<= {level.max_score}"
    return f"> {levels[index - 1].max_score} and <= {level.max_score}"
