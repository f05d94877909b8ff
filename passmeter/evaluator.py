"""
passmeter.evaluator

Password strength estimator:
- detect_classes(password): which of the four character classes appear
- char_set_size(classes): brute-force alphabet size for those classes
- evaluate(password): returns a StrengthResult with crack-time estimate,
  score (0-100), strength level and the numbers behind them

Character classes are ASCII only: a-z, A-Z, 0-9, and "symbol" for anything
else. Non-ASCII letters and digits (e.g. 'é', '٣') therefore count as
symbols. Length is measured in code points.
"""

import logging
import math
import re
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, AnalyzerConfig, CharSetSizes
from .levels import StrengthLevel, classify_score

logger = logging.getLogger(__name__)

LOWERCASE_RE = re.compile(r"[a-z]")
UPPERCASE_RE = re.compile(r"[A-Z]")
DIGIT_RE = re.compile(r"[0-9]")
SYMBOL_RE = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class CharacterClassPresence:
    lowercase: bool
    uppercase: bool
    digits: bool
    symbols: bool

    @property
    def categories(self) -> int:
        return sum((self.lowercase, self.uppercase, self.digits, self.symbols))


@dataclass(frozen=True)
class StrengthResult:
    seconds_to_crack: float
    strength_level: StrengthLevel
    score: int
    possible_combinations: int
    char_set_size: int
    length: int
    categories: int


def detect_classes(password: str) -> CharacterClassPresence:
    return CharacterClassPresence(
        lowercase=bool(LOWERCASE_RE.search(password)),
        uppercase=bool(UPPERCASE_RE.search(password)),
        digits=bool(DIGIT_RE.search(password)),
        symbols=bool(SYMBOL_RE.search(password)),
    )


def char_set_size(classes: CharacterClassPresence, sizes: CharSetSizes = DEFAULT_CONFIG.char_set_sizes) -> int:
    """Sum of the alphabet sizes of the classes present (0 when none)."""
    total = 0
    if classes.lowercase:
        total += sizes.lowercase
    if classes.uppercase:
        total += sizes.uppercase
    if classes.digits:
        total += sizes.digits
    if classes.symbols:
        total += sizes.symbols
    return total


def _brute_force_seconds(combinations: int, attempts_per_second: int) -> float:
    try:
        return combinations / attempts_per_second
    except OverflowError:
        # exact int too large for a float quotient
        logger.debug("Crack-time estimate overflowed; reporting infinity")
        return math.inf


def evaluate(password: str, config: AnalyzerConfig = DEFAULT_CONFIG) -> StrengthResult:
    """
    Estimate the strength of a password. Total over all strings: never raises.

    - possible_combinations = char_set_size ** length (exact; 1 for '')
    - seconds_to_crack = combinations / attempts_per_second, divided again by
      weak_time_divisor when fewer than min_categories classes are present;
      math.inf when the quotient does not fit a float
    - score = min(100, length*5 + categories*10 + unique chars) minus
      category_penalty per missing category, floored at 0
    """
    length = len(password)
    unique_chars = len(set(password))

    classes = detect_classes(password)
    categories = classes.categories

    missing = max(0, config.min_categories - categories)
    penalty = missing * config.category_penalty

    size = char_set_size(classes, config.char_set_sizes)
    combinations = size ** length

    seconds = _brute_force_seconds(combinations, config.attempts_per_second)
    if missing:
        seconds = seconds / config.weak_time_divisor

    score = min(config.max_score, length * 5 + categories * 10 + unique_chars)
    score = max(0, score - penalty)

    level = classify_score(score, config.levels)
    logger.debug(
        "Evaluated candidate: length=%d categories=%d score=%d level=%s",
        length, categories, score, level.name,
    )

    return StrengthResult(
        seconds_to_crack=seconds,
        strength_level=level,
        score=score,
        possible_combinations=combinations,
        char_set_size=size,
        length=length,
        categories=categories,
    )
