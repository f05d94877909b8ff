"""
passmeter.validator

Policy checks for a candidate password. Each violated rule adds one message;
all rules are always evaluated, so a candidate can collect several.
"""

import logging
import re
from typing import List

from .config import DEFAULT_CONFIG, AnalyzerConfig

logger = logging.getLogger(__name__)

# one character repeated over the whole candidate, e.g. 'aaaa'
REPEATED_CHAR_RE = re.compile(r"(.)\1+", re.DOTALL)


def _category_count(password: str) -> int:
    return sum((
        bool(re.search(r"[a-z]", password)),
        bool(re.search(r"[A-Z]", password)),
        bool(re.search(r"[0-9]", password)),
        bool(re.search(r"[^a-zA-Z0-9]", password)),
    ))


def is_repeated_character(password: str) -> bool:
    return REPEATED_CHAR_RE.fullmatch(password) is not None


def validate(password: str, config: AnalyzerConfig = DEFAULT_CONFIG) -> List[str]:
    """Return the list of policy violations; empty when the password passes."""
    errors: List[str] = []

    if len(password) < config.min_length:
        errors.append(f"Password must be at least {config.min_length} characters long.")

    if _category_count(password) < config.min_categories:
        errors.append(
            f"Include at least {config.min_categories} of the following categories: "
            "uppercase letters, lowercase letters, numbers and symbols."
        )

    if is_repeated_character(password):
        errors.append("Password must not contain obvious patterns or repeated characters.")

    logger.debug("Validated candidate: %d violation(s)", len(errors))
    return errors
