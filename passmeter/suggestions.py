"""
passmeter.suggestions

One-line advice for improving a password. Unlike the validator, which only
asks for a minimum number of character classes, this flags every missing
class individually.
"""

import re
from typing import List

from .config import DEFAULT_CONFIG, AnalyzerConfig

GOOD_PASSWORD = "Good password, keep it up!"

# order matters: suggestions are reported in this order
CLASS_SUGGESTIONS = (
    (re.compile(r"[A-Z]"), "Add uppercase letters."),
    (re.compile(r"[a-z]"), "Add lowercase letters."),
    (re.compile(r"[0-9]"), "Add numbers."),
    (re.compile(r"[^a-zA-Z0-9]"), "Add symbols."),
)


def suggest(password: str, config: AnalyzerConfig = DEFAULT_CONFIG) -> str:
    if len(password) < config.min_length:
        return f"Use at least {config.min_length} characters."
    suggestions: List[str] = [
        message for pattern, message in CLASS_SUGGESTIONS if not pattern.search(password)
    ]
    if suggestions:
        return " ".join(suggestions)
    return GOOD_PASSWORD
