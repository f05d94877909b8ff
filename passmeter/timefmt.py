"""
passmeter.timefmt

Human-readable rendering of crack-time estimates and combination counts.
"""

import math
from decimal import Decimal
from typing import Tuple

LESS_THAN_ONE_SECOND = "less than one second"
FOREVER = "forever"

# largest first; only the first matching unit is reported
TIME_UNITS: Tuple[Tuple[str, int], ...] = (
    ("years", 31_536_000),
    ("days", 86_400),
    ("hours", 3_600),
    ("minutes", 60),
    ("seconds", 1),
)


def format_duration(seconds: float) -> str:
    """
    Render seconds using the single largest unit that fits, e.g. 90 -> '1 minutes'.
    The value is floored, so this is an approximation, not a decomposition.
    """
    if seconds < 1:
        return LESS_THAN_ONE_SECOND
    if math.isinf(seconds):
        return FOREVER
    for label, threshold in TIME_UNITS:
        if seconds >= threshold:
            return f"{math.floor(seconds / threshold)} {label}"
    return LESS_THAN_ONE_SECOND


def format_combinations(n: int, digits: int = 2) -> str:
    """Scientific notation for arbitrarily large counts, e.g. 6634204312890625 -> '6.63e+15'."""
    return f"{Decimal(n):.{digits}e}"
