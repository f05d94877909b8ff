# passmeter/config.py
"""
Analyzer settings.

Every tunable constant of the scoring model lives in an AnalyzerConfig; the
core functions take one as a keyword argument and default to DEFAULT_CONFIG.
Settings can be persisted as JSON in %APPDATA%/PassMeter/config.json (Windows)
or ~/.passmeter/config.json (fallback) and turned into an AnalyzerConfig with
build_config().
"""

import copy
import os
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import ConfigError
from .levels import DEFAULT_LEVELS, StrengthLevel, validate_levels

logger = logging.getLogger(__name__)

ATTEMPTS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class CharSetSizes:
    lowercase: int = 26
    uppercase: int = 26
    digits: int = 10
    symbols: int = 33


@dataclass(frozen=True)
class AnalyzerConfig:
    attempts_per_second: int = ATTEMPTS_PER_SECOND
    char_set_sizes: CharSetSizes = field(default_factory=CharSetSizes)
    levels: Tuple[StrengthLevel, ...] = DEFAULT_LEVELS
    min_categories: int = 3
    category_penalty: int = 10       # score points per missing category
    weak_time_divisor: int = 10 ** 6  # crack-time divisor below min_categories
    min_length: int = 8
    max_score: int = 100


DEFAULT_CONFIG = AnalyzerConfig()

DEFAULTS: Dict[str, Any] = {
    "attempts_per_second": ATTEMPTS_PER_SECOND,
    "char_set_sizes": {"lowercase": 26, "uppercase": 26, "digits": 10, "symbols": 33},
    "levels": [
        {"name": level.name, "tag": level.tag, "max_score": level.max_score}
        for level in DEFAULT_LEVELS
    ],
    "min_categories": 3,
    "category_penalty": 10,
    "weak_time_divisor": 10 ** 6,
    "min_length": 8,
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "PassMeter")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passmeter")
    return d


def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Read the settings file and merge it over DEFAULTS."""
    p = path or config_path()
    if not os.path.exists(p):
        return copy.deepcopy(DEFAULTS)
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", p, e)
        return copy.deepcopy(DEFAULTS)
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", p)
        return copy.deepcopy(DEFAULTS)
    out = copy.deepcopy(DEFAULTS)
    out.update(data)
    return out


def save_config(cfg: Mapping[str, Any], path: Optional[str] = None) -> str:
    """Atomically write settings as JSON; returns the path written."""
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    tmp = p + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(dict(cfg), f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, p)
    logger.debug("Saved settings to %s", p)
    return p


def _positive_int(cfg: Mapping[str, Any], key: str, allow_zero: bool = False) -> int:
    value = cfg.get(key, DEFAULTS[key])
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        raise ConfigError(f"{key} must be {'>= 0' if allow_zero else '> 0'}, got {value}")
    return value


def _parse_level(index: int, item: Any) -> StrengthLevel:
    if not isinstance(item, Mapping):
        raise ConfigError(f"levels[{index}] must be an object, got {item!r}")
    if "name" not in item or "max_score" not in item:
        raise ConfigError(f"levels[{index}] needs both 'name' and 'max_score'")
    name, tag, bound = item["name"], item.get("tag", ""), item["max_score"]
    if not isinstance(name, str) or not isinstance(tag, str):
        raise ConfigError(f"levels[{index}] name and tag must be strings")
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise ConfigError(f"levels[{index}].max_score must be an integer, got {bound!r}")
    return StrengthLevel(name, tag, bound)


def build_config(cfg: Mapping[str, Any]) -> AnalyzerConfig:
    """
    Turn a settings mapping (as returned by load_config) into an AnalyzerConfig.
    Raises ConfigError on invalid values.
    """
    sizes_raw = cfg.get("char_set_sizes", DEFAULTS["char_set_sizes"])
    if not isinstance(sizes_raw, Mapping):
        raise ConfigError("char_set_sizes must be an object")
    sizes = dict(DEFAULTS["char_set_sizes"])
    sizes.update(sizes_raw)
    for name, size in sizes.items():
        if name not in DEFAULTS["char_set_sizes"]:
            raise ConfigError(f"unknown character class {name!r}")
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ConfigError(f"char_set_sizes.{name} must be a non-negative integer, got {size!r}")

    levels_raw = cfg.get("levels", DEFAULTS["levels"])
    if not isinstance(levels_raw, list):
        raise ConfigError("levels must be a list")
    levels = [_parse_level(i, item) for i, item in enumerate(levels_raw)]

    return AnalyzerConfig(
        attempts_per_second=_positive_int(cfg, "attempts_per_second"),
        char_set_sizes=CharSetSizes(**sizes),
        levels=validate_levels(levels),
        min_categories=_positive_int(cfg, "min_categories", allow_zero=True),
        category_penalty=_positive_int(cfg, "category_penalty", allow_zero=True),
        weak_time_divisor=_positive_int(cfg, "weak_time_divisor"),
        min_length=_positive_int(cfg, "min_length", allow_zero=True),
    )
