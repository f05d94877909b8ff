import pytest

from passmeter.errors import ConfigError
from passmeter.levels import DEFAULT_LEVELS, StrengthLevel, classify_score, range_label, validate_levels


def test_boundary_is_inclusive():
    assert classify_score(40).name == "Weak"
    assert classify_score(41).name == "Medium"
    assert classify_score(0).name == "Extremely Weak"
    assert classify_score(100).name == "Very Strong"


def test_falls_back_to_highest_level():
    assert classify_score(150) == DEFAULT_LEVELS[-1]


def test_range_labels():
    assert range_label(DEFAULT_LEVELS, 0) == "<= 20"
    assert range_label(DEFAULT_LEVELS, 1) == "> 20 and <= 40"
    assert range_label(DEFAULT_LEVELS, 4) == "> 80 and <= 100"


def test_validate_levels_rejects_bad_tables():
    with pytest.raises(ConfigError):
        validate_levels([])
    with pytest.raises(ConfigError):
        validate_levels([StrengthLevel("a", "red", 50), StrengthLevel("b", "red", 50), StrengthLevel("c", "red", 100)])
    with pytest.raises(ConfigError):
        validate_levels([StrengthLevel("a", "red", 20), StrengthLevel("b", "red", 90)])
    assert validate_levels(list(DEFAULT_LEVELS)) == DEFAULT_LEVELS
