from passmeter.config import AnalyzerConfig
from passmeter.validator import is_repeated_character, validate


def test_good_password_has_no_errors():
    assert validate("Abcd123!") == []


def test_repeated_characters():
    errors = validate("aaaaaaaa")
    assert len(errors) == 2
    assert "categories" in errors[0]
    assert "repeated" in errors[1]


def test_short_password_collects_all_violations():
    errors = validate("aa")
    assert len(errors) == 3
    assert "at least 8 characters" in errors[0]


def test_empty_and_single_char_are_not_repeats():
    assert not is_repeated_character("")
    assert not is_repeated_character("a")
    assert is_repeated_character("\n\n")
    assert len(validate("")) == 2


def test_three_classes_are_enough():
    assert validate("abcdefg1!") == []
    assert validate("Aa1") == ["Password must be at least 8 characters long."]


def test_min_length_comes_from_config():
    errors = validate("Abcd123!", config=AnalyzerConfig(min_length=12))
    assert errors == ["Password must be at least 12 characters long."]
