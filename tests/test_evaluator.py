import math

from passmeter.config import AnalyzerConfig
from passmeter.evaluator import char_set_size, detect_classes, evaluate
from passmeter.levels import DEFAULT_LEVELS


def test_empty_password():
    result = evaluate("")
    assert result.length == 0
    assert result.categories == 0
    assert result.char_set_size == 0
    assert result.score == 0
    assert result.possible_combinations == 1
    assert result.strength_level == DEFAULT_LEVELS[0]


def test_all_classes_present():
    result = evaluate("Abcd123!")
    assert result.categories == 4
    assert result.char_set_size == 95
    assert result.possible_combinations == 95 ** 8
    # 8*5 + 4*10 + 8 unique
    assert result.score == 88
    assert result.strength_level.name == "Very Strong"
    assert result.seconds_to_crack == 95 ** 8 / 1_000_000_000


def test_score_and_categories_stay_in_range():
    samples = [
        "", "a", "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaa", "P@ssw0rd", "correct horse battery staple",
        "ñandú", "密码密码", "X7f!9Lq@2Vb#tR4sYp" * 5, "\n\t ",
    ]
    for pw in samples:
        result = evaluate(pw)
        assert 0 <= result.score <= 100
        assert 0 <= result.categories <= 4


def test_combinations_grow_with_length():
    previous = 0
    for n in range(3, 40):
        pw = ("aB1" * 20)[:n]
        combos = evaluate(pw).possible_combinations
        assert combos >= previous
        previous = combos


def test_low_diversity_penalty():
    # two classes: lowercase + uppercase
    pw = "abcdEFGH"
    result = evaluate(pw)
    assert result.categories == 2
    unpenalized_seconds = 52 ** 8 / 1_000_000_000
    assert result.seconds_to_crack == unpenalized_seconds / 10 ** 6
    unpenalized_score = 8 * 5 + 2 * 10 + 8
    assert result.score == unpenalized_score - 10


def test_penalty_never_goes_below_zero():
    assert evaluate("a").score == 0


def test_very_long_password_does_not_overflow():
    result = evaluate("Ab1!" * 75)
    assert result.seconds_to_crack == math.inf
    assert result.possible_combinations == 95 ** 300
    assert result.score == 100


def test_non_ascii_letters_count_as_symbols():
    classes = detect_classes("é")
    assert classes.symbols
    assert not classes.lowercase
    assert classes.categories == 1
    assert char_set_size(classes) == 33


def test_custom_attempt_rate():
    slow = AnalyzerConfig(attempts_per_second=1_000)
    result = evaluate("Abcd123!", config=slow)
    assert result.seconds_to_crack == 95 ** 8 / 1_000
