from passmeter.suggestions import GOOD_PASSWORD, suggest


def test_short_password_only_asks_for_length():
    assert suggest("Ab1!") == "Use at least 8 characters."


def test_every_missing_class_is_flagged():
    s = suggest("alllowercase")
    assert s == "Add uppercase letters. Add numbers. Add symbols."
    assert "lowercase" not in s


def test_suggestion_order():
    assert suggest("12345678") == "Add uppercase letters. Add lowercase letters. Add symbols."


def test_differs_from_validator_threshold():
    # three classes pass validation but still get a suggestion
    assert suggest("abcdefg1!") == "Add uppercase letters."


def test_good_password():
    assert suggest("Abcd123!") == GOOD_PASSWORD
