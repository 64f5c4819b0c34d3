"""Tests for the password strength scorer."""

import pytest

from securepass import (
    EMPTY_LABEL,
    MAX_SUGGESTIONS,
    StrengthResult,
    classify_score,
    has_repeated_run,
    score,
)


SAMPLES = [
    "",
    "a",
    "aaa",
    "   ",
    "ééé",
    "password",
    "aaaaaaaa",
    "Abcdef123!",
    "Password123!",
    "0000000000000000",
    "!!!!!!!!!!!!!!!!!!!!!!!!",
    "Zz9@Zz9@Zz9@Zz9@Zz9@",
    "éèêë",
]


def test_empty_password():
    result = score("")
    assert result == StrengthResult(score=0, label=EMPTY_LABEL, color_tag="muted", suggestions=())


@pytest.mark.parametrize("password", SAMPLES)
def test_score_is_clamped_and_hints_are_capped(password):
    result = score(password)
    assert 0 <= result.score <= 100
    assert len(result.suggestions) <= MAX_SUGGESTIONS


def test_all_classes_medium_length():
    result = score("Abcdef123!")
    assert result.score == 90
    assert result.label == "Very Strong"
    assert result.color_tag == "neon-green"
    assert result.suggestions == ()


def test_all_classes_long_password_hits_ceiling():
    result = score("Password123!")
    assert result.score == 100
    assert result.label == "Very Strong"


def test_repeated_lowercase_run():
    # 15 (length) + 20 (lowercase) - 10 (repetition)
    result = score("aaaaaaaa")
    assert result.score == 25
    assert result.label == "Weak"
    assert result.suggestions == (
        "Add uppercase letters (A-Z)",
        "Add numbers (0-9)",
        "Add special characters (!@#$%^&*)",
    )


def test_short_password_reports_length_first():
    result = score("aaa")
    assert result.score == 10
    assert result.label == "Very Weak"
    assert result.color_tag == "destructive"
    assert result.suggestions[0] == "Use at least 8 characters (12+ recommended)"
    assert result.suggestions == (
        "Use at least 8 characters (12+ recommended)",
        "Add uppercase letters (A-Z)",
        "Add numbers (0-9)",
    )


def test_penalty_alone_clamps_to_zero():
    result = score("   ")
    assert result.score == 0
    assert result.label == "Very Weak"


def test_non_ascii_letters_earn_no_bonus():
    result = score("ééé")
    assert result.score == 0
    assert "Add lowercase letters (a-z)" in result.suggestions


@pytest.mark.parametrize(
    "password, expected_score, expected_label",
    [
        ("password", 35, "Weak"),
        ("PASSWORD12", 55, "Medium"),
        ("Abcdefgh1", 75, "Strong"),
        ("Abcdefg1_", 75, "Strong"),
        ("abc", 20, "Weak"),
    ],
)
def test_tiers(password, expected_score, expected_label):
    result = score(password)
    assert result.score == expected_score
    assert result.label == expected_label


def test_underscore_is_not_a_scored_symbol():
    assert "Add special characters (!@#$%^&*)" in score("Abcdefg1_").suggestions
    assert "Add special characters (!@#$%^&*)" not in score('Abcdefg1"').suggestions


def test_repetition_hint_is_last_in_order():
    # Only the repetition and symbol rules fail here.
    result = score("Abc1111111111")
    assert result.suggestions == (
        "Add special characters (!@#$%^&*)",
        "Avoid repeating characters",
    )
    assert result.score == 25 + 20 + 20 + 20 - 10


def test_has_repeated_run():
    assert has_repeated_run("xaaay")
    assert has_repeated_run("!!!")
    assert not has_repeated_run("aabbaa")
    assert not has_repeated_run("")
    assert not has_repeated_run("ab")


@pytest.mark.parametrize(
    "value, label",
    [(100, "Very Strong"), (80, "Very Strong"), (79, "Strong"), (60, "Strong"),
     (59, "Medium"), (40, "Medium"), (39, "Weak"), (20, "Weak"), (19, "Very Weak"), (0, "Very Weak")],
)
def test_classify_score_boundaries(value, label):
    assert classify_score(value)[0] == label
