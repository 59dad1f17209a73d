"""
Tests for the registration password policy.
"""

import pytest

from core.password_policy import (
    DIGIT_MESSAGE,
    LENGTH_MESSAGE,
    LOWERCASE_MESSAGE,
    SPECIAL_MESSAGE,
    UPPERCASE_MESSAGE,
    validate_password,
)


def test_strong_password_has_no_violations():
    assert validate_password("Abcdef1!") == []


@pytest.mark.parametrize("password", ["Ab1!", "Abc1!x", "Abcdefgh1!xyz", "A" * 30 + "b1!"])
def test_length_violation_outside_7_to_12(password):
    assert LENGTH_MESSAGE in validate_password(password)


@pytest.mark.parametrize("password", ["Abcde1!", "Abcdefghi1!x"])
def test_length_bounds_are_inclusive(password):
    assert validate_password(password) == []


def test_all_violations_are_reported_in_rule_order():
    assert validate_password("abcdef") == [
        LENGTH_MESSAGE,
        UPPERCASE_MESSAGE,
        DIGIT_MESSAGE,
        SPECIAL_MESSAGE,
    ]


def test_empty_password_breaks_every_rule():
    assert validate_password("") == [
        LENGTH_MESSAGE,
        LOWERCASE_MESSAGE,
        UPPERCASE_MESSAGE,
        DIGIT_MESSAGE,
        SPECIAL_MESSAGE,
    ]


@pytest.mark.parametrize("special", list("!@#$%^&*()_+-=[]{};':\"\\|,./"))
def test_each_special_character_counts(special):
    assert validate_password(f"Abcdef1{special}") == []


def test_characters_outside_the_special_set_do_not_count():
    assert validate_password("Abcdef1~") == [SPECIAL_MESSAGE]
    assert validate_password("Abcdef1 ") == [SPECIAL_MESSAGE]


def test_non_ascii_digits_do_not_count():
    # Arabic-Indic digit one
    assert DIGIT_MESSAGE in validate_password("Abcdef\u0661!")
