import string

import pytest

from bytekit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_alpha(ord(ch)) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ord(ch)) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII)
def test_is_print_matches_printable_without_whitespace_controls(ch):
    expected = ch in string.printable and (ch == " " or not ch.isspace())
    assert is_print(ch) == expected


def test_non_ascii_letters_are_not_classified():
    assert is_alpha("é") is False
    assert is_alnum(ord("é")) is False
    assert is_print("é") is False


@pytest.mark.parametrize("code", [-1, 128, 255, 1000])
def test_is_ascii_rejects_out_of_range(code):
    assert is_ascii(code) is False


@pytest.mark.parametrize("ch", ASCII)
def test_is_ascii_accepts_all_ascii(ch):
    assert is_ascii(ch) is True


@pytest.mark.parametrize("ch", ASCII)
def test_case_conversion_matches_str_methods_on_ascii(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(ch) == ch.lower()


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_case_conversion_leaves_non_ascii_alone():
    assert to_upper("é") == "é"
    assert to_lower(300) == 300


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_is_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)