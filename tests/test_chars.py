import string

import pytest

from ftlib.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(256))
def test_classification_matches_ascii_sets(code):
    ch = chr(code)
    assert is_alpha(code) == (ch in string.ascii_letters)
    assert is_digit(code) == (ch in string.digits)
    assert is_alnum(code) == (ch in string.ascii_letters + string.digits)
    assert is_ascii(code) == (code < 128)
    assert is_print(code) == (ch in string.printable and ch not in "\t\n\r\x0b\x0c")


def test_classification_accepts_strings_and_ints_alike():
    for ch in "aZ5 ~\x7f":
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


def test_negative_codes_are_not_ascii():
    assert is_ascii(-1) is False
    assert is_print(-1) is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_mapping_matches_str_methods(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(ch) == ch.lower()


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_mapping_leaves_others_alone(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_mapping_with_codes_round_trips():
    for code in range(128):
        assert to_lower(to_upper(code)) == to_lower(code)
        assert to_upper(code) == ord(to_upper(chr(code)))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("   +123abc", 123),
        ("  -456def", -456),
        ("  +-789", 0),
        ("42", 42),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("\t\n\v\f\r ") == 0


def test_atoi_skips_all_c_whitespace():
    assert atoi("\t\n\v\f\r 17") == atoi("17")


def test_atoi_stops_at_inner_space():
    assert atoi("12 34") == atoi("12")


@pytest.mark.parametrize("n", [0, 1, -1, 42, -123, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)
    with pytest.raises(OverflowError):
        itoa(-(2**31) - 1)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")