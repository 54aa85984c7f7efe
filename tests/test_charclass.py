import pytest

from pipex.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = range(128)
OUTSIDE = [-1, -128, 128, 200, 255, 1024]


def test_is_alpha_matches_ascii_letters():
    assert all(is_alpha(c) == chr(c).isalpha() for c in ASCII)


def test_is_digit_matches_ascii_digits():
    assert all(is_digit(c) == chr(c).isdigit() for c in ASCII)


def test_is_alnum_matches_ascii():
    assert all(is_alnum(c) == chr(c).isalnum() for c in ASCII)


def test_is_alnum_is_union():
    assert all(is_alnum(c) == (is_alpha(c) or is_digit(c)) for c in range(-5, 300))


def test_is_print_matches_printable_ascii():
    assert all(is_print(c) == chr(c).isprintable() for c in ASCII)


def test_is_print_bounds():
    assert is_print(ord(" ")) is True
    assert is_print(ord("~")) is True
    assert is_print(127) is False


@pytest.mark.parametrize("code", OUTSIDE)
def test_non_ascii_codes_are_not_classified(code):
    assert not is_alpha(code)
    assert not is_digit(code)
    assert not is_alnum(code)
    assert not is_print(code)
    assert not is_ascii(code)


def test_is_ascii_over_ascii_range():
    assert all(is_ascii(c) for c in ASCII)


def test_to_upper_matches_ascii():
    assert all(to_upper(c) == ord(chr(c).upper()) for c in ASCII)


def test_to_lower_matches_ascii():
    assert all(to_lower(c) == ord(chr(c).lower()) for c in ASCII)


@pytest.mark.parametrize("code", OUTSIDE + [ord("@"), ord("["), ord("`"), ord("{")])
def test_case_mapping_leaves_others_unchanged(code):
    assert to_upper(code) == code
    assert to_lower(code) == code


def test_case_round_trip():
    for c in ASCII:
        if is_alpha(c):
            assert to_lower(to_upper(c)) == to_lower(c)
            assert to_upper(to_lower(c)) == to_upper(c)