import pytest
from hypothesis import given, strategies as st

from pushswap.parsing import (
    InputError,
    parse_arguments,
    parse_long,
    parse_string,
    split_numbers,
)


def test_parse_long_skips_whitespace_and_stops_at_non_digit():
    assert parse_long("  -42abc") == -42


def test_parse_long_plus_sign():
    assert parse_long("+7") == 7


def test_parse_long_no_digits_is_zero():
    assert parse_long("") == 0
    assert parse_long("-") == 0


@given(st.integers(min_value=-(2**63), max_value=2**63))
def test_parse_long_round_trip(value):
    assert parse_long(str(value)) == value


def test_parse_arguments_basic():
    assert parse_arguments(["3", "-1", "+2"]) == [3, -1, 2]


def test_parse_arguments_limits():
    assert parse_arguments(["-2147483648", "2147483647"]) == [-2147483648, 2147483647]


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["1a"],
        [""],
        ["2147483648"],
        ["-2147483649"],
        ["1", "--2"],
        [" 1"],
        ["+0", "-0"],
    ],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_lone_sign_reads_as_zero():
    assert parse_arguments(["-"]) == [0]


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_arguments(["x"])


@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True))
def test_parse_arguments_round_trip(values):
    assert parse_arguments([str(v) for v in values]) == values


@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True))
def test_parse_string_round_trip(values):
    assert parse_string("  ".join(str(v) for v in values)) == values


def test_parse_string_ignores_repeated_spaces():
    assert parse_string(" 3 2  1 ") == [3, 2, 1]


@pytest.mark.parametrize("text", ["1\t2", "1 1", "1 x"])
def test_parse_string_rejects(text):
    with pytest.raises(InputError):
        parse_string(text)


def test_split_numbers_words():
    assert split_numbers("1  -2 +3") == ["1", "-2", "+3"]


def test_split_numbers_rejects_other_characters():
    with pytest.raises(InputError):
        split_numbers("1,2")