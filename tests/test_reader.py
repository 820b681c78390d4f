import io

import pytest
from hypothesis import given, strategies as st

from pushswap.libft.reader import LineReader, get_next_line


def test_lines_keep_newline_and_last_may_lack_it():
    reader = LineReader(io.StringIO("sa\npb\nrra"))
    assert reader.read_line() == "sa\n"
    assert reader.read_line() == "pb\n"
    assert reader.read_line() == "rra"
    assert reader.read_line() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).read_line() is None


def test_exhausted_stays_exhausted():
    reader = LineReader(io.StringIO("x\n"))
    assert list(reader) == ["x\n"]
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_lines_are_returned():
    assert list(LineReader(io.StringIO("\n\nz\n"))) == ["\n", "\n", "z\n"]


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"ra\nrb\n"), buffer_size=4)
    assert list(reader) == [b"ra\n", b"rb\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), buffer_size=size)


@given(st.text(alphabet="ab \n"), st.integers(min_value=1, max_value=16))
def test_lines_rebuild_the_text(text, size):
    lines = list(LineReader(io.StringIO(text), buffer_size=size))
    assert "".join(lines) == text
    for line in lines[:-1]:
        assert line.endswith("\n")
        assert line.count("\n") == 1
    assert all(line for line in lines)


def test_get_next_line_keeps_state_per_stream():
    first = io.StringIO("a\nb\n")
    second = io.StringIO("c\n")
    assert get_next_line(first) == "a\n"
    assert get_next_line(second) == "c\n"
    assert get_next_line(first) == "b\n"
    assert get_next_line(first) is None
    assert get_next_line(second) is None