import io
import random

import pytest

from pushswap.checker import check, main, parse_instruction, run_instructions
from pushswap.parsing import InputError
from pushswap.sorter import sort_values
from pushswap.stack import Operation, Stacks


@pytest.mark.parametrize("operation", list(Operation))
def test_parse_instruction_round_trip(operation):
    assert parse_instruction(f"{operation}\n") is operation


@pytest.mark.parametrize("line", ["sa", "foo\n", "\n", "SA\n", "sa \n", "rraa\n", ""])
def test_parse_instruction_rejects(line):
    with pytest.raises(InputError):
        parse_instruction(line)


def test_run_instructions_applies_in_order():
    stacks = Stacks([1, 2, 3])
    run_instructions(stacks, ["pb\n", "pb\n", "ss\n"])
    assert stacks.a == [3]
    assert stacks.b == [1, 2]


def test_check_results():
    assert check([2, 1, 3], ["sa\n"]) is True
    assert check([1, 2, 3], []) is True
    assert check([2, 1, 3], []) is False
    assert check([1, 2, 3], ["pb\n"]) is False


def test_check_invalid_line_raises():
    with pytest.raises(InputError):
        check([2, 1], ["sa\n", "bogus\n"])


@pytest.mark.parametrize("seed", [4, 5])
def test_sorter_output_passes_check(seed):
    values = random.Random(seed).sample(range(500), 60)
    lines = [f"{op}\n" for op in sort_values(values)]
    assert check(values, lines) is True


def test_main_ok(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("ra\n"))
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_instruction(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("xx\n"))
    assert main(["2", "1", "3"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_single_argument_is_error(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["1 2 3"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_duplicate_is_error(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["1", "1"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_no_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""