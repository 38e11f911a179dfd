import random

import pytest

from pushswap.cli import main, solve
from pushswap.validation import InputError

INSTRUCTIONS = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def test_solve_three_values():
    assert solve(["2", "1", "3"]) == ["sa"]


def test_solve_single_string_argument():
    assert solve(["2 1 3"]) == ["sa"]


def test_solve_sorted_input_needs_nothing():
    assert solve(["1", "2", "3", "10"]) == []


def test_solve_without_arguments_is_silent_error():
    with pytest.raises(InputError) as info:
        solve([])
    assert info.value.reported is False


@pytest.mark.parametrize("argv", [["1", "a"], ["1", "1"], ["2147483648"]])
def test_solve_rejects_bad_input(argv):
    with pytest.raises(InputError) as info:
        solve(argv)
    assert info.value.reported is True


def test_solve_large_input_keeps_to_instruction_set():
    rng = random.Random(7)
    values = [str(value) for value in rng.sample(range(1000, 5000), 30)]
    instructions = solve(values)
    assert instructions
    assert set(instructions) <= INSTRUCTIONS
    assert instructions.count("pb") == instructions.count("pa")


def test_main_prints_instructions(capsys):
    assert main(["2", "1", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_main_reports_error(capsys):
    assert main(["x"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_without_arguments_is_quiet(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""