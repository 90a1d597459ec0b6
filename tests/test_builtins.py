import io

import pytest

from hshell.builtins import (
    BuiltinResult,
    check_for_builtin,
    is_valid_number,
    shell_exit,
)
from hshell.shell import ShellState


@pytest.mark.parametrize("text", ["0", "42", "-5", "007", "-"])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize("text", [None, "", "4a", "+3", " 1", "1.5", "\u0663"])
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_exit_without_argument_keeps_status():
    state = ShellState(exit_status=5)
    assert shell_exit(["exit"], state, io.StringIO()) is BuiltinResult.EXIT
    assert state.exit_status == 5


def test_exit_with_status():
    state = ShellState()
    assert shell_exit(["exit", "7"], state, io.StringIO()) is BuiltinResult.EXIT
    assert state.exit_status == 7


def test_exit_status_limited_to_eight_bits():
    state = ShellState()
    shell_exit(["exit", "300"], state, io.StringIO())
    assert state.exit_status == 44


@pytest.mark.parametrize("argument", ["-1", "abc", "99999999999999999999"])
def test_exit_illegal_number(argument):
    state = ShellState()
    err = io.StringIO()
    assert shell_exit(["exit", argument], state, err) is BuiltinResult.ERROR
    assert state.exit_status == 2
    assert err.getvalue() == f"exit: Illegal number: {argument}\n"


def test_check_for_builtin_dispatch():
    state = ShellState()
    err = io.StringIO()
    assert check_for_builtin(["ls", "-l"], state, err) is BuiltinResult.NOT_BUILTIN
    assert check_for_builtin(["exit", "3"], state, err) is BuiltinResult.EXIT
    assert state.exit_status == 3