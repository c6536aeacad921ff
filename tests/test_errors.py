"""Tests for error reporting."""

import pytest

from mdrun.lib.errors import (
    ExecutionError,
    MdrunError,
    NoCodeBlocksError,
    ResolutionError,
    UnsupportedLanguageError,
    error_hint,
    handle_error,
)


def exit_output(error, capsys):
    with pytest.raises(SystemExit) as exc:
        handle_error(error)
    return exc.value.code, capsys.readouterr().err


def test_resolution_error_names_element(capsys):
    code, err = exit_output(ResolutionError("deploy", ["ops", "deploy"]), capsys)
    assert code == 1
    assert "Heading not found: deploy (in path 'ops > deploy')" in err
    assert "list the available headings" in err


def test_execution_error_keeps_child_status(capsys):
    code, err = exit_output(ExecutionError("sh -euc 'exit 4' --", exit_code=4), capsys)
    assert code == 4
    assert "sh -euc 'exit 4' --" in err
    assert "--dry-run" in err


def test_plain_error_has_no_hint(capsys):
    code, err = exit_output(MdrunError("boom", exit_code=2), capsys)
    assert code == 2
    assert err == "Error: boom\n"


def test_unexpected_error(capsys):
    code, err = exit_output(RuntimeError("kaput"), capsys)
    assert code == 1
    assert "Unexpected error: kaput" in err


def test_hints_name_the_failing_element():
    assert "'build'" in error_hint(NoCodeBlocksError("build"))
    assert "'cobol'" in error_hint(UnsupportedLanguageError("cobol"))
    assert error_hint(ExecutionError("x", reason="x: command not found")) is None
