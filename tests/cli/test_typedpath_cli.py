"""Command line parsing, joining and stripping."""

from __future__ import annotations

import json

import pytest

import typedpath.cli.main as cli_main
from tests._helpers.expect import expect_equal


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
    exit_code = cli_main.main(list(argv))
    return exit_code, capsys.readouterr().out


def test_cli_parse_prints_canonical_forms(capsys: pytest.CaptureFixture[str]) -> None:
    """parse prints one canonical path per accepted input."""
    exit_code, out = _run(capsys, "parse", "--as", "abs-dir", "///foo//bar//mu/", "/")
    expect_equal(exit_code, 0)
    expect_equal(out.splitlines(), ["/foo/bar/mu/", "/"])


def test_cli_parse_reports_rejections(capsys: pytest.CaptureFixture[str]) -> None:
    """A rejected input makes the command fail but still prints the others."""
    exit_code, out = _run(capsys, "parse", "--as", "rel-file", "a//b.txt", "../x")
    expect_equal(exit_code, 1)
    expect_equal(out.splitlines(), ["a/b.txt"])


def test_cli_parse_json(capsys: pytest.CaptureFixture[str]) -> None:
    """--json emits a list with null for rejected input."""
    exit_code, out = _run(capsys, "parse", "--as", "rel-dir", "--json", "~/foo", "/abs", "")
    expect_equal(exit_code, 1)
    expect_equal(json.loads(out), ["~/foo/", None, "./"])


def test_cli_join(capsys: pytest.CaptureFixture[str]) -> None:
    """join appends files and directories to absolute or relative parents."""
    expect_equal(_run(capsys, "join", "/home/", "chris/test.txt"), (0, "/home/chris/test.txt\n"))
    expect_equal(_run(capsys, "join", "home", "chris/"), (0, "home/chris/\n"))


def test_cli_join_rejects_bad_input(capsys: pytest.CaptureFixture[str]) -> None:
    """Malformed parents or absolute children are reported with exit code 1."""
    expect_equal(_run(capsys, "join", "../up", "x.txt"), (1, ""))
    expect_equal(_run(capsys, "join", "/home/", "/etc/passwd"), (1, ""))


def test_cli_strip(capsys: pytest.CaptureFixture[str]) -> None:
    """strip prints the relative remainder or fails when there is none."""
    expect_equal(_run(capsys, "strip", "/home/chris", "/home/chris/notes/todo.txt"), (0, "notes/todo.txt\n"))
    expect_equal(_run(capsys, "strip", "/home/chris", "/home/chris/"), (1, ""))
    expect_equal(_run(capsys, "strip", "/home/chris", "/etc/hosts"), (1, ""))


def test_cli_windows_platform(capsys: pytest.CaptureFixture[str]) -> None:
    """--platform windows folds separators into backslashes."""
    exit_code, out = _run(capsys, "--platform", "windows", "parse", "--as", "abs-dir", "C:/Users//chris")
    expect_equal(exit_code, 0)
    expect_equal(out.strip(), "C:\\Users\\chris\\")


def test_make_parser_requires_command() -> None:
    """A subcommand is mandatory."""
    with pytest.raises(SystemExit):
        cli_main.make_parser().parse_args([])
