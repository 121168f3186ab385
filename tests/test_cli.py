"""Tests for the sudoku-solve and sudoku-format programs."""

import io

from sudoku_stream.cli import EXIT_FAILURE, EXIT_SUCCESS, format_main, solve_main


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_solve_prints_first_solution(monkeypatch, capsys):
    feed(monkeypatch, ".234 43.. .... ...1")
    assert solve_main([]) == EXIT_SUCCESS
    out = capsys.readouterr().out
    assert out == "1 2  3 4\n4 3  1 2\n\n2 1  4 3\n3 4  2 1\n"


def test_solve_prints_requested_count(monkeypatch, capsys):
    feed(monkeypatch, "12.. 43.. .... ...1")
    assert solve_main(["5"]) == EXIT_SUCCESS
    out = capsys.readouterr().out
    # only three exist
    assert "\n == Solution 2 ==\n" in out
    assert "\n == Solution 3 ==\n" in out
    assert "Solution 4" not in out
    assert out.count("\n") == 3 * 5 + 2 * 2


def test_solve_zero_count_prints_nothing(monkeypatch, capsys):
    feed(monkeypatch, "....\n" * 4)
    assert solve_main(["0"]) == EXIT_SUCCESS
    assert capsys.readouterr().out == ""


def test_solve_reports_invalid_input(monkeypatch, capsys):
    feed(monkeypatch, "1234 4321 .2.. ....")
    assert solve_main([]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""


def test_solve_no_solution_is_not_a_failure(monkeypatch, capsys):
    feed(monkeypatch, "12.. .... ..3. ..4.")
    assert solve_main(["--verbose"]) == EXIT_SUCCESS
    assert capsys.readouterr().out == ""


def test_solve_rejects_negative_count(monkeypatch, capsys):
    feed(monkeypatch, "1")
    assert solve_main(["-2"]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""


def test_solve_rejects_non_numeric_count(monkeypatch, capsys):
    feed(monkeypatch, "1")
    assert solve_main(["abc"]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""


def test_undecodable_input_is_reported(monkeypatch, capsys):
    stdin = io.TextIOWrapper(io.BytesIO(b"12.. \xff\xfe"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)
    assert solve_main([]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""

    stdin = io.TextIOWrapper(io.BytesIO(b"\xc3\x28"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)
    assert format_main([]) == EXIT_FAILURE


def test_format(monkeypatch, capsys):
    feed(monkeypatch, "1..4\n.4..\n....\n...3\n")
    assert format_main([]) == EXIT_SUCCESS
    assert capsys.readouterr().out == "1 .  . 4\n. 4  . .\n\n. .  . .\n. .  . 3\n"


def test_format_reports_bad_size(monkeypatch, capsys):
    feed(monkeypatch, "12345")
    assert format_main([]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""
