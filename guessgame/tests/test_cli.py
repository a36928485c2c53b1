"""
Tests for the command-line interface.
"""

import io

import pytest

from ..cli import build_parser, main


def run_cli(argv, monkeypatch, stdin=""):
    if isinstance(stdin, bytes):
        stdin = io.TextIOWrapper(io.BytesIO(stdin), encoding="utf-8")
    else:
        stdin = io.StringIO(stdin)
    monkeypatch.setattr("sys.stdin", stdin)
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestParser:
    def test_bare_command_plays(self):
        args = build_parser().parse_args([])
        assert args.command == "play"
        assert args.mode == "bounded"
        assert args.attempts == 10

    def test_play_flags(self):
        args = build_parser().parse_args(["play", "--mode", "single", "--seed", "3"])
        assert args.mode == "single"
        assert args.seed == 3


class TestPlayCommand:
    """Exit codes of interactive play."""

    def test_malformed_input_exit_code(self, monkeypatch, capsys):
        code = run_cli(["play"], monkeypatch, stdin="abc\n")

        captured = capsys.readouterr()
        assert code == 1
        assert "please type a number!" in captured.err
        assert "too small" not in captured.out
        assert "too much" not in captured.out

    def test_eof_exit_code(self, monkeypatch, capsys):
        code = run_cli([], monkeypatch, stdin="")
        assert code == 1
        assert "failed to read line" in capsys.readouterr().err

    def test_budget_exhausted_exits_normally(self, monkeypatch, capsys):
        # 0 is always too small for a secret in 1-100
        code = run_cli(["play", "--attempts", "2"], monkeypatch, stdin="0\n0\n")

        out = capsys.readouterr().out
        assert code == 0
        assert out.count("too small") == 2
        assert "CONGRATS!!" not in out

    def test_single_mode(self, monkeypatch, capsys):
        code = run_cli(["play", "--mode", "single"], monkeypatch, stdin="101\n")

        out = capsys.readouterr().out
        assert code == 0
        assert "too much" in out
        assert "you guessed : 101" in out
        assert "secret num. : " in out

    def test_invalid_utf8_exit_code(self, monkeypatch, capsys):
        code = run_cli(["play"], monkeypatch, stdin=b"\xff\xfe\n")

        assert code == 1
        assert "failed to read line" in capsys.readouterr().err

    def test_bad_attempts(self, monkeypatch):
        assert run_cli(["play", "--attempts", "0"], monkeypatch) == 2

    def test_single_mode_ignores_attempts(self, monkeypatch, capsys):
        code = run_cli(
            ["play", "--mode", "single", "--attempts", "0"], monkeypatch, stdin="0\n"
        )
        assert code == 0
        assert "you guessed : 0" in capsys.readouterr().out


class TestScoreCommand:
    def test_score(self, monkeypatch, capsys):
        code = run_cli(["score", "--games", "50", "--seed", "1"], monkeypatch)
        assert code == 0
        assert "attempts on average" in capsys.readouterr().out

    def test_score_rejects_zero_games(self, monkeypatch):
        assert run_cli(["score", "--games", "0"], monkeypatch) == 1
