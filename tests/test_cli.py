"""Tests for the command-line game."""

from __future__ import annotations

import builtins
from collections.abc import Iterator

import pytest

from shogi_engine import cli


def _feed(monkeypatch: pytest.MonkeyPatch, answers: list[str]) -> None:
    it: Iterator[str] = iter(answers)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_abort_on_eof(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _feed(monkeypatch, [])
    cli.main(["--cpu", "random"])
    out = capsys.readouterr().out
    assert "=== 本将棋 ===" in out
    assert "Game aborted." in out


def test_invalid_input_then_move(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _feed(monkeypatch, ["abc", "999", "0"])
    cli.main(["--cpu", "greedy"])
    out = capsys.readouterr().out
    assert "Enter a number." in out
    assert "Invalid: choose 0-29" in out
    assert "CPU plays: △" in out


def test_unknown_cpu_rejected() -> None:
    with pytest.raises(SystemExit):
        cli.main(["--cpu", "mcts"])
