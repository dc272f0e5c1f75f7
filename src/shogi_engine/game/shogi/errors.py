"""Errors raised by the rules core."""

from __future__ import annotations


class InvariantViolation(RuntimeError):
    """A position or move broke an engine invariant.

    合法手生成から得たのではない手を適用した、または不整合な局面を
    組み立てた場合に送出する（王将が盤上にない、持ち駒が0枚の打ちなど）。
    通常の対局では発生しない。
    """
