"""Line-oriented console input."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Callable

LineReader = Callable[[str], str]

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


class ConsoleInput:
    """
    Typed readers over a prompt-and-read-line callable.

    End of input surfaces as ``EOFError`` from the underlying reader;
    malformed numbers raise ``ValueError``.
    """

    def __init__(self, read_line: LineReader) -> None:
        self._read_line = read_line

    def read_choice(self, prompt: str) -> str:
        return self._read_line(prompt).strip()

    def read_int(self, prompt: str) -> int:
        raw = self._read_line(prompt).strip()
        if not _INTEGER_PATTERN.fullmatch(raw):
            raise ValueError(f"not an integer: {raw!r}")
        return int(raw)

    def read_decimal(self, prompt: str) -> Decimal:
        raw = self._read_line(prompt).strip()
        try:
            value = Decimal(raw)
        except InvalidOperation as exc:
            raise ValueError(f"not a number: {raw!r}") from exc
        if not value.is_finite():
            raise ValueError(f"not a finite amount: {raw!r}")
        return value
