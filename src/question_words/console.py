from __future__ import annotations

import sys
from typing import Iterable, List, Protocol, TextIO


class Console(Protocol):
    """Line-based input source and output sink used by the driver."""

    def read_line(self) -> str | None:
        """Return the next line without its newline, or None at end of input."""
        ...

    def write_line(self, line: str) -> None:
        ...


class StreamConsole:
    """Console backed by text streams (stdin/stdout by default)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def read_line(self) -> str | None:
        line = self._stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def write_line(self, line: str) -> None:
        self._stdout.write(line + "\n")
        self._stdout.flush()


class MemoryConsole:
    """Scripted console: serves queued input lines and records output."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._pending: List[str] = list(lines)
        self.output: List[str] = []

    def read_line(self) -> str | None:
        if not self._pending:
            return None
        return self._pending.pop(0)

    def write_line(self, line: str) -> None:
        self.output.append(line)
