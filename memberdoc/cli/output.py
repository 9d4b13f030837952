"""
Output abstraction for the CLI.

Lets commands be tested without capturing stdout.
"""

import sys
from pathlib import Path
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for CLI output writing."""

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        ...

    def write_raw(self, text: str) -> None:
        """Write text without trailing newline."""
        ...


class ConsoleOutput:
    """
    Output writer that writes to a stream (stdout by default).

    Example:
        buffer = io.StringIO()
        out = ConsoleOutput(buffer)
        out.write("Hello")
        assert buffer.getvalue() == "Hello\\n"
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self._stream)

    def write_raw(self, text: str) -> None:
        print(text, end="", file=self._stream)


class FileOutput:
    """Output writer collecting text and writing it to a file on close."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._parts: list[str] = []

    def write(self, text: str = "") -> None:
        self._parts.append(text + "\n")

    def write_raw(self, text: str) -> None:
        self._parts.append(text)

    def close(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text("".join(self._parts), encoding="utf-8")
