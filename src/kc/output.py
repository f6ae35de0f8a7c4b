"""Rendering of lines and match records, as text or as a JSON envelope."""

# ruff: noqa: T201 -- output layer

import json
import sys
from typing import NoReturn

import typer

from .matcher import MatchRecord
from .reader import Line
from .utils import fatal


def print_plain(*messages: object) -> None:
    """Print messages separated by spaces, followed by a newline."""
    print(*messages)


def print_json(data: object) -> None:
    """Print data as a single line of JSON."""
    print(json.dumps(data, ensure_ascii=False))


class ViewerOutput:
    """Writer for everything the viewer puts on stdout.

    Display mode writes each line as soon as it is rendered, encoded back to
    the bytes it was read from. The line text keeps its own terminator, so
    nothing is appended. JSON mode collects records and prints one envelope
    (``{"ok": true, "data": ...}``) from ``finish``.
    """

    def __init__(self, *, json_mode: bool, encoding: str = "utf-8") -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, collect records and output a JSON envelope;
                otherwise print text as it arrives.
            encoding: Encoding the input was decoded with. Display output is
                encoded with it so undecodable bytes come out unchanged.

        """
        self.json_mode = json_mode
        self.encoding = encoding
        self._records: list[dict[str, object]] = []

    def _write(self, text: str) -> None:
        data = text.encode(self.encoding, "surrogateescape")
        buffer = getattr(sys.stdout, "buffer", None)
        if buffer is None:
            sys.stdout.write(data.decode(self.encoding, "replace"))
            return
        # text already written through sys.stdout must land first
        sys.stdout.flush()
        buffer.write(data)
        buffer.flush()

    def _json_text(self, text: str) -> str:
        """Replace undecodable bytes with U+FFFD; JSON can't carry raw bytes."""
        return text.encode(self.encoding, "surrogateescape").decode(self.encoding, "replace")

    def line(self, line: Line, *, numbered: bool = False) -> None:
        """Output a line, prefixed with its number when ``numbered``."""
        if self.json_mode:
            self._records.append({"number": line.number, "text": self._json_text(line.text)})
        elif numbered:
            self._write(f"{line.number} {line.text}")
        else:
            self._write(line.text)

    def match(self, record: MatchRecord) -> None:
        """Output a search hit as ``Line: <number> <text>``."""
        if self.json_mode:
            self._records.append(
                {"number": record.line_number, "column": record.column, "text": self._json_text(record.text)}
            )
        else:
            self._write(f"Line: {record.line_number} {record.text}")

    def finish(self, *, path: str, mode: str) -> None:
        """Flush collected records. No-op in display mode."""
        if self.json_mode:
            print_json({"ok": True, "data": {"path": path, "mode": mode, "records": self._records}})

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or display format and exit with code 1."""
        if self.json_mode:
            print_json({"ok": False, "error": code, "message": message})
            raise typer.Exit(1)
        fatal(message)
