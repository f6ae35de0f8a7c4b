"""Display modes and the read loop that drives the reader and matcher."""

import logging
from enum import StrEnum
from pathlib import Path
from typing import TextIO

import click

from .config import ViewerConfig
from .errors import FileAccessError
from .matcher import search_lines
from .output import ViewerOutput
from .reader import LineReader

log = logging.getLogger(__name__)


class DisplayMode(StrEnum):
    """How lines of the file are shown."""

    PLAIN = "plain"
    NUMBERED = "numbered"
    SEARCH = "search"


def resolve_mode(number_lines: bool, term: str | None) -> DisplayMode:
    """Pick the display mode from the ``-l`` flag and the ``-s`` term."""
    if number_lines and term is not None:
        raise click.UsageError("options -l and -s cannot be combined")
    if term is not None:
        return DisplayMode.SEARCH
    if number_lines:
        return DisplayMode.NUMBERED
    return DisplayMode.PLAIN


def open_source(path: Path, encoding: str) -> TextIO:
    """Open ``path`` for reading.

    Lines end only at ``\\n`` and terminators are not translated. Undecodable
    bytes are kept as surrogate escapes so they can be written back unchanged.
    """
    try:
        return path.open(encoding=encoding, errors="surrogateescape", newline="\n")
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e


def view(path: Path, mode: DisplayMode, output: ViewerOutput, *, config: ViewerConfig, term: str | None = None) -> int:
    """Read ``path`` and send its lines, or its matches in search mode, to ``output``.

    Returns:
        Number of lines or match records rendered.

    """
    if mode is DisplayMode.SEARCH and term is None:
        raise ValueError("search mode requires a term")

    rendered = 0
    with open_source(path, config.encoding) as source:
        log.debug("opened %s (encoding=%s)", path, config.encoding)
        reader = LineReader(source, max_length=config.max_line_length)
        if mode is DisplayMode.SEARCH:
            for record in search_lines(reader, term or "", all_occurrences=config.all_occurrences):
                output.match(record)
                rendered += 1
        else:
            numbered = mode is DisplayMode.NUMBERED
            for line in reader:
                output.line(line, numbered=numbered)
                rendered += 1

    log.debug("read %d lines from %s, rendered %d", reader.line_count, path, rendered)
    output.finish(path=str(path), mode=mode.value)
    return rendered
