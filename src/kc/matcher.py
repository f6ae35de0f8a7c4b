"""Whole-word matcher with a token-anchored scan.

A match is attempted only where a space-delimited token starts. An occurrence
counts as a whole word when the character right after it is a boundary
character or the line ends there, so ``help`` is found in ``"need help."`` but
not in ``"helpful"``.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .reader import Line

BOUNDARY_CHARS = frozenset(" \t\n.,")


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """An accepted occurrence: line number, start column and the full line text."""

    line_number: int
    column: int
    text: str


def is_boundary(text: str, index: int) -> bool:
    """Check whether ``index`` is past the end of ``text`` or points at a boundary character."""
    return index >= len(text) or text[index] in BOUNDARY_CHARS


def _matched_prefix(text: str, start: int, term: str) -> int:
    """Count how many leading characters of ``term`` match ``text`` from ``start``."""
    count = 0
    while count < len(term) and start + count < len(text) and text[start + count] == term[count]:
        count += 1
    return count


def find_matches(line: Line, term: str) -> list[MatchRecord]:
    """Find whole-word occurrences of ``term`` at token starts of ``line``.

    After each attempt the cursor moves past the matched prefix, then to the
    character after the next space. Only the space character separates tokens.
    """
    records: list[MatchRecord] = []
    if not term:
        return records

    text = line.text
    length = len(text)
    i = 0
    while i < length:
        matched = _matched_prefix(text, i, term)
        if matched == len(term) and is_boundary(text, i + matched):
            records.append(MatchRecord(line_number=line.number, column=i, text=text))

        space = text.find(" ", i + matched)
        i = (length if space == -1 else space) + 1
    return records


def search_lines(lines: Iterable[Line], term: str, *, all_occurrences: bool = False) -> Iterator[MatchRecord]:
    """Yield match records for every line containing ``term`` as a whole word.

    Args:
        lines: Lines to scan, in order.
        term: Case-sensitive search term.
        all_occurrences: Yield one record per accepted occurrence instead of
            one per matching line.

    """
    for line in lines:
        records = find_matches(line, term)
        if all_occurrences:
            yield from records
        elif records:
            yield records[0]
