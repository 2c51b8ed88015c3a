"""
Enum extractor for C headers.

Streams header lines and collects every ``enum <Name> {`` block with its raw
case lines. This is deliberately not a C parser: there is no preprocessor,
no nesting, and each case must sit on its own line.

Every line is first classified (see :func:`classify_line`) and the extractor
acts on the classification alone:

    ============  ===================================================
    OPEN_ENUM     no block open, ``enum <Name> {`` on the line
    CLOSE_ENUM    block open, line starts with ``}``
    CASE_LINE     block open, non-blank, contains no brace
    IGNORE        everything else
    ============  ===================================================

Malformed input never raises. A block that is still open at end of input is
dropped with a warning.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

_ENUM_OPEN = re.compile(r"^\s*enum\s+(\w+)\s*\{", re.ASCII)


class LineKind(Enum):
    """How the extractor treats a single header line."""

    OPEN_ENUM = "open_enum"
    CLOSE_ENUM = "close_enum"
    CASE_LINE = "case_line"
    IGNORE = "ignore"


@dataclass(frozen=True)
class EnumRecord:
    """
    One enum block read from a header.

    Attributes:
        declared_name: Identifier following ``enum`` on the opening line
        raw_cases: Case lines in source order, unmodified
        line: 1-indexed line number of the opening line
    """

    declared_name: str
    raw_cases: tuple[str, ...] = ()
    line: int = 0


def classify_line(line: str, in_enum: bool) -> tuple[LineKind, str | None]:
    """
    Classify a header line.

    Args:
        line: Raw line, trailing newline allowed
        in_enum: Whether an enum block is currently open

    Returns:
        The line kind, plus the declared name for ``OPEN_ENUM``
    """
    if not in_enum:
        match = _ENUM_OPEN.match(line)
        if match:
            return LineKind.OPEN_ENUM, match.group(1)
        return LineKind.IGNORE, None

    if line.startswith("}"):
        return LineKind.CLOSE_ENUM, None
    if not line.strip() or "{" in line or "}" in line:
        return LineKind.IGNORE, None
    return LineKind.CASE_LINE, None


@dataclass
class _OpenBlock:
    declared_name: str
    line: int
    cases: list[str] = field(default_factory=list)

    def finalize(self) -> EnumRecord:
        return EnumRecord(self.declared_name, tuple(self.cases), self.line)


class EnumExtractor:
    """
    Incremental enum extractor.

    Example:
        extractor = EnumExtractor()
        for line in stream:
            extractor.feed(line)
        records = extractor.finish()
    """

    def __init__(self) -> None:
        self._records: list[EnumRecord] = []
        self._current: _OpenBlock | None = None
        self._line_no = 0

    def feed(self, line: str) -> None:
        """Consume the next line of input."""
        self._line_no += 1
        kind, name = classify_line(line, in_enum=self._current is not None)

        if kind is LineKind.OPEN_ENUM and name is not None:
            self._current = _OpenBlock(name, self._line_no)
        elif self._current is None:
            return
        elif kind is LineKind.CLOSE_ENUM:
            self._records.append(self._current.finalize())
            self._current = None
        elif kind is LineKind.CASE_LINE:
            self._current.cases.append(line.rstrip("\r\n"))
        elif line.strip():
            logger.debug(
                "Line %d inside enum %s contains a brace; skipped",
                self._line_no,
                self._current.declared_name,
            )

    def finish(self) -> list[EnumRecord]:
        """Return the finished records; an unterminated block is discarded."""
        if self._current is not None:
            logger.warning(
                "enum %s opened at line %d is never closed; discarded",
                self._current.declared_name,
                self._current.line,
            )
            self._current = None
        return list(self._records)


def extract_enums(lines: Iterable[str]) -> list[EnumRecord]:
    """
    Extract all enum blocks from a sequence of lines.

    Args:
        lines: Any iterable of lines, e.g. an open text file

    Returns:
        Records in declaration order
    """
    extractor = EnumExtractor()
    for line in lines:
        extractor.feed(line)
    records = extractor.finish()
    logger.debug("Extracted %d enum(s)", len(records))
    return records
