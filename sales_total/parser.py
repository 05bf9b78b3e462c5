"""
Tabular parsing for small, loosely-structured CSV text.

Rules:
- newline normalization: CRLF/CR -> LF
- blank and whitespace-only lines are dropped
- delimiter detection on the first line only (",", ";" or tab)
- naive field split; a fully quote-wrapped field is unquoted and "" -> "
- the first row is a header row only when none of its fields is numeric

This is a heuristic reader, not an RFC-4180 one: a delimiter inside quotes
still splits the field, and quoted fields cannot span lines.
"""

from __future__ import annotations

import logging
from typing import List

from .models import ParsedTable
from .numbers import is_number
from .rules import DEFAULT_DELIMITER, DELIMITER_CANDIDATES

logger = logging.getLogger(__name__)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: str) -> List[str]:
    return [line for line in normalize_newlines(text).split("\n") if line.strip()]


def detect_delimiter(line: str) -> str:
    """Pick the candidate occurring strictly most often; comma when none occur."""
    delimiter = DEFAULT_DELIMITER
    best = 0
    for candidate in DELIMITER_CANDIDATES:
        count = line.count(candidate)
        if count > best:
            best = count
            delimiter = candidate
    return delimiter


def unquote_field(field: str) -> str:
    if field.startswith('"') and field.endswith('"'):
        return field[1:-1].replace('""', '"')
    return field


def split_fields(line: str, delimiter: str) -> List[str]:
    return [unquote_field(field) for field in line.split(delimiter)]


def is_header_row(row: List[str]) -> bool:
    return all(not is_number(field) for field in row)


def parse(text: str) -> ParsedTable:
    lines = split_lines(text)
    if not lines:
        return ParsedTable(headers=None, rows=[])

    delimiter = detect_delimiter(lines[0])
    rows = [split_fields(line, delimiter) for line in lines]

    if is_header_row(rows[0]):
        headers = rows.pop(0)
        logger.debug("delimiter=%r headers=%s data_rows=%d", delimiter, headers, len(rows))
        return ParsedTable(headers=headers, rows=rows)

    logger.debug("delimiter=%r no header row, data_rows=%d", delimiter, len(rows))
    return ParsedTable(headers=None, rows=rows)
