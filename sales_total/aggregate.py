from __future__ import annotations

import logging
from typing import List, Optional

from .errors import NoSalesColumn
from .models import ParsedTable
from .numbers import is_number, parse_number
from .rules import SALES_KEYWORDS

logger = logging.getLogger(__name__)


def _cell(row: List[str], index: int) -> Optional[str]:
    return row[index] if index < len(row) else None


def header_sales_column(headers: Optional[List[str]]) -> Optional[int]:
    """Index of the first header mentioning a sales keyword, if any."""
    if not headers:
        return None
    for index, header in enumerate(headers):
        lowered = header.lower()
        if any(keyword in lowered for keyword in SALES_KEYWORDS):
            return index
    return None


def numeric_sales_column(rows: List[List[str]]) -> Optional[int]:
    """Index of the first column whose every cell is numeric, if any."""
    if not rows:
        return None
    for index in range(len(rows[0])):
        if all(is_number(_cell(row, index)) for row in rows):
            return index
    return None


def find_sales_column(table: ParsedTable) -> int:
    index = header_sales_column(table.headers)
    if index is not None:
        logger.debug("sales column %d matched by header %r", index, table.headers[index])
        return index

    index = numeric_sales_column(table.rows)
    if index is not None:
        logger.debug("sales column %d inferred as first all-numeric column", index)
        return index

    raise NoSalesColumn()


def aggregate(table: ParsedTable) -> float:
    """
    Sum the sales column of `table`.

    A table without data rows totals 0. Cells that do not parse as numbers
    (or are missing from a short row) are skipped.
    """
    if not table.rows:
        return 0.0

    index = find_sales_column(table)

    total = 0.0
    skipped = 0
    for row in table.rows:
        value = parse_number(_cell(row, index))
        if value is None:
            skipped += 1
            continue
        total += value

    if skipped:
        logger.debug("skipped %d non-numeric cells in column %d", skipped, index)
    return total
