"""CSV row source for the bundled exports.

Each data row is returned as a list of raw strings indexed by column position;
column meaning is decided by the consumer. The header row is skipped. Blank
lines are passed through so consumers keep data-row numbering in step with the
file; use is_blank_row() to skip them.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

from app.core.exceptions import LoadFailure

logger = logging.getLogger(__name__)

Row = Sequence[str]


def is_blank_row(row: Row) -> bool:
    return not any(cell.strip() for cell in row)


def iter_csv_rows(path: str | Path, skip_header: bool = True) -> Iterator[list[str]]:
    """Yield rows from a CSV file. Raises LoadFailure if the file cannot be opened or parsed.

    Undecodable bytes become U+FFFD, so a damaged row fails column parsing
    downstream instead of failing the whole file.
    """
    path = Path(path)
    if not path.exists():
        raise LoadFailure(f"CSV file not found at {path}")
    try:
        with open(path, newline="", encoding="utf-8-sig", errors="replace") as csvfile:
            reader = csv.reader(csvfile)
            if skip_header:
                next(reader, None)
            yield from reader
    except (OSError, csv.Error) as e:
        raise LoadFailure(f"Error reading {path}: {e}") from e


def read_csv_rows(path: str | Path, skip_header: bool = True) -> list[list[str]]:
    """Read every data row. An export with no non-blank data rows is a LoadFailure."""
    rows = list(iter_csv_rows(path, skip_header=skip_header))
    if all(is_blank_row(row) for row in rows):
        raise LoadFailure(f"No data rows in {path}")
    logger.info("Read %d rows from %s", len(rows), path)
    return rows
