"""Domain errors and recorded data warnings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DataIntegrityWarning:
    """A row (or muscle ID) that was skipped or overridden while loading a table."""

    source: str  # table name, e.g. "muscle_correlations"
    row: int | None  # 1-based data row (header excluded); None when not row-specific
    reason: str

    def __str__(self) -> str:
        where = f"{self.source} row {self.row}" if self.row is not None else self.source
        return f"{where}: {self.reason}"


class LoadFailure(Exception):
    """A row source is missing, unreadable, or yields nothing usable. Fatal at startup."""


class InvalidFormType(ValueError):
    """Exercise form type code is not 1 (reps), 2 (weight+reps) or 3 (timed)."""

    def __init__(self, raw: str | int | None):
        self.raw = raw
        super().__init__(f"Invalid form type: {raw!r}")


class InvalidSetInput(ValueError):
    """Logged set values do not match the exercise's form type."""
