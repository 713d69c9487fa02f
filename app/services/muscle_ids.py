"""Parser for the muscle-ID list fields of the exercise export.

Two encodings appear in the data for the same logical field:

    "[12] [13] [40]"    bracketed, space separated
    "12, 13, 40"        comma separated, brackets optional ("[12, 13]", "[12],[13]")

Both are accepted. Tokens that are not integers are dropped and reported.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

logger = logging.getLogger(__name__)

_EDGE_CHARS = "[] "
_BRACKET_BOUNDARY = re.compile(r"\]\s*\[")
_INTEGER = re.compile(r"-?[0-9]+")

Delimiter = Literal["bracket", "comma"]


@dataclass(frozen=True)
class ParsedMuscleIds:
    ids: list[int] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)  # tokens that failed integer parsing


def _split_tokens(text: str) -> list[str]:
    if _BRACKET_BOUNDARY.search(text):
        return _BRACKET_BOUNDARY.split(text)
    return text.split(",")


def parse_muscle_id_field(raw: str | None) -> ParsedMuscleIds:
    """Parse one role field into integer muscle IDs, keeping the rejected tokens."""
    text = (raw or "").strip().strip(_EDGE_CHARS)
    if not text:
        return ParsedMuscleIds()
    ids: list[int] = []
    rejected: list[str] = []
    for token in _split_tokens(text):
        token = token.strip().strip(_EDGE_CHARS).strip()
        if not token:
            continue
        if _INTEGER.fullmatch(token):
            ids.append(int(token))
        else:
            rejected.append(token)
    if rejected:
        logger.debug("Dropped non-integer muscle ID tokens %r from %r", rejected, raw)
    return ParsedMuscleIds(ids=ids, rejected=rejected)


def parse_muscle_ids(raw: str | None) -> list[int]:
    """Parse one role field into integer muscle IDs (order kept, bad tokens dropped)."""
    return parse_muscle_id_field(raw).ids


def serialize_muscle_ids(ids: Iterable[int], delimiter: Delimiter = "bracket") -> str:
    """Render IDs in either export encoding; parse_muscle_ids() reads both back."""
    if delimiter == "bracket":
        return " ".join(f"[{i}]" for i in ids)
    return ", ".join(str(i) for i in ids)
