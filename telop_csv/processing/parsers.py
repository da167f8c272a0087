"""Row, time and time-range parsers for telop text."""

from __future__ import annotations

from telop_csv.pipeline_config import WhitespaceStrategy
from telop_csv.processing.errors import ParseError, RangeFormatError, RowWarning

MINUTES_PER_DAY = 24 * 60

RANGE_SEPARATOR = "-"


def _clean_field(field: str, whitespace: WhitespaceStrategy) -> str:
    if whitespace is WhitespaceStrategy.REMOVE_ALL:
        return field.replace(" ", "").strip()
    return field.strip()


def split_rows(
    text: str,
    whitespace: WhitespaceStrategy = WhitespaceStrategy.STRIP,
) -> list[list[str]]:
    """Split raw text into rows of cleaned comma-separated fields.

    Blank lines are skipped; every other line yields at least one field.
    """
    rows: list[list[str]] = []
    for line in text.strip().splitlines():
        if not line.strip():
            continue
        rows.append([_clean_field(f, whitespace) for f in line.split(",")])
    return rows


def parse_time(token: str) -> int:
    """Convert ``H:MM`` or ``HH:MM`` to minutes since midnight.

    Raises:
        ParseError: If the token does not have exactly two integer parts.
    """
    parts = token.split(":")
    if len(parts) != 2:
        raise ParseError(token)
    try:
        hours, minutes = (int(p) for p in parts)
    except ValueError as exc:
        raise ParseError(token) from exc
    return hours * 60 + minutes


def is_time_range(field: str) -> bool:
    return RANGE_SEPARATOR in field


def compute_duration(field: str) -> tuple[int | None, RowWarning | None]:
    """Elapsed minutes for an ``HH:MM-HH:MM`` range.

    Returns a ``(minutes, warning)`` pair and never raises.  A field that is
    not a range at all gives ``(None, None)``.  An end before the start is
    read as crossing midnight once.
    """
    if not is_time_range(field):
        return None, None

    start_text, _, end_text = field.partition(RANGE_SEPARATOR)
    if not start_text or not end_text:
        return None, RangeFormatError(field)

    try:
        start = parse_time(start_text)
        end = parse_time(end_text)
    except ParseError as exc:
        return None, exc

    duration = end - start
    if duration < 0:
        duration += MINUTES_PER_DAY
    return duration, None
