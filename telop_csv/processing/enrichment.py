"""Per-row metrics: caption character count and characters-per-minute rate."""

from __future__ import annotations

from numbers import Real

from telop_csv.processing.models import EnrichedRow


def count_chars(caption: object) -> int | None:
    """Code-point length of the caption, or ``None`` when there is no text."""
    if not isinstance(caption, str):
        return None
    return len(caption)


def compute_rate(char_count: object, duration: object, digits: int = 6) -> float | None:
    """Characters per minute rounded to *digits* decimal places.

    ``None`` unless *duration* is a positive number and *char_count* is numeric.
    """
    if isinstance(duration, bool) or not isinstance(duration, Real) or duration <= 0:
        return None
    if isinstance(char_count, bool) or not isinstance(char_count, Real):
        return None
    scale = 10**digits
    return round(char_count / duration * scale) / scale


def enrich_row(fields: list[str], duration: int | None, digits: int = 6) -> EnrichedRow:
    """Build an :class:`EnrichedRow` from cleaned fields and their duration.

    Field 0 is the time range, field 1 the caption; anything after that is
    carried through untouched.
    """
    time_range = fields[0] if fields else ""
    caption = fields[1] if len(fields) > 1 else None
    char_count = count_chars(caption)
    return EnrichedRow(
        duration=duration,
        time_range=time_range,
        caption=caption,
        passthrough=list(fields[2:]),
        char_count=char_count,
        rate=compute_rate(char_count, duration, digits),
    )
