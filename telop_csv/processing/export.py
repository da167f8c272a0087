"""CSV export of processed telop rows."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import datetime

from telop_csv.config import settings
from telop_csv.processing.errors import EmptyDataError, ValidationError
from telop_csv.processing.models import EnrichedRow, ExportFile

logger = logging.getLogger(__name__)

# Elapsed time, interval, caption content, character count, characters/second
HEADER = ["経過時間", "区間", "テロップ内容", "文字数", "文字数/秒"]

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def default_filename(now: datetime | None = None, prefix: str | None = None) -> str:
    """Timestamped name like ``output_with_header_20250101_093000.csv``."""
    now = now or datetime.now()
    prefix = prefix or settings.output_file_prefix
    return f"{prefix}_{now:%Y%m%d_%H%M%S}.csv"


def resolve_filename(user_value: str | None, fallback: str) -> str:
    """Trimmed user-supplied name, or *fallback* when it is blank."""
    name = (user_value or "").strip()
    return name or fallback


def sanitize_cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return _LINE_BREAK_RE.sub(" ", str(value))


def build_csv(rows: Sequence[EnrichedRow]) -> str:
    """Header line plus one five-column line per row, ``\\n``-joined."""
    lines = [",".join(HEADER)]
    for row in rows:
        lines.append(",".join(sanitize_cell(v) for v in row.export_cells()))
    return "\n".join(lines)


def export_csv(rows: Sequence[EnrichedRow], filename: str) -> ExportFile:
    """Render *rows* as a UTF-8 CSV file named *filename*.

    Raises:
        ValidationError: If *filename* does not end with ``.csv``.
        EmptyDataError: If there are no rows.
    """
    if not filename.lower().endswith(".csv"):
        raise ValidationError(filename)
    if not rows:
        raise EmptyDataError()

    content = build_csv(rows).encode("utf-8")
    logger.info("Exported %d rows to %s (%d bytes)", len(rows), filename, len(content))
    return ExportFile(filename=filename, content=content)
