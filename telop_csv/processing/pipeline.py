"""End-to-end row pipeline: split -> duration -> enrich."""

from __future__ import annotations

import logging

from telop_csv.pipeline_config import PipelineConfig
from telop_csv.processing.enrichment import enrich_row
from telop_csv.processing.errors import EmptyInputError, RowWarning
from telop_csv.processing.models import EnrichedRow, ProcessResult
from telop_csv.processing.parsers import compute_duration, split_rows

logger = logging.getLogger(__name__)


def process_text(raw_text: str, config: PipelineConfig | None = None) -> ProcessResult:
    """Full pipeline over a raw telop text blob.

    Malformed time ranges do not stop the run: the affected row gets a
    ``None`` duration and the warning is collected on the result.

    Args:
        raw_text: Pasted or loaded text, one telop per line.
        config: Field-cleaning and rounding options.

    Returns:
        The enriched rows in source order plus any row warnings.

    Raises:
        EmptyInputError: If *raw_text* is blank.
    """
    config = config or PipelineConfig()
    if not raw_text.strip():
        raise EmptyInputError()

    rows: list[EnrichedRow] = []
    warnings: list[RowWarning] = []

    for line_no, fields in enumerate(split_rows(raw_text, config.whitespace), 1):
        duration, warning = compute_duration(fields[0])
        if warning is not None:
            logger.warning("Row %d: %s", line_no, warning)
            warnings.append(warning)
        rows.append(enrich_row(fields, duration, config.rate_digits))

    logger.info("Processed %d rows (%d warnings)", len(rows), len(warnings))
    return ProcessResult(rows=rows, warnings=warnings)
