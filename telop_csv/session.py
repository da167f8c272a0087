"""Session controller: the single owner of a user's working state.

Every UI action maps to one method here.  Row-level warnings and blocking
errors both end up in ``error_message``; only the latest one is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from telop_csv.pipeline_config import PipelineConfig
from telop_csv.processing.errors import EmptyDataError, EmptyInputError, ValidationError
from telop_csv.processing.export import default_filename, export_csv, resolve_filename
from telop_csv.processing.models import EnrichedRow, ExportFile
from telop_csv.processing.pipeline import process_text

logger = logging.getLogger(__name__)


@dataclass
class TelopSession:
    """In-memory state for one review/export session."""

    raw_text: str = ""
    rows: list[EnrichedRow] = field(default_factory=list)
    selected: set[int] = field(default_factory=set)
    error_message: str | None = None
    output_file_name: str = ""
    user_file_name: str = ""
    config: PipelineConfig = field(default_factory=PipelineConfig)
    # Bumped whenever ``rows`` is replaced or shrinks.
    revision: int = 0

    # -- input -------------------------------------------------------------

    def load_file(self, data: bytes) -> None:
        """Replace the raw text with the contents of an uploaded file."""
        self.raw_text = data.decode("utf-8-sig")

    def set_text(self, text: str) -> None:
        self.raw_text = text

    # -- processing --------------------------------------------------------

    def process(self) -> bool:
        """Run the pipeline over ``raw_text`` and replace the rows.

        Returns False (rows untouched) when the input is blank.
        """
        self.error_message = None
        try:
            result = process_text(self.raw_text, self.config)
        except EmptyInputError as exc:
            self.error_message = str(exc)
            return False

        self.rows = result.rows
        self.selected = set()
        self.revision += 1
        self.error_message = result.latest_warning
        self.output_file_name = default_filename()
        self.user_file_name = self.output_file_name
        return True

    # -- selection ---------------------------------------------------------

    def toggle_row(self, index: int) -> None:
        if not 0 <= index < len(self.rows):
            raise IndexError(f"Row index {index} out of range (0..{len(self.rows) - 1})")
        if index in self.selected:
            self.selected.discard(index)
        else:
            self.selected.add(index)

    def select_all(self, flag: bool) -> None:
        self.selected = set(range(len(self.rows))) if flag else set()

    @property
    def all_selected(self) -> bool:
        return bool(self.rows) and len(self.selected) == len(self.rows)

    def delete_selected(self) -> int:
        """Drop every selected row and reset the selection.

        Returns the number of rows removed.
        """
        before = len(self.rows)
        self.rows = [row for i, row in enumerate(self.rows) if i not in self.selected]
        self.selected = set()
        removed = before - len(self.rows)
        if removed:
            self.revision += 1
            logger.info("Deleted %d rows, %d remaining", removed, len(self.rows))
        return removed

    # -- export ------------------------------------------------------------

    def set_filename(self, name: str) -> None:
        self.user_file_name = name

    def download(self) -> ExportFile | None:
        """Render the current rows for download.

        Returns None and records the message when the filename is invalid or
        there is nothing to export.
        """
        filename = resolve_filename(self.user_file_name, self.output_file_name)
        try:
            export = export_csv(self.rows, filename)
        except (ValidationError, EmptyDataError) as exc:
            logger.info("Export refused: %s", exc)
            self.error_message = str(exc)
            return None
        self.error_message = None
        return export
