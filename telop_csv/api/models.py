"""Pydantic request/response schemas for the Telop CSV API."""

from __future__ import annotations

from pydantic import BaseModel

from telop_csv.pipeline_config import WhitespaceStrategy
from telop_csv.processing.models import EnrichedRow


class ProcessRequest(BaseModel):
    """Request body for the /api/process endpoint."""

    text: str
    whitespace: WhitespaceStrategy = WhitespaceStrategy.STRIP


class RowModel(BaseModel):
    """A single enriched telop row."""

    duration: int | None = None
    time_range: str = ""
    caption: str | None = None
    passthrough: list[str] = []
    char_count: int | None = None
    rate: float | None = None

    @classmethod
    def from_row(cls, row: EnrichedRow) -> RowModel:
        return cls(
            duration=row.duration,
            time_range=row.time_range,
            caption=row.caption,
            passthrough=list(row.passthrough),
            char_count=row.char_count,
            rate=row.rate,
        )

    def to_row(self) -> EnrichedRow:
        return EnrichedRow(
            duration=self.duration,
            time_range=self.time_range,
            caption=self.caption,
            passthrough=list(self.passthrough),
            char_count=self.char_count,
            rate=self.rate,
        )


class ProcessResponse(BaseModel):
    """Response body for the /api/process endpoints.

    ``warning`` is the latest row warning, ``warnings`` the full list.
    """

    rows: list[RowModel]
    warning: str | None = None
    warnings: list[str] = []
    output_file_name: str


class ExportRequest(BaseModel):
    """Request body for the /api/export endpoint."""

    rows: list[RowModel]
    filename: str | None = None
