"""Data models for the telop row pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from telop_csv.processing.errors import RowWarning


@dataclass
class EnrichedRow:
    """One processed telop row.

    ``time_range`` is the raw first field, kept even when ``duration`` could
    not be computed from it.
    """

    duration: int | None
    time_range: str
    caption: str | None = None
    passthrough: list[str] = field(default_factory=list)
    char_count: int | None = None
    rate: float | None = None

    def as_list(self) -> list[object]:
        """Positional form: duration, range, caption, passthrough..., count, rate."""
        return [
            self.duration,
            self.time_range,
            self.caption,
            *self.passthrough,
            self.char_count,
            self.rate,
        ]

    def export_cells(self) -> list[object]:
        """The five values written to the exported CSV."""
        return [self.duration, self.time_range, self.caption, self.char_count, self.rate]


@dataclass
class ProcessResult:
    """Rows produced by one pipeline run plus the warnings it recorded."""

    rows: list[EnrichedRow]
    warnings: list[RowWarning] = field(default_factory=list)

    @property
    def latest_warning(self) -> str | None:
        return str(self.warnings[-1]) if self.warnings else None


@dataclass(frozen=True)
class ExportFile:
    """A rendered CSV ready to hand to a download mechanism."""

    filename: str
    content: bytes
    media_type: str = "text/csv;charset=utf-8"
