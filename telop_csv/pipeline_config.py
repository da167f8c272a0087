"""Pipeline configuration: field-cleaning strategy enum and PipelineConfig dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WhitespaceStrategy(str, Enum):
    """How whitespace is cleaned out of each comma-separated field."""

    STRIP = "strip"
    REMOVE_ALL = "remove_all"


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable configuration for the telop row pipeline.

    ``STRIP`` trims surrounding whitespace only.  ``REMOVE_ALL`` deletes every
    space inside a field as well, which also collapses ``"09:00 - 10:30"``
    into a parseable range.
    """

    whitespace: WhitespaceStrategy = WhitespaceStrategy.STRIP
    rate_digits: int = 6
