"""Error taxonomy for the telop pipeline.

Row-level problems (``ParseError``, ``RangeFormatError``) are warnings: the
pipeline records them and keeps going.  The rest abort the requested action.
"""

from __future__ import annotations


class TelopError(Exception):
    """Base class. ``str(exc)`` is the message shown to the user."""


class RowWarning(TelopError):
    """A malformed field that downgrades a single value to ``None``."""


class ParseError(RowWarning):
    """A time token that is not ``H:MM`` / ``HH:MM``."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"警告: 時刻文字列 '{token}' を解析できませんでした。")


class RangeFormatError(RowWarning):
    """A time range with an empty start or end side."""

    def __init__(self, range_text: str) -> None:
        self.range_text = range_text
        super().__init__(f"警告: 時刻範囲の形式が無効です: '{range_text}'")


class ValidationError(TelopError):
    """Export filename does not end with ``.csv``."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__("ファイル名は .csv で終わる必要があります。")


class EmptyDataError(TelopError):
    """Export requested with no rows."""

    def __init__(self) -> None:
        super().__init__("処理されたデータがありません。")


class EmptyInputError(TelopError):
    """Processing requested with blank input text."""

    def __init__(self) -> None:
        super().__init__("CSVデータを入力してください。")
