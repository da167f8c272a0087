"""Tests for the session controller: process, selection, deletion, download."""

from __future__ import annotations

import re

import pytest

from telop_csv.processing.errors import EmptyDataError, EmptyInputError, ValidationError
from telop_csv.session import TelopSession

FIVE_ROWS = "\n".join(
    [
        "09:00-09:01,a",
        "09:01-09:03,bb",
        "09:03-09:06,ccc",
        "09:06-09:10,dddd",
        "09:10-09:15,eeeee",
    ]
)

DEFAULT_NAME_RE = re.compile(r"^output_with_header_\d{8}_\d{6}\.csv$")


@pytest.fixture()
def session() -> TelopSession:
    s = TelopSession()
    s.set_text(FIVE_ROWS)
    assert s.process()
    return s


class TestProcess:
    def test_rows_and_default_filename(self, session: TelopSession) -> None:
        assert len(session.rows) == 5
        assert session.error_message is None
        assert DEFAULT_NAME_RE.match(session.output_file_name)
        assert session.user_file_name == session.output_file_name

    def test_process_clears_selection(self, session: TelopSession) -> None:
        session.toggle_row(1)
        session.process()
        assert session.selected == set()

    def test_warning_becomes_error_message(self) -> None:
        s = TelopSession(raw_text="09:xx-10:00,a\n09:00-09:10,b")
        assert s.process()
        assert s.error_message is not None
        assert "09:xx" in s.error_message
        assert s.rows[1].duration == 10

    def test_blank_input_is_blocking(self, session: TelopSession) -> None:
        session.set_text("   ")
        assert session.process() is False
        assert session.error_message == str(EmptyInputError())
        assert len(session.rows) == 5

    def test_successful_process_clears_error(self) -> None:
        s = TelopSession()
        s.process()
        assert s.error_message is not None
        s.set_text("09:00-09:10,abc")
        s.process()
        assert s.error_message is None

    def test_reprocess_is_idempotent(self, session: TelopSession) -> None:
        before = list(session.rows)
        session.process()
        assert session.rows == before

    def test_load_file_decodes_utf8_with_bom(self) -> None:
        s = TelopSession()
        s.load_file("\ufeff09:00-09:10,テロップ".encode())
        assert s.raw_text == "09:00-09:10,テロップ"
        s.process()
        assert s.rows[0].time_range == "09:00-09:10"


class TestSelection:
    def test_toggle_flips(self, session: TelopSession) -> None:
        session.toggle_row(2)
        assert session.selected == {2}
        session.toggle_row(2)
        assert session.selected == set()

    def test_toggle_out_of_range(self, session: TelopSession) -> None:
        with pytest.raises(IndexError):
            session.toggle_row(5)
        with pytest.raises(IndexError):
            session.toggle_row(-1)

    def test_select_all(self, session: TelopSession) -> None:
        session.select_all(True)
        assert session.selected == {0, 1, 2, 3, 4}
        assert session.all_selected
        session.select_all(False)
        assert session.selected == set()
        assert not session.all_selected

    def test_all_selected_false_without_rows(self) -> None:
        s = TelopSession()
        s.select_all(True)
        assert s.selected == set()
        assert not s.all_selected


class TestDeleteSelected:
    def test_deletes_and_resets_selection(self, session: TelopSession) -> None:
        session.toggle_row(1)
        session.toggle_row(3)
        removed = session.delete_selected()
        assert removed == 2
        assert len(session.rows) == 3
        assert session.selected == set()
        assert [r.caption for r in session.rows] == ["a", "ccc", "eeeee"]

    def test_revision_bumps_on_delete(self, session: TelopSession) -> None:
        revision = session.revision
        session.toggle_row(0)
        session.delete_selected()
        assert session.revision == revision + 1

    def test_delete_with_empty_selection(self, session: TelopSession) -> None:
        revision = session.revision
        assert session.delete_selected() == 0
        assert len(session.rows) == 5
        assert session.revision == revision

    def test_delete_all(self, session: TelopSession) -> None:
        session.select_all(True)
        session.delete_selected()
        assert session.rows == []
        assert session.selected == set()


class TestDownload:
    def test_default_name(self, session: TelopSession) -> None:
        export = session.download()
        assert export is not None
        assert export.filename == session.output_file_name
        assert export.content.decode("utf-8").count("\n") == 5

    def test_user_name(self, session: TelopSession) -> None:
        session.set_filename("  custom.csv ")
        export = session.download()
        assert export is not None
        assert export.filename == "custom.csv"

    def test_blank_user_name_falls_back(self, session: TelopSession) -> None:
        session.set_filename("   ")
        export = session.download()
        assert export is not None
        assert export.filename == session.output_file_name

    def test_invalid_name_records_error(self, session: TelopSession) -> None:
        session.set_filename("report.txt")
        assert session.download() is None
        assert session.error_message == str(ValidationError("report.txt"))

    def test_no_rows_records_error(self, session: TelopSession) -> None:
        session.select_all(True)
        session.delete_selected()
        assert session.download() is None
        assert session.error_message == str(EmptyDataError())

    def test_success_clears_error(self, session: TelopSession) -> None:
        session.set_filename("report.txt")
        session.download()
        session.set_filename("report.csv")
        assert session.download() is not None
        assert session.error_message is None

    def test_export_reflects_deletion(self, session: TelopSession) -> None:
        session.toggle_row(0)
        session.delete_selected()
        export = session.download()
        assert export is not None
        lines = export.content.decode("utf-8").split("\n")
        assert len(lines) == 5
        assert lines[1].startswith("2,09:01-09:03,bb,2,1")
