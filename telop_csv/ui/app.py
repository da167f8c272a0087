"""Telop CSV -- Streamlit UI.

Single-page tool: load or paste telop rows, process them, review and delete
rows, then download the enriched CSV.  All state lives in one
``TelopSession`` per browser session.
"""

from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from telop_csv.config import settings
from telop_csv.processing.export import HEADER, sanitize_cell
from telop_csv.session import TelopSession

logging.basicConfig(level=settings.log_level)

SELECT_COLUMN = "選択"

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Telop CSV", layout="wide")

if "telop_session" not in st.session_state:
    st.session_state.telop_session = TelopSession()


def _session() -> TelopSession:
    return st.session_state.telop_session  # type: ignore[no-any-return]


# ---------------------------------------------------------------------------
# Callbacks -- each maps to one session operation
# ---------------------------------------------------------------------------
def _on_upload() -> None:
    uploaded = st.session_state.get("csv_upload")
    if uploaded is not None:
        _session().load_file(uploaded.getvalue())
        st.session_state.raw_text = _session().raw_text


def _on_text_change() -> None:
    _session().set_text(st.session_state.raw_text)


def _on_process() -> None:
    session = _session()
    session.set_text(st.session_state.get("raw_text", ""))
    if session.process():
        st.session_state.file_name = session.user_file_name
    st.session_state.pop("pending_export", None)


def _on_table_edit(key: str) -> None:
    session = _session()
    edited_rows = st.session_state[key].get("edited_rows", {})
    for index, changes in edited_rows.items():
        if SELECT_COLUMN in changes and (int(index) in session.selected) != changes[SELECT_COLUMN]:
            session.toggle_row(int(index))


def _on_select_all() -> None:
    _session().select_all(st.session_state.select_all)


def _on_delete() -> None:
    _session().delete_selected()
    st.session_state.pop("pending_export", None)


def _on_filename_change() -> None:
    _session().set_filename(st.session_state.file_name)


def _on_download() -> None:
    export = _session().download()
    if export is None:
        st.session_state.pop("pending_export", None)
    else:
        st.session_state.pending_export = export


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------
session = _session()
if "raw_text" not in st.session_state:
    st.session_state.raw_text = session.raw_text

st.title("Uzit生成データからCSV生成")

st.file_uploader(
    "CSVファイルをインポート",
    type=["csv"],
    key="csv_upload",
    on_change=_on_upload,
)

st.text_area(
    "CSVデータ",
    key="raw_text",
    placeholder="CSVデータをここに入力...",
    height=200,
    on_change=_on_text_change,
    label_visibility="collapsed",
)

st.button("処理開始", on_click=_on_process)

if session.error_message:
    st.error(session.error_message)

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
if session.rows:
    st.header("処理結果")

    if "file_name" not in st.session_state:
        st.session_state.file_name = session.user_file_name

    col_name, col_download, col_delete = st.columns([4, 1, 1])
    col_name.text_input(
        "ファイル名",
        key="file_name",
        placeholder="例: output.csv",
        on_change=_on_filename_change,
    )
    col_download.button("CSVダウンロード", on_click=_on_download)
    if session.selected:
        col_delete.button(
            f"選択項目を削除 ({len(session.selected)})",
            on_click=_on_delete,
            type="primary",
        )

    pending = st.session_state.get("pending_export")
    if pending is not None:
        st.download_button(
            f"{pending.filename} を保存",
            data=pending.content,
            file_name=pending.filename,
            mime="text/csv",
        )

    # Widget state must match the session before the checkbox is created.
    st.session_state.select_all = session.all_selected
    st.checkbox("すべて選択", key="select_all", on_change=_on_select_all)

    table = pd.DataFrame(
        [
            [i in session.selected, *(sanitize_cell(v) for v in row.export_cells())]
            for i, row in enumerate(session.rows)
        ],
        columns=[SELECT_COLUMN, *HEADER],
    )
    # Keyed on the selection so stale checkbox edits never outlive a change.
    table_key = f"table_{session.revision}_{hash(frozenset(session.selected))}"
    st.data_editor(
        table,
        key=table_key,
        on_change=_on_table_edit,
        args=(table_key,),
        disabled=list(HEADER),
        hide_index=True,
        use_container_width=True,
    )
