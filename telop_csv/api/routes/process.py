"""Process endpoints: turn raw telop text into enriched rows."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from telop_csv.api.models import ProcessRequest, ProcessResponse, RowModel
from telop_csv.pipeline_config import PipelineConfig, WhitespaceStrategy
from telop_csv.processing.errors import EmptyInputError
from telop_csv.processing.export import default_filename
from telop_csv.processing.pipeline import process_text

router = APIRouter()

# 5 MB upload limit
MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def _process(text: str, whitespace: WhitespaceStrategy) -> ProcessResponse:
    try:
        result = process_text(text, PipelineConfig(whitespace=whitespace))
    except EmptyInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return ProcessResponse(
        rows=[RowModel.from_row(r) for r in result.rows],
        warning=result.latest_warning,
        warnings=[str(w) for w in result.warnings],
        output_file_name=default_filename(),
    )


@router.post("/api/process", response_model=ProcessResponse)
async def process(request: ProcessRequest) -> ProcessResponse:
    """Process pasted telop text."""
    return _process(request.text, request.whitespace)


@router.post("/api/process/upload", response_model=ProcessResponse)
async def process_upload(
    file: Annotated[UploadFile, File(...)],
    whitespace: Annotated[str, Form()] = "strip",
) -> ProcessResponse:
    """Process an uploaded UTF-8 ``.csv`` file."""
    raw = await file.read()
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {MAX_UPLOAD_BYTES // (1024 * 1024)} MB.",
        )

    try:
        strategy = WhitespaceStrategy(whitespace)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=f"Unknown whitespace strategy: {whitespace!r}") from exc

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail="File is not valid UTF-8 text.") from exc

    return _process(text, strategy)
