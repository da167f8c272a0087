"""Export endpoint: render enriched rows as a downloadable CSV."""

from __future__ import annotations

from urllib.parse import quote

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from telop_csv.api.models import ExportRequest
from telop_csv.processing.errors import EmptyDataError, ValidationError
from telop_csv.processing.export import default_filename, export_csv, resolve_filename

router = APIRouter()


@router.post("/api/export")
async def export(request: ExportRequest) -> Response:
    """Return the rows as a ``text/csv`` attachment.

    A blank ``filename`` falls back to a timestamped default.
    """
    filename = resolve_filename(request.filename, default_filename())
    try:
        export_file = export_csv([r.to_row() for r in request.rows], filename)
    except (ValidationError, EmptyDataError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    # RFC 5987 form so non-ASCII names survive the header
    disposition = f"attachment; filename*=UTF-8''{quote(export_file.filename)}"
    return Response(
        content=export_file.content,
        media_type=export_file.media_type,
        headers={"Content-Disposition": disposition},
    )
