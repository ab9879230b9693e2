"""Conversion endpoints used by the drag-and-drop page."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import PlainTextResponse

from fitness_export.api.models import ConvertResponse, FileResult
from fitness_export.services.nutrition import NumericParseError

if TYPE_CHECKING:
    from fitness_export.containers import AppContainer

router = APIRouter(tags=["convert"])

_logger = logging.getLogger(__name__)


class UploadTooLargeError(ValueError):
    """Raised when an upload exceeds the configured size limit."""


@router.post("/convert")
async def convert_files(
    request: Request,
    files: Annotated[list[UploadFile], File()],
    kind: Annotated[str | None, Form()] = None,
) -> ConvertResponse:
    """Convert each uploaded export independently."""
    container: AppContainer = request.app.state.container
    results = await asyncio.gather(
        *(_convert_upload(container, upload, kind) for upload in files)
    )
    return ConvertResponse(results=list(results))


@router.post("/convert/{kind}", response_class=PlainTextResponse)
async def convert_file(
    kind: str,
    request: Request,
    file: Annotated[UploadFile, File()],
) -> PlainTextResponse:
    """Convert one export and return the clipboard text."""
    container: AppContainer = request.app.state.container
    service = container.conversion_service
    try:
        data = await _read_upload(file, container.settings.max_upload_bytes)
        output = service.convert_for_clipboard(data, service.resolve_kind(kind))
    except (NumericParseError, UnicodeDecodeError, UploadTooLargeError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return PlainTextResponse(output)


async def _convert_upload(
    container: AppContainer, upload: UploadFile, kind: str | None
) -> FileResult:
    """Convert one upload, reporting failures on its own result."""
    service = container.conversion_service
    filename = upload.filename or ""
    resolved = service.resolve_kind(kind or filename)
    result = FileResult(filename=filename, kind=resolved.value if resolved else None)
    try:
        data = await _read_upload(upload, container.settings.max_upload_bytes)
        result.output = service.convert_for_clipboard(data, resolved)
    except Exception as exc:
        _logger.exception("Failed to convert upload", extra={"upload": filename})
        result.error = f"{type(exc).__name__}: {exc}"
    return result


async def _read_upload(upload: UploadFile, limit: int) -> bytes:
    data = await upload.read(limit + 1)
    if len(data) > limit:
        raise UploadTooLargeError(f"Upload exceeds {limit} bytes")
    return data
