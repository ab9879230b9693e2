"""Pydantic models for conversion responses."""

from pydantic import BaseModel


class FileResult(BaseModel):
    """Conversion outcome for one uploaded file."""

    filename: str
    kind: str | None = None
    output: str = ""
    error: str | None = None


class ConvertResponse(BaseModel):
    """Results for every file in a conversion request."""

    results: list[FileResult]
