"""Byte sources for export documents."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class ByteSource(Protocol):
    """Interface for reading a whole export document."""

    def read_bytes(self) -> bytes:
        """Return the document contents."""


@dataclass
class LocalFileSource(ByteSource):
    """Export document stored on the local filesystem."""

    path: Path

    @classmethod
    def create(cls, path: str) -> "LocalFileSource":
        """Create a source for a filesystem path."""
        return cls(path=Path(path))

    def read_bytes(self) -> bytes:
        """Read the file, raising ``FileNotFoundError`` when it is missing."""
        return self.path.read_bytes()
