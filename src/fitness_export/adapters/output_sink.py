"""Destinations for converted text."""

import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO


class OutputSink(Protocol):
    """Interface for writing converted text."""

    def write(self, text: str) -> None:
        """Write the converted text."""


@dataclass
class StreamSink(OutputSink):
    """Sink that writes to a text stream, stdout by default."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def write(self, text: str) -> None:
        """Write text and flush the stream."""
        self.stream.write(text)
        self.stream.flush()
