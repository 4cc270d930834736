"""Port: persistence gateway for reading and writing the document file."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class PersistenceGateway(Protocol):
    """Abstract whole-file text persistence."""

    def read_text(self, path: str) -> str:
        """Read the whole file. Raises DocumentNotFoundError or DocumentIOError."""
        ...

    def write_text(self, path: str, text: str) -> Path:
        """Replace the whole file with *text*. Raises DocumentIOError."""
        ...
