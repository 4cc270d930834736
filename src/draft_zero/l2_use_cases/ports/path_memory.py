"""Port: remembered file path that survives restarts."""

from __future__ import annotations

from typing import Protocol

LAST_FILE_KEY = 'draft_zero_file_path'


class PathMemory(Protocol):
    """Process-independent key -> path mapping."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, path: str) -> None: ...

    def clear(self, key: str) -> None: ...
