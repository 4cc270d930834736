"""Port: ask the user where the document should be saved."""

from __future__ import annotations

from typing import Protocol

from draft_zero.l1_entities.config import SaveLocationOptions


class SaveLocationPrompt(Protocol):
    """Interactive save-path chooser, implemented by the UI layer."""

    async def prompt_save_location(self, options: SaveLocationOptions) -> str | None:
        """Return the chosen path, or None when the user cancels."""
        ...
