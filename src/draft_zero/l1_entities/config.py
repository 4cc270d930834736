"""Configuration Pydantic models -- pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AutosaveConfig(BaseModel):
    interval: float = Field(gt=0)
    keystroke_threshold: int = Field(ge=1)
    confirm_window: float = Field(ge=0)
    status_refresh: float = Field(gt=0)


class SaveLocationOptions(BaseModel):
    """Options shown by the save-location prompt."""

    title: str
    allowed_extensions: list[str] = Field(default_factory=list)
    default_name: str

    def accepts(self, path: str) -> bool:
        """True when *path* ends in one of the allowed extensions (or any are allowed)."""
        if not self.allowed_extensions:
            return True
        lowered = path.lower()
        return any(lowered.endswith('.' + ext.lower().lstrip('.')) for ext in self.allowed_extensions)


class EditorConfig(BaseModel):
    allow_corrections: bool


class AppConfig(BaseModel):
    autosave: AutosaveConfig
    prompt: SaveLocationOptions
    editor: EditorConfig
