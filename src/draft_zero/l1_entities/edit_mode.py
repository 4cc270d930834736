"""L1 entity: editing discipline."""

from __future__ import annotations

import enum


class EditMode(enum.Enum):
    FORWARD_ONLY = 'forward_only'
    CORRECTIONS_ALLOWED = 'corrections_allowed'

    @property
    def label(self) -> str:
        return 'Forward only' if self is EditMode.FORWARD_ONLY else 'Corrections allowed'

    def toggled(self) -> EditMode:
        if self is EditMode.FORWARD_ONLY:
            return EditMode.CORRECTIONS_ALLOWED
        return EditMode.FORWARD_ONLY
