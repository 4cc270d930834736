"""Save status derivation -- pure functions of the last save time and the clock."""

from __future__ import annotations

import enum

JUST_NOW_SECONDS = 5


class SaveFlash(enum.Enum):
    """Transient status that overrides the elapsed-time form while current."""

    SAVED = 'Saved'
    FAILED = 'Save failed'


def format_save_status(last_saved_at: float | None, now: float) -> str:
    """Format elapsed time since the last save, e.g. ``Saved 30s ago``."""
    if last_saved_at is None:
        return ''
    seconds = int(max(now - last_saved_at, 0.0))
    if seconds < JUST_NOW_SECONDS:
        return 'Saved just now'
    if seconds < 60:
        return f'Saved {seconds}s ago'
    return f'Saved {seconds // 60}m ago'
