"""Session target entity -- where the buffer is saved and when it last was."""

from __future__ import annotations

from pydantic import BaseModel

from draft_zero.l1_entities.errors import TargetPathLockedError


class SessionTarget(BaseModel):
    """Mutable save target for one writing session.

    ``path`` binds at most once; after that it is fixed for the session.
    """

    path: str | None = None
    last_saved_at: float | None = None

    def bind(self, path: str) -> None:
        if self.path is not None and self.path != path:
            raise TargetPathLockedError(f'Session already bound to {self.path}')
        self.path = path

    def mark_saved(self, now: float) -> None:
        self.last_saved_at = now
