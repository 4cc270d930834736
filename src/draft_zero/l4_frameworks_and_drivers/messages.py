"""Textual Message subclasses -- contracts between controller/workers and the App."""

from __future__ import annotations

from textual.message import Message

from draft_zero.l1_entities.display_state import DisplayState


class SessionInitialized(Message):
    """Posted by the init worker once the session file is resolved (or not)."""

    def __init__(self, state: DisplayState) -> None:
        super().__init__()
        self.state = state


class SaveFinished(Message):
    """Posted when an autosave write completes, successfully or not."""

    def __init__(self, trigger: str, error: str = '') -> None:
        super().__init__()
        self.trigger = trigger
        self.error = error

    @property
    def ok(self) -> bool:
        return not self.error
