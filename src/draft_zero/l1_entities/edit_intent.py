"""Edit intent entity -- a raw input event classified by what it tries to do."""

from __future__ import annotations

import enum

from pydantic import BaseModel


class IntentKind(enum.Enum):
    INSERT_TEXT = 'insert_text'
    INSERT_FROM_PASTE = 'insert_from_paste'
    DELETE_BACKWARD = 'delete_backward'
    DELETE_FORWARD = 'delete_forward'
    CUT = 'cut'
    OTHER = 'other'


_INSERTIONS = frozenset({IntentKind.INSERT_TEXT, IntentKind.INSERT_FROM_PASTE})
_DELETIONS = frozenset({IntentKind.DELETE_BACKWARD, IntentKind.DELETE_FORWARD, IntentKind.CUT})


class EditIntent(BaseModel):
    """One input intent. ``data`` carries the payload of insertions."""

    kind: IntentKind
    data: str = ''

    model_config = {'frozen': True}

    @property
    def is_insertion(self) -> bool:
        return self.kind in _INSERTIONS

    @property
    def is_deletion(self) -> bool:
        return self.kind in _DELETIONS

    @classmethod
    def insert(cls, text: str) -> EditIntent:
        return cls(kind=IntentKind.INSERT_TEXT, data=text)

    @classmethod
    def paste(cls, text: str) -> EditIntent:
        return cls(kind=IntentKind.INSERT_FROM_PASTE, data=text)

    @classmethod
    def backspace(cls) -> EditIntent:
        return cls(kind=IntentKind.DELETE_BACKWARD)

    @classmethod
    def delete(cls) -> EditIntent:
        return cls(kind=IntentKind.DELETE_FORWARD)

    @classmethod
    def cut(cls) -> EditIntent:
        return cls(kind=IntentKind.CUT)
