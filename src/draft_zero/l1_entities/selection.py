"""Selection entity -- a half-open range over the buffer."""

from __future__ import annotations

from pydantic import BaseModel


class Selection(BaseModel):
    """Half-open ``[start, end)`` range. An empty range is a plain cursor."""

    start: int
    end: int

    model_config = {'frozen': True}

    @classmethod
    def caret(cls, offset: int) -> Selection:
        return cls(start=offset, end=offset)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def clamped(self, length: int) -> Selection:
        """Return this range if it fits a buffer of *length*, else an empty range at the end.

        A range that is reversed or reaches outside ``[0, length]`` comes from a
        stale view of the buffer and is treated as no selection at all.
        """
        if 0 <= self.start <= self.end <= length:
            return self
        return Selection.caret(length)
