"""Use case: mediate one edit intent against the editing mode and selection."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from draft_zero.l1_entities.edit_intent import EditIntent, IntentKind
from draft_zero.l1_entities.edit_mode import EditMode
from draft_zero.l1_entities.selection import Selection


class EditVerdict(enum.Enum):
    APPLIED = 'applied'
    SUPPRESSED = 'suppressed'  # blocked by forward-only mode
    NOOP = 'noop'  # allowed but nothing to change
    PASSTHROUGH = 'passthrough'  # not an edit; the input surface handles it


@dataclass(frozen=True)
class Splice:
    """Replace ``text[start:end]`` (which was *removed*) with *insert*."""

    start: int
    end: int
    insert: str
    removed: str = ''


@dataclass(frozen=True)
class EditOutcome:
    """Next buffer state for one intent. Rejected intents carry the old text unchanged."""

    text: str
    cursor: int
    verdict: EditVerdict
    splice: Splice | None = None

    @property
    def notify(self) -> bool:
        """True when the buffer changed and autosave must hear about it."""
        return self.verdict is EditVerdict.APPLIED


def apply_edit(text: str, selection: Selection, mode: EditMode, intent: EditIntent) -> EditOutcome:
    """Decide what *intent* does to *text*.

    In forward-only mode nothing is ever removed: deletions and cuts are
    suppressed, and an insertion over a selection keeps the selected text and
    lands right after it. In corrections mode edits behave like a plain
    text field.
    """
    sel = selection.clamped(len(text))

    if intent.is_insertion:
        return _apply_insertion(text, sel, mode, intent.data)
    if intent.is_deletion:
        if mode is EditMode.FORWARD_ONLY:
            return EditOutcome(text=text, cursor=sel.end, verdict=EditVerdict.SUPPRESSED)
        return _apply_deletion(text, sel, intent.kind)
    return EditOutcome(text=text, cursor=sel.end, verdict=EditVerdict.PASSTHROUGH)


def _apply_insertion(text: str, sel: Selection, mode: EditMode, data: str) -> EditOutcome:
    if not data:
        return EditOutcome(text=text, cursor=sel.end, verdict=EditVerdict.NOOP)

    if sel.is_empty or mode is EditMode.FORWARD_ONLY:
        # Forward-only keeps the selected text; the new text goes after it.
        at = sel.end
        splice = Splice(start=at, end=at, insert=data)
    else:
        splice = Splice(start=sel.start, end=sel.end, insert=data, removed=text[sel.start : sel.end])

    new_text = text[: splice.start] + data + text[splice.end :]
    return EditOutcome(
        text=new_text,
        cursor=splice.start + len(data),
        verdict=EditVerdict.APPLIED,
        splice=splice,
    )


def _apply_deletion(text: str, sel: Selection, kind: IntentKind) -> EditOutcome:
    if not sel.is_empty:
        start, end = sel.start, sel.end
    elif kind is IntentKind.DELETE_BACKWARD and sel.start > 0:
        start, end = sel.start - 1, sel.start
    elif kind is IntentKind.DELETE_FORWARD and sel.end < len(text):
        start, end = sel.end, sel.end + 1
    else:
        return EditOutcome(text=text, cursor=sel.end, verdict=EditVerdict.NOOP)

    splice = Splice(start=start, end=end, insert='', removed=text[start:end])
    return EditOutcome(
        text=text[:start] + text[end:],
        cursor=start,
        verdict=EditVerdict.APPLIED,
        splice=splice,
    )
