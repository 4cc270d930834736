"""Editor widget -- a TextArea whose every edit goes through the session's edit policy."""

from __future__ import annotations

from collections.abc import Callable

from textual import events
from textual.widgets import TextArea
from textual.widgets.text_area import Location

from draft_zero.l1_entities.edit_intent import EditIntent
from draft_zero.l1_entities.selection import Selection
from draft_zero.l2_use_cases.edit_policy_use_case import EditOutcome

EditHandler = Callable[[EditIntent, Selection], EditOutcome]


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line breaks to the plain LF the document stores."""
    return text.replace('\r\n', '\n').replace('\r', '\n')


class ForwardOnlyTextArea(TextArea):
    """TextArea that classifies input into EditIntents and applies the returned splice.

    The widget never edits its own document directly: typed characters,
    Enter, paste, cut and all deletion actions are routed to the edit
    handler, and only APPLIED outcomes touch the document. Keys that are not
    edits (cursor movement, selection) keep the stock TextArea behaviour.
    Undo and redo are disabled.
    """

    def __init__(self, text: str = '', *, on_edit: EditHandler | None = None, **kwargs) -> None:
        super().__init__(text, **kwargs)
        self._on_edit = on_edit

    def set_edit_handler(self, handler: EditHandler | None) -> None:
        self._on_edit = handler

    # --- Offsets ---

    def _offset(self, location: Location) -> int:
        return self.document.get_index_from_location(location)

    def _location(self, offset: int) -> Location:
        return self.document.get_location_from_index(offset)

    def current_selection(self) -> Selection:
        start, end = sorted(self.selection)
        return Selection(start=self._offset(start), end=self._offset(end))

    # --- Routing ---

    def route(self, intent: EditIntent, selection: Selection | None = None) -> EditOutcome | None:
        """Send *intent* to the edit handler and apply the outcome to the document."""
        if self._on_edit is None:
            return None
        if selection is None:
            selection = self.current_selection()
        outcome = self._on_edit(intent, selection)
        if outcome.notify and outcome.splice is not None:
            splice = outcome.splice
            start = self._location(splice.start)
            end = self._location(splice.end)
            self.replace(splice.insert, start, end, maintain_selection_offset=False)
            self.move_cursor(self._location(outcome.cursor))
        return outcome

    def _route_range_delete(self, start: Location, end: Location) -> EditOutcome | None:
        selection = self.current_selection()
        if selection.is_empty:
            first, last = sorted((start, end))
            selection = Selection(start=self._offset(first), end=self._offset(last))
        if selection.is_empty:
            return None
        return self.route(EditIntent.backspace(), selection)

    # --- Input events ---

    async def _on_key(self, event: events.Key) -> None:
        if self.read_only or self._on_edit is None:
            await super()._on_key(event)
            return
        if event.key == 'enter' or (event.is_printable and event.character):
            event.stop()
            event.prevent_default()
            insert = '\n' if event.key == 'enter' else event.character
            self.route(EditIntent.insert(insert))
            return
        await super()._on_key(event)

    async def _on_paste(self, event: events.Paste) -> None:
        if self.read_only or self._on_edit is None:
            await super()._on_paste(event)
            return
        event.stop()
        event.prevent_default()
        self.route(EditIntent.paste(normalize_newlines(event.text)))

    # --- Editing actions (bound by TextArea) ---

    def action_delete_left(self) -> None:
        self.route(EditIntent.backspace())

    def action_delete_right(self) -> None:
        self.route(EditIntent.delete())

    def action_delete_word_left(self) -> None:
        self._route_range_delete(self.get_cursor_word_left_location(), self.cursor_location)

    def action_delete_word_right(self) -> None:
        self._route_range_delete(self.cursor_location, self.get_cursor_word_right_location())

    def action_delete_to_start_of_line(self) -> None:
        row, _ = self.cursor_location
        self._route_range_delete((row, 0), self.cursor_location)

    def action_delete_to_end_of_line(self) -> None:
        row, _ = self.cursor_location
        self._route_range_delete(self.cursor_location, (row, len(self.document.get_line(row))))

    def action_delete_line(self) -> None:
        row, _ = self.cursor_location
        if row + 1 < self.document.line_count:
            end = (row + 1, 0)
        else:
            end = (row, len(self.document.get_line(row)))
        self._route_range_delete((row, 0), end)

    def action_cut(self) -> None:
        outcome = self.route(EditIntent.cut())
        if outcome is not None and outcome.notify and outcome.splice is not None:
            self.app.copy_to_clipboard(outcome.splice.removed)

    def action_paste(self) -> None:
        self.route(EditIntent.paste(normalize_newlines(self.app.clipboard)))

    def action_undo(self) -> None:
        """History is not kept; undo would bypass the edit policy."""

    def action_redo(self) -> None:
        """History is not kept; redo would bypass the edit policy."""
