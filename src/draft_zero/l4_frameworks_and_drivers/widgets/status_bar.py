"""Status bar -- bottom bar showing edit mode, file, word count, save status, and key hints."""

from __future__ import annotations

from rich.cells import cell_len
from rich.markup import escape
from textual.reactive import reactive
from textual.widgets import Static

_SEP = ' │ '


class StatusBar(Static):
    """Bottom status bar. The App pushes values in; render() only formats them."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    mode_label: reactive[str] = reactive('')
    filename: reactive[str] = reactive('')
    word_count: reactive[int] = reactive(0)
    save_status: reactive[str] = reactive('')
    keybinding_hints: reactive[str] = reactive('')

    def _right_text(self) -> str:
        parts = []
        if self.filename:
            parts.append(escape(self.filename))
        parts.append(f'{self.word_count} word' + ('' if self.word_count == 1 else 's'))
        if self.save_status:
            parts.append(self.save_status)
        return _SEP.join(parts)

    def render(self) -> str:
        left_parts = []
        if self.mode_label:
            left_parts.append(self.mode_label)
        if self.keybinding_hints:
            left_parts.append(self.keybinding_hints)
        left = _SEP.join(left_parts)
        right = self._right_text()

        content_width = (self.size.width or 80) - 2
        left_width = cell_len(left.replace(r'\[', '['))
        gap = content_width - left_width - cell_len(right)
        if gap >= 2:
            return left + ' ' * gap + right
        return right
