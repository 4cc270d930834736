"""Help modal -- editing rules, the current mode, and the keybinding table."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Markdown, Static


class HelpModal(ModalScreen[None]):
    """Overlay shown with F1; any of its close keys returns to the editor."""

    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }

    HelpModal > Vertical {
        width: 64;
        height: auto;
        max-height: 90%;
        background: $panel;
        border: round $accent;
        padding: 1 2;
    }

    HelpModal #help-mode {
        color: $accent;
        margin-bottom: 1;
    }

    HelpModal #help-body {
        height: auto;
        margin: 0;
    }

    HelpModal #help-hint {
        color: $text-muted;
        text-align: right;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
        ('f1', 'dismiss', 'Close'),
    ]

    def __init__(self, body_md: str, mode_label: str = '', **kwargs) -> None:
        super().__init__(**kwargs)
        self._body_md = body_md
        self._mode_label = mode_label

    def compose(self) -> ComposeResult:
        with Vertical():
            if self._mode_label:
                yield Static(f'Current mode: {self._mode_label}', id='help-mode')
            yield Markdown(self._body_md, id='help-body')
            yield Static('Esc / F1 close', id='help-hint')
