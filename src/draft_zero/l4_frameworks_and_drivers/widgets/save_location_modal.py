"""Save location modal -- path input standing in for a native "save as" dialog."""

from __future__ import annotations

from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Static

from draft_zero.l1_entities.config import SaveLocationOptions


class SaveLocationModal(ModalScreen[str | None]):
    """Modal that asks for a file path. Enter → validated path, Escape → None.

    Existing files need a second Enter to confirm they will be replaced.
    """

    DEFAULT_CSS = """
    SaveLocationModal {
        align: center middle;
    }

    SaveLocationModal > Vertical {
        width: 70;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    SaveLocationModal > Vertical > #location-title {
        text-style: bold;
        margin-bottom: 1;
    }

    SaveLocationModal > Vertical > #location-error {
        color: $warning;
        margin-top: 1;
    }

    SaveLocationModal > Vertical > #location-hint {
        color: $text-muted;
        margin-top: 1;
        text-align: center;
    }
    """

    BINDINGS = [('escape', 'cancel', 'Cancel')]

    def __init__(self, options: SaveLocationOptions, cwd: Path | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._options = options
        self._cwd = cwd or Path.cwd()
        self._confirm_overwrite: Path | None = None

    def compose(self) -> ComposeResult:
        exts = ', '.join(f'.{e.lstrip(".")}' for e in self._options.allowed_extensions)
        with Vertical():
            yield Static(self._options.title, id='location-title')
            yield Input(
                value=str(self._cwd / self._options.default_name),
                placeholder=self._options.default_name,
                id='location-input',
            )
            yield Static('', id='location-error')
            hint = 'Enter to confirm · Escape to cancel'
            if exts:
                hint = f'{exts} files · {hint}'
            yield Static(hint, id='location-hint')

    def validate_path(self, raw: str) -> tuple[Path | None, str]:
        """Resolve *raw* to a save path, or return an error message."""
        text = raw.strip()
        if not text:
            return None, 'Enter a file path.'
        path = Path(text).expanduser()
        if not path.is_absolute():
            path = self._cwd / path
        if path.is_dir():
            return None, f'{path} is a directory.'
        if not self._options.accepts(path.name):
            allowed = ', '.join(f'.{e.lstrip(".")}' for e in self._options.allowed_extensions)
            return None, f'File must end in {allowed}.'
        if not path.parent.is_dir():
            return None, f'Folder {path.parent} does not exist.'
        return path, ''

    def _show_error(self, message: str) -> None:
        self.query_one('#location-error', Static).update(message)

    def on_input_changed(self, event: Input.Changed) -> None:
        self._confirm_overwrite = None
        self._show_error('')

    def on_input_submitted(self, event: Input.Submitted) -> None:
        path, error = self.validate_path(event.value)
        if path is None:
            self._show_error(error)
            return
        if path.exists() and self._confirm_overwrite != path:
            self._confirm_overwrite = path
            self._show_error(f'{path.name} exists and will be replaced. Press Enter again to confirm.')
            return
        self.dismiss(str(path))

    def action_cancel(self) -> None:
        self.dismiss(None)
