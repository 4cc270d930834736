"""App -- the TUI shell: session setup screens, the editor, and the status bar."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, ContentSwitcher, Static

from draft_zero.l1_entities.config import AppConfig, SaveLocationOptions
from draft_zero.l1_entities.display_state import DisplayState
from draft_zero.l1_entities.edit_intent import EditIntent
from draft_zero.l1_entities.selection import Selection
from draft_zero.l2_use_cases.autosave_use_case import SaveResult
from draft_zero.l2_use_cases.edit_policy_use_case import EditOutcome
from draft_zero.l3_interface_adapters.controllers.session_controller import SessionController
from draft_zero.l4_frameworks_and_drivers.logging_setup import setup_file_logging
from draft_zero.l4_frameworks_and_drivers.messages import SaveFinished, SessionInitialized
from draft_zero.l4_frameworks_and_drivers.widgets.forward_only_text_area import ForwardOnlyTextArea
from draft_zero.l4_frameworks_and_drivers.widgets.help_modal import HelpModal
from draft_zero.l4_frameworks_and_drivers.widgets.save_location_modal import SaveLocationModal
from draft_zero.l4_frameworks_and_drivers.widgets.status_bar import StatusBar

log = logging.getLogger('dz.app')

HELP_BODY = """\
### Editing
Text can only be added. Backspace, Delete and cut do nothing
unless corrections are allowed. Typing over a selection keeps the
selected text and inserts after it.

### Saving
The file is saved every few seconds and after every few keystrokes.

### Keybindings
| Key | Action |
|-----|--------|
| `Ctrl+T` | Toggle corrections |
| `F1` | Toggle this help |
| `Ctrl+Q` | Save and quit |
"""


class App(TextualApp):
    """Single-document writing surface bound to one SessionController."""

    CSS_PATH = 'app.tcss'
    TITLE = 'draft-zero'

    BINDINGS = [
        Binding('ctrl+q', 'quit_app', 'Quit', priority=True),
        Binding('ctrl+t', 'toggle_corrections', 'Corrections', priority=True),
        Binding('f1', 'show_help', 'Help', priority=True),
    ]

    def __init__(
        self,
        config: AppConfig,
        controller: SessionController | None = None,
        log_dir: Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config

        if log_dir is not None:
            setup_file_logging(log_dir)

        # Controller (injected or created with default wiring)
        if controller is not None:
            self._controller = controller
        else:  # pragma: no cover -- composition-root wiring; controller always injected in tests
            from draft_zero.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: only wired when no controller injected (non-test path)
                DependencyContainer,
            )

            self._controller = DependencyContainer(config).controller

        self._controller.on_save_result(self._on_save_result)

    @property
    def controller(self) -> SessionController:
        return self._controller

    def compose(self) -> ComposeResult:
        with ContentSwitcher(initial='initializing', id='screens'):
            yield Static('Setting up...', id='initializing')
            with Vertical(id='no-file'):
                yield Static('Please select a save location to begin writing.', id='no-file-message')
                yield Button('Try Again', id='retry')
            yield ForwardOnlyTextArea(on_edit=self._apply_edit, id='editor')
        yield StatusBar(id='status-bar')

    def on_mount(self) -> None:
        self.query_one('#editor', ForwardOnlyTextArea).placeholder = 'Start writing...'
        bar = self.query_one('#status-bar', StatusBar)
        bar.keybinding_hints = r'\[^T] corrections  \[F1] help  \[^Q] quit'
        self._refresh_status_bar()
        self.set_interval(self._config.autosave.status_refresh, self._refresh_status_bar)
        self._run_init_worker()

    def on_unmount(self) -> None:
        self._controller.stop_autosave()

    def _refresh_status_bar(self) -> None:
        try:
            bar = self.query_one('#status-bar', StatusBar)
        except Exception:  # noqa: S110 -- TUI race guard; widget may not exist during teardown  # pragma: no cover
            return
        ctrl = self._controller
        bar.mode_label = ctrl.mode.label
        if ctrl.display_state is DisplayState.READY:
            bar.filename = ctrl.filename
            bar.word_count = ctrl.word_count
            bar.save_status = ctrl.save_status()
        else:
            bar.filename = ''
            bar.word_count = 0
            bar.save_status = ''

    # --- Session setup ---

    async def prompt_save_location(self, options: SaveLocationOptions) -> str | None:
        """SaveLocationPrompt implementation: show the modal and wait for its answer."""
        return await self.push_screen_wait(SaveLocationModal(options))

    def _run_init_worker(self) -> None:
        self.query_one('#screens', ContentSwitcher).current = 'initializing'

        async def _init_task() -> None:
            if self._controller.display_state is DisplayState.NO_FILE:
                state = await self._controller.restart(self)
            else:
                state = await self._controller.initialize(self)
            self.post_message(SessionInitialized(state))

        self.run_worker(_init_task, exclusive=True, group='init')

    def on_session_initialized(self, message: SessionInitialized) -> None:
        switcher = self.query_one('#screens', ContentSwitcher)
        if message.state is DisplayState.READY:
            editor = self.query_one('#editor', ForwardOnlyTextArea)
            editor.load_text(self._controller.text)
            editor.move_cursor(editor.document.end)
            switcher.current = 'editor'
            editor.focus()
            self._controller.start_autosave()
        else:
            switcher.current = 'no-file'
            self.query_one('#retry', Button).focus()
        self._refresh_status_bar()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == 'retry':
            self._run_init_worker()

    # --- Editing & saving ---

    def _apply_edit(self, intent: EditIntent, selection: Selection) -> EditOutcome:
        outcome = self._controller.apply_edit(intent, selection)
        if outcome.notify:
            self._refresh_status_bar()
        return outcome

    def _on_save_result(self, result: SaveResult) -> None:
        self.post_message(SaveFinished(trigger=result.trigger, error=result.error))

    def on_save_finished(self, message: SaveFinished) -> None:
        if not message.ok:
            log.warning('Autosave (%s) failed: %s', message.trigger, message.error)
        self._refresh_status_bar()

    # --- Actions ---

    def action_toggle_corrections(self) -> None:
        mode = self._controller.toggle_mode()
        self._refresh_status_bar()
        self.notify(mode.label, timeout=2)

    def action_show_help(self) -> None:
        if isinstance(self.screen, HelpModal):
            self.screen.dismiss()
            return
        self.push_screen(HelpModal(body_md=HELP_BODY, mode_label=self._controller.mode.label))

    async def action_quit_app(self) -> None:
        await self._controller.shutdown()
        self.exit()
