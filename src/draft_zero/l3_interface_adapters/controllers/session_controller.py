"""SessionController -- owns the buffer, mode, and save target; orchestrates use cases."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from draft_zero.l1_entities.config import AppConfig
from draft_zero.l1_entities.display_state import DisplayState
from draft_zero.l1_entities.document import display_filename, word_count
from draft_zero.l1_entities.edit_intent import EditIntent
from draft_zero.l1_entities.edit_mode import EditMode
from draft_zero.l1_entities.selection import Selection
from draft_zero.l1_entities.session_target import SessionTarget
from draft_zero.l2_use_cases.autosave_use_case import AutosaveScheduler, SaveResult
from draft_zero.l2_use_cases.edit_policy_use_case import EditOutcome, EditVerdict, apply_edit
from draft_zero.l2_use_cases.initialize_session_use_case import InitializeSessionUseCase
from draft_zero.l2_use_cases.ports.path_memory import PathMemory
from draft_zero.l2_use_cases.ports.persistence import PersistenceGateway
from draft_zero.l2_use_cases.ports.save_location_prompt import SaveLocationPrompt

log = logging.getLogger('dz.session')


class SessionController:
    """Central orchestrator bridging use cases to the TUI.

    Owns the buffer text, cursor, edit mode, SessionTarget and the
    AutosaveScheduler. The App (L4) delegates every edit decision here and
    only renders what this controller reports.
    """

    def __init__(
        self,
        config: AppConfig,
        persistence: PersistenceGateway,
        path_memory: PathMemory,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config
        self._persistence = persistence
        self._clock = clock

        self._init_uc = InitializeSessionUseCase(persistence, path_memory, config.prompt, clock=clock)

        self.text: str = ''
        self.cursor: int = 0
        self.mode = EditMode.CORRECTIONS_ALLOWED if config.editor.allow_corrections else EditMode.FORWARD_ONLY
        self.target = SessionTarget()
        self.display_state = DisplayState.INITIALIZING
        self.scheduler = AutosaveScheduler(
            persistence,
            self.target,
            text_source=lambda: self.text,
            config=config.autosave,
            clock=clock,
        )

    # --- Lifecycle ---

    async def initialize(self, prompt: SaveLocationPrompt) -> DisplayState:
        """Resolve the session file. Runs once; see restart() for the no-file state."""
        if self.display_state is not DisplayState.INITIALIZING:
            return self.display_state

        result = await self._init_uc.execute(self.target, prompt)
        if result.ok:
            self.text = result.text
            self.cursor = len(result.text)
            self.display_state = DisplayState.READY
        else:
            self.display_state = DisplayState.NO_FILE
        log.info('Session initialized: %s (file=%s)', self.display_state.value, self.filename)
        return self.display_state

    async def restart(self, prompt: SaveLocationPrompt) -> DisplayState:
        """Re-run initialization after the user dismissed the prompt."""
        if self.display_state is not DisplayState.NO_FILE:
            return self.display_state
        self.display_state = DisplayState.INITIALIZING
        return await self.initialize(prompt)

    def start_autosave(self) -> None:
        self.scheduler.start()

    def stop_autosave(self) -> None:
        self.scheduler.stop()

    async def shutdown(self, *, flush: bool = True) -> None:
        """Stop autosave timers and, if a file is bound, write the final buffer."""
        self.scheduler.stop()
        if flush and self.target.path is not None:
            await self.scheduler.flush()

    def on_save_result(self, listener: Callable[[SaveResult], None] | None) -> None:
        self.scheduler.set_result_listener(listener)

    # --- Editing ---

    def apply_edit(self, intent: EditIntent, selection: Selection | None = None) -> EditOutcome:
        """Run *intent* through the edit policy; commit and report accepted changes."""
        if selection is None:
            selection = Selection.caret(self.cursor)
        outcome = apply_edit(self.text, selection, self.mode, intent)
        if outcome.verdict is EditVerdict.SUPPRESSED:
            log.debug('Suppressed %s in forward-only mode', intent.kind.value)
        if outcome.notify:
            self.text = outcome.text
            self.cursor = outcome.cursor
            self.scheduler.notify_edit()
        return outcome

    def set_mode(self, mode: EditMode) -> None:
        if mode is not self.mode:
            log.info('Edit mode -> %s', mode.value)
        self.mode = mode

    def toggle_mode(self) -> EditMode:
        self.set_mode(self.mode.toggled())
        return self.mode

    # --- Display ---

    @property
    def filename(self) -> str:
        return display_filename(self.target.path)

    @property
    def word_count(self) -> int:
        return word_count(self.text)

    def save_status(self, now: float | None = None) -> str:
        return self.scheduler.status(now)
