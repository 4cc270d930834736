"""Use case: keep the buffer saved under an interval trigger and a keystroke trigger."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from draft_zero.l1_entities.config import AutosaveConfig
from draft_zero.l1_entities.save_status import SaveFlash, format_save_status
from draft_zero.l1_entities.session_target import SessionTarget
from draft_zero.l2_use_cases.ports.persistence import PersistenceGateway

log = logging.getLogger('dz.autosave')


@dataclass(frozen=True)
class SaveResult:
    """Result of one write attempt -- success, or failure with reason."""

    trigger: str
    error: str = ''

    @property
    def ok(self) -> bool:
        return not self.error


class AutosaveScheduler:
    """Writes the buffer to the session target on two independent triggers.

    - Interval: every ``config.interval`` seconds while started, unconditionally.
    - Keystrokes: after ``config.keystroke_threshold`` accepted edits; this also
      restarts the interval so no tick lands right after a keystroke save.

    Every trigger resets the keystroke counter. Writes never overlap: a trigger
    that arrives while a write is in flight is coalesced into a single
    follow-up write issued once the in-flight one completes. Failures only
    change the status string; the next trigger is the retry.
    """

    def __init__(
        self,
        persistence: PersistenceGateway,
        target: SessionTarget,
        text_source: Callable[[], str],
        config: AutosaveConfig,
        clock: Callable[[], float] = time.monotonic,
        on_result: Callable[[SaveResult], None] | None = None,
    ) -> None:
        self._persistence = persistence
        self._target = target
        self._text_source = text_source
        self._config = config
        self._clock = clock
        self._on_result = on_result

        self.keystroke_count = 0
        self._flash: SaveFlash | None = None
        self._flash_at = 0.0
        self._interval_task: asyncio.Task | None = None
        self._write_task: asyncio.Task | None = None
        self._follow_up: str | None = None

    @property
    def running(self) -> bool:
        return self._interval_task is not None and not self._interval_task.done()

    @property
    def writing(self) -> bool:
        return self._write_task is not None and not self._write_task.done()

    def set_result_listener(self, listener: Callable[[SaveResult], None] | None) -> None:
        self._on_result = listener

    # --- Lifecycle ---

    def start(self) -> None:
        """Arm the interval timer. Without a target path the scheduler stays idle."""
        if self._target.path is None:
            log.debug('No target path; autosave stays idle')
            return
        if self.running:
            return
        self._arm_interval()
        log.info('Autosave armed for %s (interval=%.1fs)', self._target.path, self._config.interval)

    def stop(self) -> None:
        """Cancel the interval timer. An in-flight write is left to finish."""
        if self._interval_task is not None:
            self._interval_task.cancel()
            self._interval_task = None
            log.info('Autosave stopped')

    async def __aenter__(self) -> AutosaveScheduler:
        self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.stop()

    def _arm_interval(self) -> None:
        if self._interval_task is not None:
            self._interval_task.cancel()
        self._interval_task = asyncio.get_running_loop().create_task(self._run_interval())

    async def _run_interval(self) -> None:
        while True:
            await asyncio.sleep(self._config.interval)
            self.on_interval_tick()

    # --- Triggers ---

    def notify_edit(self) -> bool:
        """Count one accepted edit. Returns True if it triggered a save."""
        self.keystroke_count += 1
        if self.keystroke_count < self._config.keystroke_threshold or self._target.path is None:
            return False
        self.request_write('keystrokes')
        if self.running:
            self._arm_interval()
        return True

    def on_interval_tick(self) -> bool:
        """Interval trigger. Writes whether or not edits happened since the last save."""
        return self.request_write('interval')

    def request_write(self, trigger: str) -> bool:
        """Issue a write of the current buffer. Returns True if a write started now."""
        if self._target.path is None:
            return False
        self.keystroke_count = 0
        if self.writing:
            log.debug('Write in flight; coalescing %s trigger', trigger)
            self._follow_up = trigger
            return False
        self._spawn_write(trigger)
        return True

    def _spawn_write(self, trigger: str) -> None:
        text = self._text_source()
        self._write_task = asyncio.get_running_loop().create_task(self._write(trigger, text))

    async def _write(self, trigger: str, text: str) -> None:
        path = self._target.path
        assert path is not None  # noqa: S101 -- request_write checks before spawning
        try:
            await asyncio.to_thread(self._persistence.write_text, path, text)
        except Exception as e:
            err = f'{type(e).__name__}: {e}'
            log.error('Save failed (%s trigger, %d chars): %s', trigger, len(text), err)
            self._flash = SaveFlash.FAILED
            self._flash_at = self._clock()
            self._report(SaveResult(trigger=trigger, error=err))
        else:
            now = self._clock()
            self._target.mark_saved(now)
            self._flash = SaveFlash.SAVED
            self._flash_at = now
            log.debug('Saved %d chars to %s (%s trigger)', len(text), path, trigger)
            self._report(SaveResult(trigger=trigger))
        finally:
            if self._follow_up is not None:
                follow_up, self._follow_up = self._follow_up, None
                self._spawn_write(follow_up)

    def _report(self, result: SaveResult) -> None:
        if self._on_result is not None:
            self._on_result(result)

    async def drain(self) -> None:
        """Wait until no write is in flight or queued."""
        while self._write_task is not None and not self._write_task.done():
            await self._write_task

    async def flush(self) -> None:
        """Save right now and wait for it, e.g. before the session ends."""
        if self._target.path is None:
            return
        self.request_write('flush')
        await self.drain()

    # --- Status ---

    def status(self, now: float | None = None) -> str:
        """Human-readable save status. Pure: never triggers or changes anything."""
        if now is None:
            now = self._clock()
        if self._flash is SaveFlash.FAILED:
            return self._flash.value
        if self._flash is SaveFlash.SAVED and now - self._flash_at < self._config.confirm_window:
            return self._flash.value
        return format_save_status(self._target.last_saved_at, now)
