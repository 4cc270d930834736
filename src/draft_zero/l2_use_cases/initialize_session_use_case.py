"""Use case: resolve the session's file at startup (remembered path, else prompt)."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from draft_zero.l1_entities.config import SaveLocationOptions
from draft_zero.l1_entities.errors import PersistenceError
from draft_zero.l1_entities.session_target import SessionTarget
from draft_zero.l2_use_cases.ports.path_memory import LAST_FILE_KEY, PathMemory
from draft_zero.l2_use_cases.ports.persistence import PersistenceGateway
from draft_zero.l2_use_cases.ports.save_location_prompt import SaveLocationPrompt

log = logging.getLogger('dz.session')


@dataclass(frozen=True)
class InitResult:
    """Outcome of initialization -- the bound path and its content, or no path."""

    path: str | None = None
    text: str = ''
    prompted: bool = False
    error: str = ''

    @property
    def ok(self) -> bool:
        return self.path is not None


class InitializeSessionUseCase:
    """One-shot startup sequence binding a SessionTarget to a file."""

    def __init__(
        self,
        persistence: PersistenceGateway,
        path_memory: PathMemory,
        options: SaveLocationOptions,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._persistence = persistence
        self._memory = path_memory
        self._options = options
        self._clock = clock

    async def execute(self, target: SessionTarget, prompt: SaveLocationPrompt) -> InitResult:
        """Bind *target* to a file. Mutates target on success."""
        remembered = self._memory.get(LAST_FILE_KEY)
        if remembered:
            try:
                text = await asyncio.to_thread(self._persistence.read_text, remembered)
            except PersistenceError as e:
                log.info('Remembered file %s unavailable (%s); prompting for a new location', remembered, e)
                self._memory.clear(LAST_FILE_KEY)
            else:
                target.bind(remembered)
                target.mark_saved(self._clock())
                log.info('Reopened %s (%d chars)', remembered, len(text))
                return InitResult(path=remembered, text=text)

        return await self._prompt_for_location(target, prompt)

    async def _prompt_for_location(self, target: SessionTarget, prompt: SaveLocationPrompt) -> InitResult:
        path = await prompt.prompt_save_location(self._options)
        if not path:
            log.info('Save location prompt cancelled')
            return InitResult(prompted=True)

        self._memory.set(LAST_FILE_KEY, path)
        target.bind(path)
        try:
            await asyncio.to_thread(self._persistence.write_text, path, '')
        except PersistenceError as e:
            err = f'{type(e).__name__}: {e}'
            log.error('Could not create %s: %s', path, err)
            return InitResult(path=path, prompted=True, error=err)

        target.mark_saved(self._clock())
        log.info('Created %s', path)
        return InitResult(path=path, prompted=True)
