"""Gateway: YAML state file -- implements PathMemory port."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from draft_zero.l3_interface_adapters.gateways.paths import STATE_PATH

log = logging.getLogger('dz.memory')


class YamlPathMemory:
    """Remembers paths under string keys in a small YAML file."""

    def __init__(self, state_path: Path = STATE_PATH) -> None:
        self._state_path = state_path

    @property
    def state_path(self) -> Path:
        return self._state_path

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return str(value) if value else None

    def set(self, key: str, path: str) -> None:
        data = self._load()
        data[key] = path
        self._dump(data)

    def clear(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._dump(data)

    def _load(self) -> dict:
        if not self._state_path.exists():
            return {}
        try:
            data = yaml.safe_load(self._state_path.read_text(encoding='utf-8')) or {}
        except (OSError, yaml.YAMLError) as e:
            log.warning('Ignoring unreadable state file %s: %s', self._state_path, e)
            return {}
        if not isinstance(data, dict):
            log.warning('Ignoring malformed state file %s', self._state_path)
            return {}
        return data

    def _dump(self, data: dict) -> None:
        self._state_path.parent.mkdir(parents=True, exist_ok=True)
        self._state_path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding='utf-8')
