"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from draft_zero.l1_entities.config import AppConfig, SaveLocationOptions
from draft_zero.l1_entities.errors import DocumentIOError, DocumentNotFoundError
from draft_zero.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeClock:
    """Manually advanced clock, callable like time.monotonic."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakePersistence:
    """Fake persistence gateway -- in-memory files, recorded writes, injectable failures."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.read_calls: list[str] = []
        self.write_calls: list[tuple[str, str]] = []
        self.fail_reads: set[str] = set()
        self.fail_writes = False
        self.gate: threading.Event | None = None

    def read_text(self, path: str) -> str:
        self.read_calls.append(path)
        if path in self.fail_reads:
            raise DocumentIOError(f'Cannot read {path}')
        if path not in self.files:
            raise DocumentNotFoundError(f'File not found: {path}')
        return self.files[path]

    def write_text(self, path: str, text: str) -> Path:
        if self.gate is not None:
            self.gate.wait(timeout=5)
        self.write_calls.append((path, text))
        if self.fail_writes:
            raise DocumentIOError(f'Cannot write {path}')
        self.files[path] = text
        return Path(path)


class FakePathMemory:
    """Fake path memory backed by a dict."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.cleared: list[str] = []

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, path: str) -> None:
        self.data[key] = path

    def clear(self, key: str) -> None:
        self.cleared.append(key)
        self.data.pop(key, None)


class FakePrompt:
    """Fake save-location prompt returning a canned answer."""

    def __init__(self, answer: str | None = None) -> None:
        self.answer = answer
        self.calls: list[SaveLocationOptions] = []

    async def prompt_save_location(self, options: SaveLocationOptions) -> str | None:
        self.calls.append(options)
        return self.answer


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_persistence() -> FakePersistence:
    return FakePersistence()


@pytest.fixture
def fake_memory() -> FakePathMemory:
    return FakePathMemory()


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
autosave:
  interval: 30
  keystroke_threshold: 20
prompt:
  default_name: "novel.md"
editor:
  allow_corrections: true
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
