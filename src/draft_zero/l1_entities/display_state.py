"""L1 entity: what the UI shell should currently show."""

from __future__ import annotations

import enum


class DisplayState(enum.Enum):
    INITIALIZING = 'initializing'
    READY = 'ready'
    NO_FILE = 'no_file'
