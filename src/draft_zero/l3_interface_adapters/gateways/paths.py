"""Shared path constants for configuration, state, and logs."""

from __future__ import annotations

from platformdirs import user_config_path, user_log_path, user_state_path

APP_NAME = 'draft-zero'

CONFIG_DIR = user_config_path(APP_NAME)
STATE_PATH = user_state_path(APP_NAME) / 'state.yaml'
LOG_DIR = user_log_path(APP_NAME)

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
