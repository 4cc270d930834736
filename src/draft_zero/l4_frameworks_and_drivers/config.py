"""Application config defaults -- lives in L4, not domain."""

from __future__ import annotations

import copy

from draft_zero.l1_entities.config import AppConfig
from draft_zero.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'autosave': {
        'interval': 10.0,
        'keystroke_threshold': 5,
        'confirm_window': 2.0,
        'status_refresh': 1.0,
    },
    'prompt': {
        'title': 'Choose where to save your writing',
        'allowed_extensions': ['txt', 'md'],
        'default_name': 'draft.txt',
    },
    'editor': {
        'allow_corrections': False,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
