"""Dependency container -- composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from draft_zero.l1_entities.config import AppConfig
from draft_zero.l2_use_cases.ports.path_memory import PathMemory
from draft_zero.l2_use_cases.ports.persistence import PersistenceGateway
from draft_zero.l3_interface_adapters.controllers.session_controller import SessionController
from draft_zero.l3_interface_adapters.gateways.file_persistence import FilePersistenceGateway
from draft_zero.l3_interface_adapters.gateways.paths import STATE_PATH
from draft_zero.l3_interface_adapters.gateways.yaml_path_memory import YamlPathMemory


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, config: AppConfig, state_path: Path = STATE_PATH) -> None:
        self.config = config
        self.persistence: PersistenceGateway = FilePersistenceGateway()
        self.path_memory: PathMemory = YamlPathMemory(state_path)
        self.controller = SessionController(
            config=config,
            persistence=self.persistence,
            path_memory=self.path_memory,
        )
