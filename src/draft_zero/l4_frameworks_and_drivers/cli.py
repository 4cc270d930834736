"""CLI entry point for draft-zero."""

from __future__ import annotations

import sys

import click

from draft_zero import __version__


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '--forget',
    is_flag=True,
    default=False,
    help='Forget the remembered file and ask for a new save location.',
)
@click.option(
    '--corrections',
    is_flag=True,
    default=False,
    help='Start with corrections (deleting and cutting) allowed.',
)
@click.version_option(version=__version__)
def cli(config_path, forget, corrections):
    """draft-zero -- forward-only writing surface with autosave."""
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: not needed for --help

    from draft_zero.l2_use_cases.ports.path_memory import (  # noqa: PLC0415 -- deferred: not needed for --help
        LAST_FILE_KEY,
    )
    from draft_zero.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415 -- deferred: platformdirs not loaded on --help
    from draft_zero.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from draft_zero.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )

    config_loader = YamlConfigLoader()

    try:
        overrides: dict = {}
        if corrections:
            overrides['editor'] = {'allow_corrections': True}
        raw = config_loader.load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f'Error: invalid configuration\n{e}', err=True)
        sys.exit(1)

    from draft_zero.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help
        App,
    )
    from draft_zero.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help
        DependencyContainer,
    )

    container = DependencyContainer(config)
    if forget:
        container.path_memory.clear(LAST_FILE_KEY)

    app = App(config=config, controller=container.controller, log_dir=LOG_DIR)
    app.run()
