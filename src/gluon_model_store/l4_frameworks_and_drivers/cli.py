"""CLI entry point for gluon-model-store."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from gluon_model_store import __version__
from gluon_model_store.l1_entities.errors import ModelStoreError
from gluon_model_store.l1_entities.model_registry import short_hash
from gluon_model_store.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from gluon_model_store.l4_frameworks_and_drivers.container import DependencyContainer
from gluon_model_store.l4_frameworks_and_drivers.infra_config import build_store_config
from gluon_model_store.l4_frameworks_and_drivers.logging_setup import setup_console_logging, setup_file_logging


def _build_container(ctx: click.Context, root: str | None, *, progress: bool = False) -> DependencyContainer:
    try:
        raw = YamlConfigLoader().load_raw(ctx.obj['config_path'])
        config = build_store_config(raw, overrides={'root': root})
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    return DependencyContainer(config, on_progress=_echo_progress if progress else None)


def _echo_progress(percent: int) -> None:
    click.echo(f'\rDownloading... {percent:3d}%', nl=percent >= 100, err=True)


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(),
    help='Path to YAML config file.',
)
@click.option('-v', '--verbose', is_flag=True, help='Log debug details to stderr.')
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Also write a debug log to this file.',
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path, verbose, log_file):
    """gluon-model-store -- fetch, verify and cache pretrained Gluon model weights."""
    setup_console_logging(verbose)
    if log_file:
        setup_file_logging(Path(log_file))
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command()
@click.argument('name')
@click.option('-r', '--root', default=None, help='Model cache directory.')
@click.pass_context
def resolve(ctx, name, root):
    """Print the local path of NAME, downloading it if needed."""
    container = _build_container(ctx, root, progress=True)
    try:
        path = container.model_cache.resolve(name, container.config.root)
    except ModelStoreError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    click.echo(str(path))


@cli.command()
@click.option('-r', '--root', default=None, help='Model cache directory.')
@click.pass_context
def purge(ctx, root):
    """Remove every cached .params file."""
    container = _build_container(ctx, root)
    container.model_cache.purge(container.config.root)


@cli.command('list')
@click.option('-r', '--root', default=None, help='Model cache directory.')
@click.pass_context
def list_models(ctx, root):
    """List registered models and whether a file for them is cached."""
    container = _build_container(ctx, root)
    cache = container.model_cache
    for name in cache.available_models():
        mark = '*' if cache.cache_path(name, container.config.root).is_file() else ' '
        click.echo(f'{mark} {name:<20} {cache.short_hash(name)}')


@cli.command('hash')
@click.argument('name')
def short_hash_cmd(name):
    """Print the short hash NAME is stored under."""
    try:
        click.echo(short_hash(name))
    except ModelStoreError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
