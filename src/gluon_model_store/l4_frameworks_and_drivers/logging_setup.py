"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click

_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


class _ClickEchoHandler(logging.Handler):
    """Writes records with click.echo so the current stderr is looked up on every emit."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # noqa: BLE001 -- logging must not raise
            self.handleError(record)


def _install(handler: logging.Handler) -> None:
    # Repeated CLI invocations in one process replace the previous handler of the same kind.
    root = logging.getLogger('gms')
    for existing in list(root.handlers):
        if type(existing) is type(handler):
            root.removeHandler(existing)
            existing.close()
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)


def setup_console_logging(verbose: bool = False) -> None:
    """Send ``gms`` records to stderr (INFO, or DEBUG when *verbose*)."""
    handler = _ClickEchoHandler()
    handler.setFormatter(logging.Formatter('%(levelname)s %(message)s'))
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    _install(handler)


def setup_file_logging(log_path: Path) -> None:
    """Configure file-based debug logging at *log_path*."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(logging.DEBUG)
    _install(handler)
    logging.getLogger('gms.cli').info('Debug logging started → %s', log_path)
