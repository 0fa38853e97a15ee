"""CLI entry point for taskclock.

Uses Click to expose the ``taskclock`` command, which launches the
interactive session directly.
"""

from __future__ import annotations

import sys
from functools import partial
from typing import Callable, TypeVar

import click

import taskclock
from taskclock.cli.app import TaskClockApp
from taskclock.logging_config import setup_logging

T = TypeVar("T")


def _run(action: Callable[[], T]) -> T:
    """Execute *action*, converting any event-loop failure to a CLI error.

    The error is printed to stdout and the process exits with code 1.
    """
    try:
        return action()
    except Exception as exc:
        click.echo(f"Uh oh, we encountered an error: {exc}")
        sys.exit(1)


def _launch(app: TaskClockApp) -> None:
    """Run *app* and re-raise whatever failed inside its event loop.

    Textual catches errors raised by handlers and ends the loop itself, so
    they only surface here through ``app.failure``.
    """
    app.run()
    if app.failure is not None:
        raise app.failure


@click.command()
@click.version_option(version=taskclock.__version__, prog_name="taskclock")
def cli() -> None:
    """taskclock: type a task, then count down five seconds on it."""
    setup_logging()
    app = TaskClockApp()
    _run(partial(_launch, app))
    if app.return_code:
        sys.exit(app.return_code)
