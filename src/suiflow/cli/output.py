"""Output utilities for CLI commands with clear intent.

user_output() is for anything a person reads: progress, warnings, errors. It
goes to stderr so stdout stays free for machine_output().
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write parseable output to stdout."""
    click.echo(message, nl=nl)
