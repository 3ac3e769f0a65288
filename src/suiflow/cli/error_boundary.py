"""Error boundary handling for CLI commands.

This module provides decorators to catch well-known exceptions at CLI entry points
and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from suiflow.cli.output import user_output

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - FileExistsError: File/directory conflicts
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration (e.g. a bad suiflow.toml)
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (FileExistsError, FileNotFoundError, ValueError, PermissionError) as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
