"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from suiflow.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output.

    Installer code reports through ctx.feedback instead of printing, so tests
    can assert on what a user would have seen.

    Usage:
        ctx.feedback.info("Installing missing dependencies...")
        ctx.feedback.success("✓ BalanceDisplay component added")
        ctx.feedback.warning("Utility @/lib/format referenced but not found in templates.")
        ctx.feedback.error("Component NotAComponent not found.")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show non-fatal problem."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to the terminal with color."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        """Show success message in green."""
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        """Show warning in yellow."""
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        """Show error message in red."""
        user_output(click.style(message, fg="red"))
