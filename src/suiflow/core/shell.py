"""Shell command execution abstraction.

Architecture:
- Shell: Abstract base class defining the interface
- RealShell: Production implementation using subprocess
- FakeShell (tests/fakes/shell.py): records calls without executing
"""

import shutil
from abc import ABC, abstractmethod
from pathlib import Path

from suiflow.core.subprocess import run_subprocess_with_context


class Shell(ABC):
    """Abstract interface for running external commands (npm, npx, ...)."""

    @abstractmethod
    def run_command(self, command: list[str], cwd: Path, operation_context: str) -> None:
        """Run a command to completion, streaming its output to the terminal.

        Args:
            command: Command and arguments
            cwd: Working directory
            operation_context: What the command does, used in error messages

        Raises:
            RuntimeError: If the command exits non-zero or cannot be found
        """
        ...

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the absolute path of an executable on PATH, or None."""
        ...


class RealShell(Shell):
    """Production implementation using subprocess."""

    def run_command(self, command: list[str], cwd: Path, operation_context: str) -> None:
        run_subprocess_with_context(
            command,
            operation_context=operation_context,
            cwd=cwd,
            capture_output=False,
        )

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
