"""Subprocess execution with rich error context."""

import subprocess
from collections.abc import Sequence
from pathlib import Path


def _stripped_output(stream: str | bytes | None) -> str:
    if not stream:
        return ""
    text = stream if isinstance(stream, str) else stream.decode("utf-8")
    return text.strip()


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a command, raising RuntimeError with context if it fails.

    Args:
        cmd: Command and arguments to execute
        operation_context: What the command does, e.g. "install dependencies"
        cwd: Working directory for command execution
        capture_output: Capture stdout/stderr (default: True). Pass False to
            stream the child's output straight to the terminal.

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If the command exits non-zero or its binary is not found
    """
    cmd_str = " ".join(str(arg) for arg in cmd)
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        lines = [
            f"Failed to {operation_context}",
            f"Command: {cmd_str}",
            f"Exit code: {e.returncode}",
        ]
        for label, stream in (("stdout", e.stdout), ("stderr", e.stderr)):
            output = _stripped_output(stream)
            if output:
                lines.append(f"{label}: {output}")
        raise RuntimeError("\n".join(lines)) from e
    except FileNotFoundError as e:
        raise RuntimeError(
            f"Command not found while trying to {operation_context}: {cmd[0]}"
            f"\nFull command: {cmd_str}"
        ) from e
