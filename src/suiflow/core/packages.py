"""Install the npm packages that copied components import."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from suiflow.core.config import install_command
from suiflow.core.context import SuiflowContext

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
DEPENDENCY_SECTIONS: tuple[str, ...] = ("dependencies", "devDependencies")


def read_declared_dependencies(
    project_root: Path, sections: tuple[str, ...] = DEPENDENCY_SECTIONS
) -> set[str] | None:
    """Read the package names a project already declares.

    Args:
        project_root: Directory holding package.json
        sections: Manifest keys to collect names from

    Returns:
        Declared package names, or None if package.json is missing or unreadable
    """
    manifest_path = project_root / MANIFEST_FILENAME
    if not manifest_path.exists():
        return None

    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.debug("Could not read %s: %s", manifest_path, e)
        return None

    if not isinstance(manifest, dict):
        return None

    declared: set[str] = set()
    for key in sections:
        section = manifest.get(key)
        if isinstance(section, dict):
            declared.update(section)
    return declared


def find_missing_packages(packages: Iterable[str], declared: set[str] | None) -> list[str]:
    """Packages not declared by the project, sorted.

    With no manifest (`declared is None`) every package counts as missing.
    """
    if declared is None:
        return sorted(set(packages))
    return sorted(set(packages) - declared)


def ensure_packages_installed(ctx: SuiflowContext, packages: Iterable[str]) -> list[str]:
    """Install the packages the project does not already declare.

    Runs the package manager at most once for the whole batch. With no
    packages required, package.json is not consulted at all. A missing
    package.json is reported and every package is treated as missing. A
    failing install is reported; files already copied stay in place.

    Args:
        ctx: Application context
        packages: Package names required by the installed components

    Returns:
        Package names handed to a successful install run (empty if none ran)
    """
    required = set(packages)
    if not required:
        return []

    declared = read_declared_dependencies(ctx.cwd)
    if declared is None:
        ctx.feedback.error(f"{MANIFEST_FILENAME} not found in the project directory.")

    missing = find_missing_packages(required, declared)
    logger.debug("Required packages missing from %s: %s", MANIFEST_FILENAME, missing)
    if not missing:
        return []

    ctx.feedback.info(f"Installing missing dependencies: {', '.join(missing)}")
    command = install_command(ctx.config.package_manager, missing)
    try:
        ctx.shell.run_command(command, cwd=ctx.cwd, operation_context="install dependencies")
    except RuntimeError as e:
        ctx.feedback.error(f"Failed to install dependencies: {e}")
        return []

    return missing
