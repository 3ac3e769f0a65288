"""Project configuration loaded from suiflow.toml.

The file is optional. It lives in the consumer project root and is read once
at CLI entry:

    package_manager = "pnpm"
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILENAME = "suiflow.toml"

# Package manager -> command prefix that adds packages to package.json
PACKAGE_MANAGER_COMMANDS: dict[str, tuple[str, ...]] = {
    "npm": ("npm", "install"),
    "pnpm": ("pnpm", "add"),
    "yarn": ("yarn", "add"),
    "bun": ("bun", "add"),
}

DEFAULT_PACKAGE_MANAGER = "npm"


@dataclass(frozen=True)
class ProjectConfig:
    """Immutable project configuration."""

    package_manager: str = DEFAULT_PACKAGE_MANAGER


def load_project_config(project_root: Path) -> ProjectConfig:
    """Load suiflow.toml from the project root.

    Args:
        project_root: Consumer project directory

    Returns:
        ProjectConfig with values from the file, or defaults if it is absent

    Raises:
        ValueError: If the file is not valid TOML or names an unknown package manager
    """
    config_path = project_root / CONFIG_FILENAME
    if not config_path.exists():
        return ProjectConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    package_manager = data.get("package_manager", DEFAULT_PACKAGE_MANAGER)
    if package_manager not in PACKAGE_MANAGER_COMMANDS:
        supported = ", ".join(PACKAGE_MANAGER_COMMANDS)
        raise ValueError(
            f"Unsupported package_manager {package_manager!r} in {config_path} "
            f"(expected one of: {supported})"
        )

    return ProjectConfig(package_manager=package_manager)


def install_command(package_manager: str, packages: list[str]) -> list[str]:
    """Build the command that installs `packages` as dependencies.

    Example:
        >>> install_command("npm", ["date-fns", "lucide-react"])
        ['npm', 'install', 'date-fns', 'lucide-react', '--save']
        >>> install_command("pnpm", ["date-fns"])
        ['pnpm', 'add', 'date-fns']
    """
    command = [*PACKAGE_MANAGER_COMMANDS[package_manager], *packages]
    if package_manager == "npm":
        command.append("--save")
    return command
