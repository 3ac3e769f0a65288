"""Dependency-aware component installation.

install_requested() handles the components a user asked for. Each component's
template is copied into the project, its imports are classified, its local
modules are copied, and the catalog components it imports are installed
through install_dependencies(). All levels share one InstallState, so a
component reached several times is copied and expanded once, and the
external packages of the whole tree are installed together at the end.
"""

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from suiflow.catalog import template_filename, to_pascal_case
from suiflow.core.context import SuiflowContext
from suiflow.core.imports import classify_imports
from suiflow.core.local_modules import copy_local_modules
from suiflow.core.packages import ensure_packages_installed

logger = logging.getLogger(__name__)


class OverwritePolicy(Enum):
    """What to do when a component file already exists in the project."""

    PROMPT = "prompt"
    FORCE = "force"


@dataclass
class InstallReport:
    """Outcome of one top-level installation, for output and tests."""

    added: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    local_modules: list[str] = field(default_factory=list)
    installed_packages: list[str] = field(default_factory=list)

    @property
    def copied(self) -> list[str]:
        """Components whose files were written, requested ones first."""
        return [*self.added, *self.dependencies]


@dataclass
class InstallState:
    """Mutable state shared by every level of one top-level installation.

    Attributes:
        destination: Directory component files are copied into
        processed: Components already handled, marked before any I/O
        required_packages: External packages imported by copied components
        report: Accumulated outcomes
    """

    destination: Path
    processed: set[str] = field(default_factory=set)
    required_packages: set[str] = field(default_factory=set)
    report: InstallReport = field(default_factory=InstallReport)


def resolve_destination(project_root: Path) -> Path:
    """Pick the directory component files are copied into.

    Next.js app-router projects (`app/`) and projects without `src/` use
    `components/ui` at the project root; projects with `src/` use
    `src/components/ui`.
    """
    if (project_root / "app").exists():
        return project_root / "components" / "ui"
    if (project_root / "src").exists():
        return project_root / "src" / "components" / "ui"
    return project_root / "components" / "ui"


def install_requested(ctx: SuiflowContext, names: Sequence[str] | str) -> InstallReport:
    """Install components a user asked for, with their dependencies.

    Existing component files are only overwritten after confirmation. Missing
    npm packages are installed once, after every component is handled.

    Args:
        ctx: Application context
        names: Component name or names, processed in order

    Returns:
        InstallReport describing what happened
    """
    if isinstance(names, str):
        names = [names]

    destination = resolve_destination(ctx.cwd)
    logger.debug("Installing %s into %s", list(names), destination)
    destination.mkdir(parents=True, exist_ok=True)

    state = InstallState(destination=destination)
    for name in names:
        _install_component(ctx, name, state, OverwritePolicy.PROMPT)

    state.report.installed_packages = ensure_packages_installed(ctx, state.required_packages)
    return state.report


def install_dependencies(ctx: SuiflowContext, names: Sequence[str], state: InstallState) -> None:
    """Install components discovered as imports of another component.

    Dependencies are always overwritten so they stay consistent with the
    component that needs them. Components already in `state.processed` are
    skipped silently.
    """
    for name in names:
        _install_component(ctx, name, state, OverwritePolicy.FORCE)


def _install_component(
    ctx: SuiflowContext, name: str, state: InstallState, policy: OverwritePolicy
) -> None:
    if name in state.processed:
        if policy is OverwritePolicy.PROMPT:
            ctx.feedback.info(f"Component {name} is already installed.")
        return

    state.processed.add(name)

    display_name = to_pascal_case(name)
    template_path = ctx.components_dir / template_filename(name)
    destination_path = state.destination / template_filename(name)

    if name not in ctx.catalog or not template_path.is_file():
        ctx.feedback.error(f"Component {display_name} not found.")
        state.report.not_found.append(name)
        return

    if destination_path.exists() and policy is OverwritePolicy.PROMPT:
        if not ctx.prompter.confirm_overwrite(display_name):
            ctx.feedback.info(f"Skipped {display_name}.")
            state.report.skipped.append(name)
            return

    try:
        shutil.copyfile(template_path, destination_path)
    except OSError as e:
        ctx.feedback.error(f"Failed to copy {display_name}: {e}")
        state.report.failed.append(name)
    else:
        if policy is OverwritePolicy.PROMPT:
            ctx.feedback.success(f"{display_name} component added successfully.")
            state.report.added.append(name)
        else:
            ctx.feedback.success(f"Dependency {display_name} installed automatically.")
            state.report.dependencies.append(name)

    try:
        source_text = template_path.read_text(encoding="utf-8")
    except OSError as e:
        ctx.feedback.error(f"Failed to read {display_name} template: {e}")
        return

    imports = classify_imports(source_text, ctx.catalog)
    state.required_packages.update(imports.external_packages)

    copied_modules = copy_local_modules(
        source_text, ctx.cwd, ctx.project_templates_dir, ctx.feedback
    )
    if copied_modules:
        ctx.feedback.info(f"Copied utility files: {', '.join(copied_modules)}")
        state.report.local_modules.extend(copied_modules)

    if imports.internal_components:
        ctx.feedback.info(
            f"Component {display_name} requires: {', '.join(imports.internal_components)}"
        )
        install_dependencies(ctx, imports.internal_components, state)
