"""Application context with dependency injection."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from suiflow.catalog import (
    COMPONENTS,
    bundled_components_dir,
    bundled_project_templates_dir,
)
from suiflow.core.config import ProjectConfig, load_project_config
from suiflow.core.prompter import Prompter, RealPrompter
from suiflow.core.shell import RealShell, Shell
from suiflow.core.user_feedback import InteractiveFeedback, UserFeedback

DEBUG_ENV_VAR = "SUIFLOW_DEBUG"


@dataclass(frozen=True)
class SuiflowContext:
    """Immutable context holding all dependencies for suiflow operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Attributes:
        shell: Runs the package manager and project bootstrap commands
        prompter: Asks overwrite and selection questions
        feedback: User-facing output
        cwd: Consumer project directory (current working directory at invocation)
        config: Project configuration from suiflow.toml
        catalog: Installable component names
        components_dir: Directory with one `<PascalCase>.tsx` template per component
        project_templates_dir: Template subtree mirrored under the `@/` alias
        debug: Whether debug logging is enabled
    """

    shell: Shell
    prompter: Prompter
    feedback: UserFeedback
    cwd: Path
    config: ProjectConfig
    catalog: tuple[str, ...]
    components_dir: Path
    project_templates_dir: Path
    debug: bool

    @staticmethod
    def for_test(
        shell: Shell | None = None,
        prompter: Prompter | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        config: ProjectConfig | None = None,
        catalog: tuple[str, ...] | None = None,
        components_dir: Path | None = None,
        project_templates_dir: Path | None = None,
        debug: bool = False,
    ) -> "SuiflowContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes by default to avoid subprocess calls and terminal prompts.

        Args:
            shell: Optional Shell implementation. If None, creates FakeShell.
            prompter: Optional Prompter. If None, creates FakePrompter that declines overwrites.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            cwd: Project directory (defaults to Path("/test/default/cwd"))
            config: Optional ProjectConfig (defaults to npm)
            catalog: Component names (defaults to the bundled catalog)
            components_dir: Template directory (defaults to the bundled templates)
            project_templates_dir: `@/` template subtree (defaults to the bundled one)
            debug: Whether to enable debug mode (default False)

        Returns:
            SuiflowContext configured with provided values and test defaults

        Example:
            >>> from tests.fakes.shell import FakeShell
            >>> shell = FakeShell()
            >>> ctx = SuiflowContext.for_test(shell=shell, cwd=tmp_path)
        """
        from tests.fakes.prompter import FakePrompter
        from tests.fakes.shell import FakeShell
        from tests.fakes.user_feedback import FakeUserFeedback

        return SuiflowContext(
            shell=shell if shell is not None else FakeShell(),
            prompter=prompter if prompter is not None else FakePrompter(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            config=config if config is not None else ProjectConfig(),
            catalog=catalog if catalog is not None else COMPONENTS,
            components_dir=(
                components_dir if components_dir is not None else bundled_components_dir()
            ),
            project_templates_dir=(
                project_templates_dir
                if project_templates_dir is not None
                else bundled_project_templates_dir()
            ),
            debug=debug,
        )


def debug_requested(debug: bool) -> bool:
    """Whether debug output was asked for by flag or SUIFLOW_DEBUG."""
    return debug or bool(os.environ.get(DEBUG_ENV_VAR))


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def create_context(*, debug: bool) -> SuiflowContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Loads suiflow.toml from the current
    working directory and enables debug logging when requested.

    Args:
        debug: If True, enable debug logging (also enabled by SUIFLOW_DEBUG)

    Returns:
        SuiflowContext with real shell, prompts and bundled templates

    Raises:
        ValueError: If suiflow.toml is invalid
    """
    debug = debug_requested(debug)
    configure_logging(debug)

    cwd = Path.cwd()
    return SuiflowContext(
        shell=RealShell(),
        prompter=RealPrompter(),
        feedback=InteractiveFeedback(),
        cwd=cwd,
        config=load_project_config(cwd),
        catalog=COMPONENTS,
        components_dir=bundled_components_dir(),
        project_templates_dir=bundled_project_templates_dir(),
        debug=debug,
    )
