"""Init command: bootstrap a Next.js project ready for components."""

import shutil
from pathlib import Path

import click

from suiflow.cli.error_boundary import cli_error_boundary
from suiflow.core.context import SuiflowContext
from suiflow.core.local_modules import find_module_template
from suiflow.core.packages import read_declared_dependencies

UTILS_MODULE = "lib/utils"


def has_nextjs(project_root: Path) -> bool:
    """Whether package.json lists `next` under `dependencies`.

    `devDependencies` is not consulted; a project that only has `next` there
    still gets a fresh app.
    """
    declared = read_declared_dependencies(project_root, sections=("dependencies",))
    return declared is not None and "next" in declared


def create_utils_module(ctx: SuiflowContext, project_root: Path) -> tuple[Path, bool]:
    """Copy the bundled lib/utils template into the project if absent.

    Returns:
        Destination path, and whether it was created (False if it already existed)

    Raises:
        FileNotFoundError: If the bundled template is missing
    """
    template_path = find_module_template(ctx.project_templates_dir, UTILS_MODULE)
    if template_path is None:
        raise FileNotFoundError(f"Template for {UTILS_MODULE} not found")

    destination = project_root / f"{UTILS_MODULE}{template_path.suffix}"
    if destination.exists():
        return destination, False

    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(template_path, destination)
    return destination, True


@click.command("init")
@click.option(
    "--name",
    default="my-app",
    show_default=True,
    help="Directory name for a newly created Next.js app",
)
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: SuiflowContext, name: str) -> None:
    """Initialize your project.

    Creates a Next.js app with TypeScript, Tailwind and ESLint unless the
    current package.json already depends on `next`, then adds lib/utils.ts
    with the `cn` class-name helper that components import.
    """
    project_root = ctx.cwd

    if has_nextjs(project_root):
        ctx.feedback.info("Next.js is already set up in this project.")
    else:
        if ctx.shell.get_installed_tool_path("npx") is None:
            ctx.feedback.error("Error: npx not found. Install Node.js and try again.")
            raise SystemExit(1)

        command = [
            "npx",
            "create-next-app@latest",
            name,
            "--typescript",
            "--tailwind",
            "--eslint",
        ]
        try:
            ctx.shell.run_command(command, cwd=project_root, operation_context="create Next.js app")
        except RuntimeError as e:
            ctx.feedback.error(f"Error: {e}")
            raise SystemExit(1) from e
        project_root = project_root / name

    utils_path, created = create_utils_module(ctx, project_root)
    relative = utils_path.relative_to(project_root)
    if created:
        ctx.feedback.success(f"Created {relative}")
    else:
        ctx.feedback.info(f"{relative} already exists")

    ctx.feedback.success("Your project is now fully set up. You can now add components!")
