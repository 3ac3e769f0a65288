"""Add command: copy catalog components into the current project."""

import click

from suiflow.cli.error_boundary import cli_error_boundary
from suiflow.core.context import SuiflowContext
from suiflow.core.installer import install_requested


@click.command("add")
@click.argument("components", nargs=-1)
@click.pass_obj
@cli_error_boundary
def add_cmd(ctx: SuiflowContext, components: tuple[str, ...]) -> None:
    """Add components to your project.

    Copies each component into components/ui (src/components/ui when the
    project has a src/ directory and no app/ directory), along with the
    components and @/ utility modules it imports, then installs any npm
    packages the project does not already declare.

    With no COMPONENTS, lists the catalog and asks which to add.

    Examples:

        # Add one component and its dependencies
        suiflow add balance-display

        # Choose interactively
        suiflow add
    """
    names = list(components)
    if not names:
        names = ctx.prompter.select_components(ctx.catalog)
        if not names:
            ctx.feedback.info("No components selected.")
            return

    install_requested(ctx, names)
