import click

from suiflow import __version__
from suiflow.cli.commands.add import add_cmd
from suiflow.cli.commands.init import init_cmd
from suiflow.cli.error_boundary import cli_error_boundary
from suiflow.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show debug logging (also: SUIFLOW_DEBUG=1)")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, debug: bool) -> None:
    """Add Sui blockchain UI components to your Next.js project."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


cli.add_command(add_cmd)
cli.add_command(init_cmd)


def main() -> None:
    """CLI entry point used by the `suiflow` console script."""
    cli()
