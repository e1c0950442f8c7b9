"""
Command-line interface for projtrack.

Single entry point: loads the project list, runs one command, and saves the
list back when the command changed it.
"""
import logging
from pathlib import Path

import click

from projtrack.commands.common import CliContext
from projtrack.commands.crud import add, done, show
from projtrack.commands.status import list_projects
from projtrack.constants import CONFIG_FILE_ENVVAR, DATA_FILE_ENVVAR


class ProjtrackGroup(click.Group):
    """Command group that reports usage errors with exit code 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.group(
    cls=ProjtrackGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "-f",
    "--file",
    "data_file",
    type=click.Path(path_type=Path),
    envvar=DATA_FILE_ENVVAR,
    help="Data file (default: ~/.projtrack.json).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    envvar=CONFIG_FILE_ENVVAR,
    help="Config file (default: ~/.projtrack.config.json).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx, data_file, config_path, verbose):
    """A command-line tracker for projects with start and due dates.

    \b
    Examples:
      projtrack add -n "FPGA Toolchain" -s 2025-11-21 -d 2025-12-10 \\
        -t "work,fpga" --notes "Prototype flow with new board."
      projtrack list
      projtrack list --status overdue
      projtrack list --status active --tag work
      projtrack done -i 1
      projtrack show -i 1
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliContext(data_file=data_file, config_path=config_path)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(1)


@cli.command(name="help")
@click.pass_context
def help_command(ctx):
    """Show this usage text."""
    click.echo(ctx.parent.get_help())


cli.add_command(add)
cli.add_command(list_projects)
cli.add_command(done)
cli.add_command(show)


if __name__ == '__main__':
    cli()
