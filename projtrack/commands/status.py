"""
List command for the projtrack CLI.

Displays projects as a status table sorted by due date.
"""

import json

import click

from projtrack.commands.common import load_core, styled_status
from projtrack.constants import (
    NO_MATCHES_MESSAGE,
    NO_PROJECTS_MESSAGE,
    STATUS_FILTER_ALL,
)
from projtrack.utils import format_date, truncate


def display_table(core, projects):
    """Print the fixed-width status table with colored status cells."""
    name_width = core.settings.name_width
    tags_width = core.settings.tags_width

    header = (
        f"{'ID':<3} {'NAME':<{name_width}} {'START':<10} {'DUE':<10} "
        f"{'STATUS':<20} {'TAGS'}"
    )
    click.echo(header)
    click.echo("-" * (len(header) + tags_width - len("TAGS")))

    for project in projects:
        status = core.status_of(project)
        click.echo(
            f"{project.id:<3} "
            f"{truncate(project.name, name_width):<{name_width}} "
            f"{format_date(project.start_date):<10} "
            f"{format_date(project.due_date):<10} "
            f"{styled_status(status, 20)} "
            f"{truncate(','.join(project.tags), tags_width)}".rstrip()
        )


def get_table_data(core, projects):
    """Get list data in a structured format for JSON output."""
    rows = []
    for project in projects:
        status = core.status_of(project)
        row = project.model_dump(mode="json")
        row["status"] = status.urgency.value
        row["status_label"] = status.label
        rows.append(row)
    return rows


@click.command(name="list")
@click.option(
    "--status",
    default=STATUS_FILTER_ALL,
    show_default=True,
    help="Status filter: all|active|done|overdue.",
)
@click.option("--tag", default="", help="Filter by tag (case-insensitive).")
@click.option(
    "-j",
    "--json",
    "json_output",
    is_flag=True,
    help="Output the list in JSON format.",
)
@click.pass_context
def list_projects(ctx, status, tag, json_output):
    """List projects sorted by due date."""
    core = load_core(ctx)
    projects = core.list_projects(status=status, tag=tag)

    if json_output:
        click.echo(json.dumps(get_table_data(core, projects), indent=2))
        return

    if not core.projects:
        click.echo(NO_PROJECTS_MESSAGE)
        return
    if not projects:
        click.echo(NO_MATCHES_MESSAGE)
        return

    display_table(core, projects)
