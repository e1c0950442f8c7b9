"""
Add, done and show commands for the projtrack CLI.
"""
import json
from typing import Optional

import click

from projtrack.commands.common import load_core, require_id, styled_status
from projtrack.constants import (
    DATE_FORMAT_ERROR,
    VALIDATION_DUE_REQUIRED,
    VALIDATION_NAME_REQUIRED,
)
from projtrack.exceptions import NotFoundError, ProjtrackError, ValidationError
from projtrack.utils import format_date, parse_date, parse_tags


def _parse_date_option(value: str, label: str):
    parsed = parse_date(value)
    if parsed is None:
        raise ValidationError(f"Invalid {label} date {value!r}. {DATE_FORMAT_ERROR}")
    return parsed


def _display_project(core, project):
    """Display project details in human-readable format."""
    status = core.status_of(project)
    click.echo(f"Project #{project.id}")
    click.echo("-" * 50)
    click.echo(f"Name:    {project.name}")
    click.echo(f"Start:   {format_date(project.start_date)}")
    click.echo(f"Due:     {format_date(project.due_date)}")
    click.echo(f"Status:  {styled_status(status)}")
    if project.tags:
        click.echo(f"Tags:    {', '.join(project.tags)}")
    else:
        click.echo("Tags:    (none)")
    if project.notes.strip():
        click.echo("Notes:")
        click.echo(project.notes)
    else:
        click.echo("Notes:   (none)")


@click.command(name="add")
@click.option("-n", "--name", help="Project name (required).")
@click.option("-s", "--start", help="Start date YYYY-MM-DD (defaults to today).")
@click.option("-d", "--due", help="Due date YYYY-MM-DD (required).")
@click.option("-t", "--tags", help="Comma-separated tags.")
@click.option("--notes", help="Notes/description.")
@click.pass_context
def add(ctx, name: Optional[str], start: Optional[str], due: Optional[str],
        tags: Optional[str], notes: Optional[str]):
    """Add a new project.

    Example:

        projtrack add -n "FPGA Toolchain" -s 2025-11-21 -d 2025-12-10 -t work,fpga
    """
    try:
        if not name or not name.strip():
            raise ValidationError(VALIDATION_NAME_REQUIRED)
        if not due:
            raise ValidationError(VALIDATION_DUE_REQUIRED)
        start_date = _parse_date_option(start, "start") if start else None
        due_date = _parse_date_option(due, "due")
    except ValidationError as e:
        raise click.ClickException(str(e))

    core = load_core(ctx)
    try:
        project = core.add_project(
            name=name,
            due_date=due_date,
            start_date=start_date,
            tags=parse_tags(tags),
            notes=notes,
        )
    except ValidationError as e:
        raise click.ClickException(f"Validation Error: {e}")
    except ProjtrackError as e:
        raise click.ClickException(f"Error saving projects: {e}")

    click.echo(
        f"Added project #{project.id}: {project.name} "
        f"(start: {format_date(project.start_date)}, due: {format_date(project.due_date)})"
    )
    if project.tags:
        click.echo(f"  Tags: {', '.join(project.tags)}")
    if project.notes.strip():
        click.echo(f"  Notes: {project.notes}")


@click.command(name="done")
@click.option("-i", "--id", "id_string", help="Project ID to mark as done (required).")
@click.pass_context
def done(ctx, id_string: Optional[str]):
    """Mark a project as done."""
    try:
        project_id = require_id(id_string)
    except ValidationError as e:
        raise click.ClickException(str(e))

    core = load_core(ctx)
    try:
        core.mark_done(project_id)
    except NotFoundError as e:
        raise click.ClickException(str(e))
    except ProjtrackError as e:
        raise click.ClickException(f"Error saving projects: {e}")

    click.echo(f"Marked project #{project_id} as done.")


@click.command(name="show")
@click.option("-i", "--id", "id_string", help="Project ID to show (required).")
@click.option("-j", "--json", "json_output", is_flag=True, help="Output in JSON format.")
@click.pass_context
def show(ctx, id_string: Optional[str], json_output: bool):
    """Show full details for a project."""
    try:
        project_id = require_id(id_string)
    except ValidationError as e:
        raise click.ClickException(str(e))

    core = load_core(ctx)
    try:
        project = core.get_project(project_id)
    except NotFoundError as e:
        raise click.ClickException(str(e))

    if json_output:
        status = core.status_of(project)
        item_dict = project.model_dump(mode="json")
        item_dict["status"] = status.urgency.value
        item_dict["status_label"] = status.label
        click.echo(json.dumps(item_dict, indent=2))
    else:
        _display_project(core, project)
