"""
Shared helpers for projtrack commands.

Holds the per-invocation settings resolved by the top-level group and the
conversion of domain errors into click errors.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from projtrack.constants import VALIDATION_ID_REQUIRED
from projtrack.core import ProjtrackCore
from projtrack.exceptions import ProjtrackError, ValidationError
from projtrack.models.status import ProjectStatus
from projtrack.utils import parse_id


@dataclass
class CliContext:
    """Settings passed from the top-level group to every command."""

    data_file: Optional[Path] = None
    config_path: Optional[Path] = None


def load_core(ctx: click.Context) -> ProjtrackCore:
    """Build a ProjtrackCore from the group's settings.

    Raises:
        click.ClickException: If the data or config file can't be loaded.
    """
    settings = ctx.find_object(CliContext) or CliContext()
    try:
        core = ProjtrackCore(data_file=settings.data_file, config_path=settings.config_path)
        # Surface config errors before any output is produced.
        core.settings
    except ProjtrackError as e:
        raise click.ClickException(str(e))
    return core


def require_id(id_string: Optional[str]) -> int:
    """Validate the --id option shared by done and show."""
    if not id_string:
        raise ValidationError(VALIDATION_ID_REQUIRED)
    project_id = parse_id(id_string)
    if project_id is None:
        raise ValidationError(f"Invalid ID: {id_string!r} is not an integer")
    return project_id


def styled_status(status: ProjectStatus, width: int = 0) -> str:
    """Render a status label in its color, optionally padded to width."""
    return click.style(status.label.ljust(width), fg=status.color)
