"""
File models for the projtrack CLI.

Models representing the structure of the JSON files projtrack reads and writes.
"""

from typing import List

from pydantic import BaseModel, RootModel, model_validator

from projtrack.constants import (
    DEFAULT_NAME_WIDTH,
    DEFAULT_TAGS_WIDTH,
    DEFAULT_URGENT_DAYS,
    DEFAULT_WARNING_DAYS,
)

from .project import Project


class ProjectsFile(RootModel[List[Project]]):
    """Model for the data file: a flat JSON array of projects in append order."""

    root: List[Project] = []

    @model_validator(mode="after")
    def check_unique_ids(self) -> "ProjectsFile":
        seen = set()
        for project in self.root:
            if project.id in seen:
                raise ValueError(f"Duplicate project id {project.id}")
            seen.add(project.id)
        return self


class ConfigFile(BaseModel):
    """Model for the config file.

    Thresholds and display settings. Every key is optional.
    """

    # Status thresholds
    urgent_days: int = DEFAULT_URGENT_DAYS
    warning_days: int = DEFAULT_WARNING_DAYS

    # Display settings
    name_width: int = DEFAULT_NAME_WIDTH
    tags_width: int = DEFAULT_TAGS_WIDTH

    @model_validator(mode="after")
    def check_thresholds(self) -> "ConfigFile":
        if self.urgent_days < 0:
            raise ValueError("urgent_days must not be negative")
        if self.warning_days < self.urgent_days:
            raise ValueError("warning_days must be >= urgent_days")
        if self.name_width < 4 or self.tags_width < 4:
            raise ValueError("column widths must be at least 4")
        return self
