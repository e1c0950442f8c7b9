"""
ProjectManager for the projtrack CLI.

Operations over the in-memory project list: id assignment, lookup,
completion, filtering and ordering.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from projtrack.constants import (
    STATUS_FILTER_ACTIVE,
    STATUS_FILTER_ALL,
    STATUS_FILTER_DONE,
    STATUS_FILTER_OVERDUE,
    VALID_STATUS_FILTERS,
)
from projtrack.exceptions import NotFoundError, ValidationError
from projtrack.models.project import Project
from projtrack.models.status import is_overdue

logger = logging.getLogger(__name__)


def next_id(projects: Iterable[Project]) -> int:
    """Return max(existing ids) + 1, or 1 for an empty collection."""
    return max((p.id for p in projects), default=0) + 1


def sorted_by_due(projects: Iterable[Project]) -> List[Project]:
    """Order projects by due date, ties broken by id."""
    return sorted(projects, key=lambda p: (p.due_date, p.id))


def matches_status(project: Project, status: str, today: date) -> bool:
    """Check a project against a list status filter (all|active|done|overdue)."""
    status = (status or STATUS_FILTER_ALL).lower()
    if status == STATUS_FILTER_ACTIVE:
        return not project.done
    if status == STATUS_FILTER_DONE:
        return project.done
    if status == STATUS_FILTER_OVERDUE:
        return is_overdue(project, today)
    return True


class ProjectManager:
    """
    Manages the in-memory project list.

    The list keeps append order; callers sort for display.

    Usage:
        manager = ProjectManager(storage.load())
        project = manager.add("FPGA Toolchain", due_date, today=date.today())
        storage.save(manager.projects)
    """

    def __init__(self, projects: Optional[List[Project]] = None) -> None:
        self.projects: List[Project] = projects if projects is not None else []

    def next_id(self) -> int:
        return next_id(self.projects)

    def add(
        self,
        name: str,
        due_date: date,
        today: date,
        start_date: Optional[date] = None,
        tags: Optional[List[str]] = None,
        notes: Optional[str] = None,
    ) -> Project:
        """
        Create a project with the next id and append it.

        Args:
            name: Project name (must not be blank).
            due_date: Due date.
            today: Current date, used when start_date is omitted.
            start_date: Start date (defaults to today).
            tags: Tags in display order.
            notes: Free-form notes.

        Returns:
            The new Project.

        Raises:
            ValidationError: If the name is blank.
        """
        if not name or not name.strip():
            raise ValidationError("Project name must not be blank.")

        try:
            project = Project(
                id=self.next_id(),
                name=name,
                start_date=start_date or today,
                due_date=due_date,
                tags=list(tags or []),
                notes=notes or "",
            )
        except PydanticValidationError as e:
            raise ValidationError(str(e))

        self.projects.append(project)
        logger.debug("Assigned id %d to project %r", project.id, project.name)
        return project

    def get(self, project_id: int) -> Project:
        """Look up a project by id.

        Raises:
            NotFoundError: If no project has that id.
        """
        for project in self.projects:
            if project.id == project_id:
                return project
        raise NotFoundError(f"No project with ID {project_id}")

    def mark_done(self, project_id: int) -> Project:
        """Set the done flag on a project. Marking a done project again is a no-op."""
        project = self.get(project_id)
        project.done = True
        return project

    def filter(self, status: str, tag: str, today: date) -> List[Project]:
        """Return projects matching the status and tag filters, in stored order."""
        if status and status.lower() not in VALID_STATUS_FILTERS:
            logger.warning("Unknown status filter %r, showing all projects", status)
        return [
            p for p in self.projects
            if matches_status(p, status, today) and p.has_tag(tag)
        ]
