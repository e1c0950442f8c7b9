"""
Status classification for projects.

Maps a project's due date and done flag to an urgency tier, a display label
and a click color name.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from projtrack.constants import DEFAULT_URGENT_DAYS, DEFAULT_WARNING_DAYS
from projtrack.models.project import Project


class Urgency(str, Enum):
    """Urgency tiers, from finished to most pressing."""

    DONE = "done"
    NORMAL = "normal"
    WARNING = "warning"
    URGENT = "urgent"
    DUE_TODAY = "due-today"
    OVERDUE = "overdue"


URGENCY_COLORS = {
    Urgency.DONE: "cyan",
    Urgency.NORMAL: "green",
    Urgency.WARNING: "yellow",
    Urgency.URGENT: "red",
    Urgency.DUE_TODAY: "red",
    Urgency.OVERDUE: "red",
}


@dataclass(frozen=True)
class ProjectStatus:
    """Derived status of a project on a given day."""

    urgency: Urgency
    label: str
    days_left: int

    @property
    def color(self) -> str:
        return URGENCY_COLORS[self.urgency]


def days_until_due(project: Project, today: date) -> int:
    """Whole calendar days from today to the due date (negative when past)."""
    return (project.due_date - today).days


def classify(
    project: Project,
    today: date,
    urgent_days: int = DEFAULT_URGENT_DAYS,
    warning_days: int = DEFAULT_WARNING_DAYS,
) -> ProjectStatus:
    """
    Classify a project's urgency.

    Args:
        project: The project to classify.
        today: The current calendar date.
        urgent_days: Inclusive upper bound of the urgent tier.
        warning_days: Inclusive upper bound of the warning tier.

    Returns:
        ProjectStatus with tier, label and days remaining.
    """
    days = days_until_due(project, today)

    if project.done:
        return ProjectStatus(Urgency.DONE, "DONE", days)
    if days < 0:
        return ProjectStatus(Urgency.OVERDUE, f"OVERDUE ({-days} days ago)", days)
    if days == 0:
        return ProjectStatus(Urgency.DUE_TODAY, "DUE TODAY", days)
    if days <= urgent_days:
        return ProjectStatus(Urgency.URGENT, f"DUE IN {days} DAYS", days)
    if days <= warning_days:
        return ProjectStatus(Urgency.WARNING, f"DUE IN {days} DAYS", days)
    return ProjectStatus(Urgency.NORMAL, f"DUE IN {days} DAYS", days)


def is_overdue(project: Project, today: date) -> bool:
    """A project is overdue when it is not done and its due date is before today."""
    return not project.done and project.due_date < today
