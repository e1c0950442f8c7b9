"""
ProjtrackCore - Core business logic for the projtrack CLI.

Loads the project list once, applies one operation, and writes the list back
when the operation mutated it.
"""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from projtrack.config import ConfigManager
from projtrack.managers import ProjectManager, StorageManager, sorted_by_due
from projtrack.models.files import ConfigFile
from projtrack.models.project import Project
from projtrack.models.status import ProjectStatus, classify

logger = logging.getLogger(__name__)


class ProjtrackCore:
    """
    Core class for project operations.

    Orchestrates:
    - StorageManager: Load/save of the data file
    - ProjectManager: Operations over the in-memory list
    - ConfigManager: Thresholds and display settings
    """

    def __init__(
        self,
        data_file: Optional[Path] = None,
        config_path: Optional[Path] = None,
        today: Optional[date] = None,
    ):
        """
        Initialize the core and load the project list.

        Args:
            data_file: Path to the JSON data file. Defaults to ~/.projtrack.json.
            config_path: Path to the config file. Defaults to ~/.projtrack.config.json.
            today: Date to classify against. Defaults to the current date.
        """
        self.storage = StorageManager(data_file)
        self.config = ConfigManager(config_path)
        self.today = today or date.today()
        self.project_manager = ProjectManager(self.storage.load())

    @property
    def projects(self) -> List[Project]:
        return self.project_manager.projects

    @property
    def settings(self) -> ConfigFile:
        return self.config.settings

    def _save(self) -> None:
        self.storage.save(self.projects)

    def add_project(
        self,
        name: str,
        due_date: date,
        start_date: Optional[date] = None,
        tags: Optional[List[str]] = None,
        notes: Optional[str] = None,
    ) -> Project:
        """Add a new project and save."""
        project = self.project_manager.add(
            name, due_date, self.today, start_date=start_date, tags=tags, notes=notes
        )
        self._save()
        logger.info("Added project #%d", project.id)
        return project

    def mark_done(self, project_id: int) -> Project:
        """Mark a project as done and save."""
        project = self.project_manager.mark_done(project_id)
        self._save()
        logger.info("Marked project #%d as done", project.id)
        return project

    def get_project(self, project_id: int) -> Project:
        return self.project_manager.get(project_id)

    def list_projects(self, status: str = "all", tag: str = "") -> List[Project]:
        """Filtered projects ordered by due date."""
        return sorted_by_due(self.project_manager.filter(status, tag, self.today))

    def status_of(self, project: Project) -> ProjectStatus:
        """Classify a project using the configured thresholds."""
        settings = self.settings
        return classify(
            project,
            self.today,
            urgent_days=settings.urgent_days,
            warning_days=settings.warning_days,
        )
