"""
Storage manager for the projtrack CLI.

Handles loading and saving the JSON data file.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from projtrack.constants import default_data_path
from projtrack.exceptions import StorageError
from projtrack.models.files import ProjectsFile
from projtrack.models.project import Project

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Manages persistence of the project list to a single JSON file.

    The whole list is read on load and the whole list is rewritten on save.
    Writes are atomic to prevent a failed save from truncating the file.
    """

    def __init__(self, data_file: Optional[Path] = None) -> None:
        """
        Initialize the StorageManager with a data file path.

        Args:
            data_file: Path to the JSON data file. Defaults to ~/.projtrack.json.
        """
        self.data_file = data_file if data_file else default_data_path()

    def _atomic_write(self, data: list) -> None:
        """Write data to the data file atomically.

        Raises:
            StorageError: If writing to file fails.
        """
        directory = self.data_file.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=directory, prefix=".tmp_projtrack_", suffix=".json"
            )
        except OSError as e:
            raise StorageError(f"Failed to write to {self.data_file}: {e}")

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as temp_file:
                json.dump(data, temp_file, indent=2)
            os.replace(temp_path, self.data_file)
        except (OSError, TypeError, ValueError) as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise StorageError(f"Failed to write to {self.data_file}: {e}")

    def load(self) -> List[Project]:
        """Load the data file. A missing file yields an empty list.

        Raises:
            StorageError: If the file can't be read or doesn't hold a valid project list.
        """
        if not self.data_file.exists():
            logger.debug("No data file at %s, starting empty", self.data_file)
            return []

        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            projects = ProjectsFile.model_validate(data).root
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise StorageError(f"Failed to load {self.data_file}: {e}")
        except OSError as e:
            raise StorageError(f"Failed to read {self.data_file}: {e}")

        logger.debug("Loaded %d project(s) from %s", len(projects), self.data_file)
        return projects

    def save(self, projects: List[Project]) -> None:
        """Serialize the full project list and overwrite the data file."""
        self._atomic_write(ProjectsFile(projects).model_dump(mode="json"))
        logger.debug("Saved %d project(s) to %s", len(projects), self.data_file)
