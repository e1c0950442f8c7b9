"""
Managers for the projtrack CLI.

- StorageManager: Persistence of the project list to the JSON data file
- ProjectManager: Id assignment, lookup, completion and filtering
"""

from projtrack.managers.storage_manager import StorageManager
from projtrack.managers.project_manager import (
    ProjectManager,
    matches_status,
    next_id,
    sorted_by_due,
)

__all__ = [
    "StorageManager",
    "ProjectManager",
    "matches_status",
    "next_id",
    "sorted_by_due",
]
