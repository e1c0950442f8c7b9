"""
Data models for the projtrack CLI.

Import models explicitly from their modules:
    from projtrack.models.project import Project
    from projtrack.models.status import Urgency, ProjectStatus, classify
    from projtrack.models.files import ProjectsFile, ConfigFile
"""
