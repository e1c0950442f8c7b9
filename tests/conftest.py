"""
Test fixtures for the projtrack test suite.

Provides:
- Temporary directory fixtures (isolated from the real ~/.projtrack.json)
- Mock data builders for creating test projects
- A CliRunner wired to a temporary data file
"""

import shutil
import tempfile
from datetime import date, timedelta
from pathlib import Path
from typing import Generator, List, Optional

import pytest
from click.testing import CliRunner

from projtrack.cli import cli
from projtrack.managers.storage_manager import StorageManager
from projtrack.models.project import Project


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation.

    Ensures tests don't modify the user's actual data file.
    """
    temp_path = Path(tempfile.mkdtemp(prefix="projtrack_test_"))
    yield temp_path
    # Cleanup
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def data_file(temp_dir: Path) -> Path:
    """Path to a data file that doesn't exist yet."""
    return temp_dir / "projtrack.json"


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Path to a config file that doesn't exist yet."""
    return temp_dir / "config.json"


@pytest.fixture(autouse=True)
def isolated_home(temp_dir: Path, monkeypatch) -> None:
    """Point HOME and the env overrides away from the real user files."""
    monkeypatch.setenv("HOME", str(temp_dir))
    monkeypatch.delenv("PROJTRACK_FILE", raising=False)
    monkeypatch.delenv("PROJTRACK_CONFIG", raising=False)


@pytest.fixture
def today() -> date:
    return date.today()


# =============================================================================
# Mock Data Builders
# =============================================================================


class MockDataBuilder:
    """Helper class for building mock projects for testing."""

    @staticmethod
    def create_project(
        id: int = 1,
        name: str = "Test Project",
        due_in: int = 10,
        started_ago: int = 5,
        done: bool = False,
        tags: Optional[List[str]] = None,
        notes: str = "",
        today: Optional[date] = None,
    ) -> Project:
        """Create a project with dates relative to today."""
        today = today or date.today()
        return Project(
            id=id,
            name=name,
            start_date=today - timedelta(days=started_ago),
            due_date=today + timedelta(days=due_in),
            done=done,
            tags=tags or [],
            notes=notes,
        )


@pytest.fixture
def mock_data() -> MockDataBuilder:
    """Provide mock data builder for test project creation."""
    return MockDataBuilder()


@pytest.fixture
def sample_projects(mock_data: MockDataBuilder, today: date) -> List[Project]:
    """A small project list stored in append order (not due-date order).

    Contents:
        #1 Website Redesign  due in 10 days, tags work,web
        #2 Tax Return        overdue by 3 days, tag personal
        #3 Garden Shed       done, due in 1 day
        #4 FPGA Toolchain    due in 5 days, tag work, with notes
    """
    return [
        mock_data.create_project(1, "Website Redesign", due_in=10, tags=["work", "web"], today=today),
        mock_data.create_project(2, "Tax Return", due_in=-3, tags=["personal"], today=today),
        mock_data.create_project(3, "Garden Shed", due_in=1, done=True, today=today),
        mock_data.create_project(
            4, "FPGA Toolchain", due_in=5, tags=["work"],
            notes="Prototype flow with new board.", today=today,
        ),
    ]


@pytest.fixture
def populated_data_file(data_file: Path, sample_projects: List[Project]) -> Path:
    """A data file holding the sample projects."""
    StorageManager(data_file).save(sample_projects)
    return data_file


# =============================================================================
# CLI Fixtures
# =============================================================================


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def invoke(runner: CliRunner, data_file: Path):
    """Invoke the CLI against the temporary data file."""

    def _invoke(*args: str):
        return runner.invoke(cli, ["--file", str(data_file), *args])

    return _invoke
