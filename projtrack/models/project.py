"""
Project model for the projtrack CLI.

A single tracked project as stored in the JSON data file.
"""

from datetime import date, datetime
from typing import Any, List

from pydantic import BaseModel, Field, field_validator, model_serializer


class Project(BaseModel):
    """
    A tracked project with dates and a done flag.

    Fields:
    - id: Unique integer identifier, assigned as max(existing) + 1
    - name: Project name
    - start_date / due_date: Calendar dates, stored as YYYY-MM-DD
    - done: Completion flag, only ever set to True
    - tags: Ordered list of tags (omitted from JSON when empty)
    - notes: Free-form notes (omitted from JSON when empty)
    """

    id: int
    name: str
    start_date: date
    due_date: date
    done: bool = False
    tags: List[str] = Field(default_factory=list)
    notes: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names must not be blank."""
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v

    @field_validator("start_date", "due_date", mode="before")
    @classmethod
    def keep_calendar_date(cls, v: Any) -> Any:
        """Accept full timestamps (older data files) and keep only the date."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v

    @model_serializer(mode="wrap")
    def omit_empty_optionals(self, handler) -> dict:
        data = handler(self)
        if not data.get("tags"):
            data.pop("tags", None)
        if not data.get("notes"):
            data.pop("notes", None)
        return data

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag match. An empty tag matches every project."""
        if not tag:
            return True
        return any(t.casefold() == tag.casefold() for t in self.tags)
