"""Core task models for Pomodoro Planner."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pomodoro_planner.enums import (
    CognitiveLoadType,
    EnergyLevel,
    Priority,
    RecurringPattern,
    TaskComplexity,
    TaskStatus,
)


class ParsedTaskData(BaseModel):
    """Structured attributes extracted from a free-text task description.

    Undetected attributes stay ``None``; use ``to_dict()`` to get a mapping
    that only carries the attributes that were actually found.
    """

    title: str = ""
    due_date: datetime | None = None
    priority: Priority | None = None
    estimated_pomodoros: int | None = Field(default=None, ge=1)
    tags: list[str] | None = None
    category: str | None = None
    is_recurring: bool | None = None
    recurring_pattern: RecurringPattern | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return only the detected attributes, in JSON-friendly form."""
        return self.model_dump(mode="json", exclude_none=True)


class Task(BaseModel):
    """Model representing a task as stored by the surrounding application."""

    model_config = ConfigDict(extra="allow")

    id: int | str
    title: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: Priority = Priority.MEDIUM
    description: str | None = None
    category: str | None = None
    estimated_pomodoros: int | None = Field(default=None, ge=1)
    due_date: datetime | None = None
    tags: list[str] | None = None


class CognitiveTask(Task):
    """A task carrying the cognitive metadata used for scheduling."""

    complexity: TaskComplexity | None = None
    cognitive_load_type: CognitiveLoadType | None = None
    ideal_energy_level: EnergyLevel | None = None
    estimated_duration: int | None = Field(default=None, ge=1, description="Minutes")
