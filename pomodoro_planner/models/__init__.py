"""Pydantic models for Pomodoro Planner."""

from pomodoro_planner.models.inputs import (
    ClassifyTaskInput,
    ParseTaskInput,
    ScheduleInput,
    TimeBlocksInput,
)
from pomodoro_planner.models.schedule import (
    CalendarEvent,
    CognitiveProfile,
    ScheduledTask,
    TimeBlock,
)
from pomodoro_planner.models.task import CognitiveTask, ParsedTaskData, Task

__all__ = [
    # Task models
    "Task",
    "CognitiveTask",
    "ParsedTaskData",
    # Scheduling models
    "CalendarEvent",
    "TimeBlock",
    "ScheduledTask",
    "CognitiveProfile",
    # Tool input models
    "ParseTaskInput",
    "ClassifyTaskInput",
    "TimeBlocksInput",
    "ScheduleInput",
]
