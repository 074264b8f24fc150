"""Input models for Pomodoro Planner tools."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pomodoro_planner.enums import Chronotype, Priority, ResponseFormat
from pomodoro_planner.models.schedule import CalendarEvent
from pomodoro_planner.models.task import CognitiveTask

# ============================================================================
# Parsing Tool Input Models
# ============================================================================


class ParseTaskInput(BaseModel):
    """Input model for parsing a natural-language task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(
        ...,
        description="Free-text task, e.g. 'Finish report by tomorrow at 5pm #work ~2 !'",
        max_length=1000,
    )
    enhance: bool = Field(
        default=False,
        description=(
            "Also infer effort from durations ('2 hours'), priority from phrases ('asap') "
            "and category from keywords"
        ),
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class ClassifyTaskInput(BaseModel):
    """Input model for classifying a task's cognitive demands."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., description="Task title", min_length=1, max_length=1000)
    description: str | None = Field(default=None, description="Longer task description")
    priority: Priority = Field(default=Priority.MEDIUM, description="Task priority: high, medium, low")
    category: str | None = Field(default=None, description="Task category, e.g. 'design'")
    estimated_pomodoros: int | None = Field(default=None, description="Estimated pomodoros", ge=1, le=100)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


# ============================================================================
# Scheduling Tool Input Models
# ============================================================================


class TimeBlocksInput(BaseModel):
    """Input model for generating a day's time blocks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    day: date = Field(..., description="Day to plan (YYYY-MM-DD)")
    chronotype: Chronotype | None = Field(
        default=None,
        description="early-bird, intermediate or night-owl; defaults to the configured chronotype",
    )
    busy: list[CalendarEvent] = Field(
        default_factory=list,
        description="Existing events; overlapping blocks are marked busy",
        max_length=200,
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class ScheduleInput(TimeBlocksInput):
    """Input model for scheduling tasks into a day."""

    tasks: list[CognitiveTask] = Field(
        ...,
        description="Tasks with id, title, status and priority; cognitive fields are optional",
        min_length=1,
        max_length=100,
    )
