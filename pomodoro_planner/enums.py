"""Enums for Pomodoro Planner."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per item, for chaining
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class TaskStatus(str, Enum):
    """Task lifecycle status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Priority(str, Enum):
    """Task priority levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskComplexity(str, Enum):
    """How demanding a task is."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EnergyLevel(str, Enum):
    """Energy level of a person at a time of day, or needed by a task."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CognitiveLoadType(str, Enum):
    """Kind of mental effort a task demands."""

    FOCUS = "focus"
    CREATIVITY = "creativity"
    DECISION_MAKING = "decision-making"
    LEARNING = "learning"
    ROUTINE = "routine"


class Chronotype(str, Enum):
    """Natural daily energy rhythm of a user."""

    EARLY_BIRD = "early-bird"
    INTERMEDIATE = "intermediate"
    NIGHT_OWL = "night-owl"


class RecurringPattern(str, Enum):
    """Recurrence detected in a task description."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"
