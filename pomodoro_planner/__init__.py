"""
Pomodoro Planner.

Parses free-text task descriptions into structured attributes and schedules
tasks into a day's time blocks by priority and energy fit. The same
operations are exposed as MCP tools.
"""

# Re-export enums
from pomodoro_planner.enums import (
    Chronotype,
    CognitiveLoadType,
    EnergyLevel,
    Priority,
    RecurringPattern,
    ResponseFormat,
    TaskComplexity,
    TaskStatus,
)

# Re-export models
from pomodoro_planner.models import (
    CalendarEvent,
    ClassifyTaskInput,
    CognitiveProfile,
    CognitiveTask,
    ParsedTaskData,
    ParseTaskInput,
    ScheduledTask,
    ScheduleInput,
    Task,
    TimeBlock,
    TimeBlocksInput,
)

# Re-export MCP server instance
from pomodoro_planner.server import mcp

# Re-export tools
from pomodoro_planner.tools import (
    planner_classify_task,
    planner_parse_task,
    planner_schedule,
    planner_time_blocks,
)

# Re-export utilities
from pomodoro_planner.utils import (
    determine_cognitive_load_type,
    determine_ideal_energy_level,
    enhance_parsed_task,
    enrich_task,
    estimate_task_complexity,
    generate_task_description,
    generate_time_blocks,
    parse_task,
    parsed_to_task,
    schedule_tasks,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    "Priority",
    "TaskComplexity",
    "EnergyLevel",
    "CognitiveLoadType",
    "Chronotype",
    "RecurringPattern",
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
    # Parser
    "parse_task",
    "enhance_parsed_task",
    "parsed_to_task",
    "generate_task_description",
    # Scheduler
    "estimate_task_complexity",
    "determine_cognitive_load_type",
    "determine_ideal_energy_level",
    "enrich_task",
    "generate_time_blocks",
    "schedule_tasks",
    # Tools
    "planner_parse_task",
    "planner_classify_task",
    "planner_time_blocks",
    "planner_schedule",
    # MCP server instance
    "mcp",
]
