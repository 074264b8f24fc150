"""Parsing, scheduling and formatting utilities for Pomodoro Planner."""

from pomodoro_planner.utils.cognitive import (
    determine_cognitive_load_type,
    determine_ideal_energy_level,
    enrich_task,
    estimate_task_complexity,
    generate_time_blocks,
    schedule_tasks,
)
from pomodoro_planner.utils.formatters import (
    _format_parsed_concise,
    _format_schedule_markdown,
    _format_time_blocks_markdown,
    generate_task_description,
)
from pomodoro_planner.utils.parsers import enhance_parsed_task, parse_task, parsed_to_task

__all__ = [
    "parse_task",
    "enhance_parsed_task",
    "parsed_to_task",
    "generate_task_description",
    "estimate_task_complexity",
    "determine_cognitive_load_type",
    "determine_ideal_energy_level",
    "enrich_task",
    "generate_time_blocks",
    "schedule_tasks",
    "_format_parsed_concise",
    "_format_schedule_markdown",
    "_format_time_blocks_markdown",
]
