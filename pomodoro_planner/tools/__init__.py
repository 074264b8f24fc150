"""MCP tool definitions for Pomodoro Planner."""

# Import all tools to register them with the MCP server
from pomodoro_planner.tools.core import planner_classify_task, planner_parse_task
from pomodoro_planner.tools.scheduling import planner_schedule, planner_time_blocks

__all__ = [
    # Parsing tools
    "planner_parse_task",
    "planner_classify_task",
    # Scheduling tools
    "planner_time_blocks",
    "planner_schedule",
]
