"""Adaptive scheduling MCP tools for Pomodoro Planner."""

import json

from mcp.types import ToolAnnotations

from pomodoro_planner.config import load_config
from pomodoro_planner.enums import ResponseFormat
from pomodoro_planner.models.inputs import ScheduleInput, TimeBlocksInput
from pomodoro_planner.models.schedule import CognitiveProfile, TimeBlock
from pomodoro_planner.models.task import CognitiveTask
from pomodoro_planner.server import mcp
from pomodoro_planner.utils.cognitive import enrich_task, generate_time_blocks, schedule_tasks
from pomodoro_planner.utils.formatters import (
    _format_block_range,
    _format_schedule_concise,
    _format_schedule_markdown,
    _format_time_blocks_markdown,
)


def _blocks_for(params: TimeBlocksInput) -> list[TimeBlock]:
    config = load_config()
    profile = CognitiveProfile.for_chronotype(params.chronotype or config.chronotype)
    return generate_time_blocks(params.day, profile, params.busy, config)


@mcp.tool(
    name="planner_time_blocks",
    annotations=ToolAnnotations(
        title="Day Time Blocks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def planner_time_blocks(params: TimeBlocksInput) -> str:
    """
    Show a working day split into 30-minute blocks with expected energy levels.

    USE THIS WHEN:
    - Checking which parts of a day are free and when energy peaks
    - Comparing chronotypes for the same day

    DO NOT USE WHEN:
    - You want tasks placed into the day → use planner_schedule instead

    Args:
        params: TimeBlocksInput with day, chronotype, busy events and response_format

    Returns:
        Blocks with time range, energy level and free/busy status
    """
    blocks = _blocks_for(params)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "day": params.day.isoformat(),
                "count": len(blocks),
                "free": sum(1 for b in blocks if b.available),
                "blocks": [b.model_dump(mode="json") for b in blocks],
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        lines = [f"{len(blocks)} block(s) | {params.day.isoformat()}"]
        for block in blocks:
            status = "" if block.available else " busy"
            lines.append(f"{_format_block_range(block)} {block.energy_level.value}{status}")
        return "\n".join(lines)

    return _format_time_blocks_markdown(blocks, f"Time Blocks for {params.day.isoformat()}")


@mcp.tool(
    name="planner_schedule",
    annotations=ToolAnnotations(
        title="Schedule Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def planner_schedule(params: ScheduleInput) -> str:
    """
    Place tasks into a day's free blocks by priority and energy fit.

    USE THIS WHEN:
    - Planning which task to work on when during a day
    - Fitting tasks around existing meetings

    HOW IT WORKS:
    - High priority tasks are placed first, then medium, then low
    - Each task gets the earliest free block matching its ideal energy level
    - Without a match it falls back to the nearest energy level
    - Tasks that find no free block are reported as not scheduled

    Args:
        params: ScheduleInput with day, tasks, chronotype, busy events and response_format

    Returns:
        Schedule of task-to-block assignments plus any unplaced tasks
    """
    config = load_config()
    blocks = _blocks_for(params)
    schedule = schedule_tasks(params.tasks, blocks, config)

    placed_ids = {item.task.id for item in schedule}
    unplaced: list[CognitiveTask] = [enrich_task(t, config) for t in params.tasks if t.id not in placed_ids]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "day": params.day.isoformat(),
                "scheduled": [item.model_dump(mode="json", exclude_none=True) for item in schedule],
                "unplaced": [t.model_dump(mode="json", exclude_none=True) for t in unplaced],
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return _format_schedule_concise(schedule, unplaced)

    return _format_schedule_markdown(schedule, unplaced, f"Schedule for {params.day.isoformat()}")
