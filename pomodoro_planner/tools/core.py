"""Parsing and classification MCP tools for Pomodoro Planner."""

import json

from mcp.types import ToolAnnotations

from pomodoro_planner.config import load_config
from pomodoro_planner.enums import ResponseFormat
from pomodoro_planner.models.inputs import ClassifyTaskInput, ParseTaskInput
from pomodoro_planner.models.task import Task
from pomodoro_planner.server import mcp
from pomodoro_planner.utils.cognitive import enrich_task
from pomodoro_planner.utils.formatters import (
    _format_cognitive_task_markdown,
    _format_parsed_concise,
    generate_task_description,
)
from pomodoro_planner.utils.parsers import enhance_parsed_task, parse_task


@mcp.tool(
    name="planner_parse_task",
    annotations=ToolAnnotations(
        title="Parse Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def planner_parse_task(params: ParseTaskInput) -> str:
    """
    Turn a free-text task into structured attributes.

    USE THIS WHEN:
    - A user types a task the way they would say it ("Call John on Friday #important")
    - You need due date, priority, estimate, tags, category or recurrence from text

    DO NOT USE WHEN:
    - You already have structured task fields → use planner_classify_task instead

    SYNTAX:
    - Priority: "#important", "#high", "!" (high), "#medium", "#low"
    - Estimate: "~3" or "~3 pomodoros"
    - Tags: "#word"; Category: "@word"
    - Due: "today", "tomorrow at 5pm", "next week", "Friday at 2:30pm", "12/24"
    - Recurrence: "every day", "every Monday", "every month", "every 3 days"
    - With enhance=true: "2 hours" or "45 min" (effort), "asap" or "can wait"
      (priority), "work" or "health" (category)

    Args:
        params: ParseTaskInput containing text, enhance and response_format

    Returns:
        Parsed task (markdown description, concise line or JSON)

    Examples:
        - "Finish report by tomorrow at 5pm ~2 #work"
        - "Pay rent every month @home"
    """
    parsed = parse_task(params.text)
    if params.enhance:
        parsed = enhance_parsed_task(parsed, params.text, load_config())

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(parsed.to_dict(), indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return _format_parsed_concise(parsed)

    return generate_task_description(parsed)


@mcp.tool(
    name="planner_classify_task",
    annotations=ToolAnnotations(
        title="Classify Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def planner_classify_task(params: ClassifyTaskInput) -> str:
    """
    Estimate how demanding a task is and when it is best worked on.

    USE THIS WHEN:
    - Deciding whether a task needs a high-energy slot
    - Explaining why a task was scheduled where it was

    Args:
        params: ClassifyTaskInput with title, optional description, priority,
            category, estimated_pomodoros and response_format

    Returns:
        Complexity, cognitive load type, ideal energy level and estimated duration
    """
    task = Task(
        id="task",
        title=params.title,
        description=params.description,
        priority=params.priority,
        category=params.category,
        estimated_pomodoros=params.estimated_pomodoros,
    )
    cognitive = enrich_task(task, load_config())

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(cognitive.model_dump(mode="json", exclude_none=True), indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return (
            f"{cognitive.title}: complexity:{cognitive.complexity.value}, "
            f"load:{cognitive.cognitive_load_type.value}, "
            f"energy:{cognitive.ideal_energy_level.value}, {cognitive.estimated_duration}min"
        )

    return _format_cognitive_task_markdown(cognitive)
