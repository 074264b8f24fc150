"""Formatting utilities for parsed tasks, time blocks and schedules."""

from datetime import datetime

from pomodoro_planner.models.schedule import ScheduledTask, TimeBlock
from pomodoro_planner.models.task import CognitiveTask, ParsedTaskData


def _format_due(due: datetime) -> str:
    """Render like "Friday, October 23, 2026 03:00 PM"."""
    return f"{due:%A}, {due:%B} {due.day}, {due.year} {due:%I:%M %p}"


def generate_task_description(parsed: ParsedTaskData) -> str:
    """
    Render a parsed task as one line per detected attribute.

    Output:
    Task: Finish report
    Due: Tuesday, October 20, 2026 05:00 PM
    Priority: High
    """
    lines = [f"Task: {parsed.title}"]

    if parsed.due_date:
        lines.append(f"Due: {_format_due(parsed.due_date)}")
    if parsed.priority:
        lines.append(f"Priority: {parsed.priority.value.capitalize()}")
    if parsed.estimated_pomodoros:
        lines.append(f"Estimated Pomodoros: {parsed.estimated_pomodoros}")
    if parsed.category:
        lines.append(f"Category: {parsed.category}")
    if parsed.tags:
        lines.append(f"Tags: {', '.join(parsed.tags)}")
    if parsed.is_recurring and parsed.recurring_pattern:
        lines.append(f"Recurring: {parsed.recurring_pattern.value}")

    return "\n".join(lines)


def _format_parsed_concise(parsed: ParsedTaskData) -> str:
    """
    Format a parsed task on one line.

    Output: "Finish report (high, due:2026-10-20, ~2, @work, #q4)"
    """
    meta = []
    if parsed.priority:
        meta.append(parsed.priority.value)
    if parsed.due_date:
        meta.append(f"due:{parsed.due_date:%Y-%m-%d}")
    if parsed.estimated_pomodoros:
        meta.append(f"~{parsed.estimated_pomodoros}")
    if parsed.category:
        meta.append(f"@{parsed.category}")
    if parsed.tags:
        meta.extend(f"#{tag}" for tag in parsed.tags)
    if parsed.recurring_pattern:
        meta.append(f"every:{parsed.recurring_pattern.value}")

    title = parsed.title or "(untitled)"
    if meta:
        return f"{title} ({', '.join(meta)})"
    return title


def _format_block_range(block: TimeBlock) -> str:
    return f"{block.start_time:%H:%M}-{block.end_time:%H:%M}"


def _format_cognitive_task_markdown(task: CognitiveTask) -> str:
    """Format a classified task as markdown."""
    lines = [f"### [{task.id}] {task.title or 'Untitled'}"]

    details = [f"**Priority**: {task.priority.value.capitalize()}"]
    if task.complexity:
        details.append(f"**Complexity**: {task.complexity.value}")
    if task.cognitive_load_type:
        details.append(f"**Load**: {task.cognitive_load_type.value}")
    if task.ideal_energy_level:
        details.append(f"**Ideal energy**: {task.ideal_energy_level.value}")
    if task.estimated_duration:
        details.append(f"**Duration**: {task.estimated_duration} min")
    lines.append(" | ".join(details))

    return "\n".join(lines)


def _format_time_blocks_markdown(blocks: list[TimeBlock], title: str = "Time Blocks") -> str:
    """Format a day's blocks as a markdown table."""
    if not blocks:
        return f"# {title}\n\nNo time blocks."

    free = sum(1 for b in blocks if b.available)
    lines = [f"# {title}", f"*{len(blocks)} block(s), {free} free*", ""]
    lines.append("| Time | Energy | Status |")
    lines.append("|------|--------|--------|")
    for block in blocks:
        status = "free" if block.available else "busy"
        lines.append(f"| {_format_block_range(block)} | {block.energy_level.value} | {status} |")

    return "\n".join(lines)


def _format_scheduled_concise(item: ScheduledTask) -> str:
    """
    Format one placement on a line.

    Output: "09:00-09:30 #3: Write report (high, energy:high/high)"
    """
    task = item.task
    block = item.time_block
    ideal = task.ideal_energy_level.value if task.ideal_energy_level else "?"
    return (
        f"{_format_block_range(block)} #{task.id}: {task.title or 'Untitled'} "
        f"({task.priority.value}, energy:{ideal}/{block.energy_level.value})"
    )


def _format_schedule_concise(schedule: list[ScheduledTask], unplaced: list[CognitiveTask] | None = None) -> str:
    if not schedule and not unplaced:
        return "0 scheduled"

    lines = [f"{len(schedule)} scheduled"]
    lines.extend(_format_scheduled_concise(item) for item in schedule)
    for task in unplaced or []:
        lines.append(f"unplaced #{task.id}: {task.title or 'Untitled'}")
    return "\n".join(lines)


def _format_schedule_markdown(
    schedule: list[ScheduledTask],
    unplaced: list[CognitiveTask] | None = None,
    title: str = "Schedule",
) -> str:
    """Format a schedule in time order, followed by any tasks that did not fit."""
    if not schedule and not unplaced:
        return f"# {title}\n\nNothing to schedule."

    lines = [f"# {title}", f"*{len(schedule)} task(s) scheduled*", ""]

    for item in sorted(schedule, key=lambda s: s.time_block.start_time):
        task = item.task
        block = item.time_block
        marker = "" if task.ideal_energy_level == block.energy_level else " (energy fallback)"
        lines.append(f"- **{_format_block_range(block)}** [{task.id}] {task.title or 'Untitled'}{marker}")
        lines.append(
            f"  Priority: {task.priority.value} | Block energy: {block.energy_level.value}"
            f" | Ideal: {task.ideal_energy_level.value if task.ideal_energy_level else '?'}"
        )

    if unplaced:
        lines.append("")
        lines.append("**Not scheduled (no free block):**")
        for task in unplaced:
            lines.append(f"  - [{task.id}] {task.title or 'Untitled'}")

    return "\n".join(lines)
