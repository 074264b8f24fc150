"""Cognitive classification and adaptive scheduling of tasks into time blocks."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, tzinfo

from pomodoro_planner.config import DEFAULT_CONFIG, PlannerConfig
from pomodoro_planner.enums import CognitiveLoadType, EnergyLevel, Priority, TaskComplexity
from pomodoro_planner.logging_config import get_logger
from pomodoro_planner.models.schedule import CalendarEvent, CognitiveProfile, ScheduledTask, TimeBlock
from pomodoro_planner.models.task import CognitiveTask, Task

logger = get_logger(__name__)

# ============================================================================
# Classification Rules
# ============================================================================

# Keywords match at the start of a word, case-insensitively ("designing" hits "design")
COMPLEXITY_KEYWORDS: tuple[str, ...] = (
    "analyze",
    "analyse",
    "research",
    "develop",
    "create",
    "design",
    "complex",
    "difficult",
    "challenging",
    "strategy",
    "strategic",
    "plan",
    "architecture",
    "framework",
    "system",
    "algorithm",
)

# Evaluated top to bottom; first category with a keyword hit wins
COGNITIVE_LOAD_KEYWORDS: dict[CognitiveLoadType, tuple[str, ...]] = {
    CognitiveLoadType.FOCUS: (
        "analyze",
        "analyse",
        "review",
        "focus",
        "read",
        "research",
        "concentrate",
        "examine",
        "investigate",
        "debug",
    ),
    CognitiveLoadType.CREATIVITY: (
        "design",
        "brainstorm",
        "creative",
        "create",
        "innovate",
        "develop",
        "imagine",
        "generate",
        "ideate",
        "visualize",
    ),
    CognitiveLoadType.DECISION_MAKING: (
        "evaluate",
        "decide",
        "choose",
        "assess",
        "select",
        "prioritize",
        "judge",
        "determine",
        "plan",
        "strategy",
    ),
    CognitiveLoadType.LEARNING: (
        "learn",
        "study",
        "understand",
        "practice",
        "master",
        "comprehend",
        "absorb",
        "grasp",
        "familiarize",
    ),
    CognitiveLoadType.ROUTINE: (
        "update",
        "organize",
        "file",
        "maintain",
        "check",
        "clean",
        "arrange",
        "sort",
        "routine",
        "regular",
    ),
}

CREATIVE_CATEGORIES = frozenset({"design", "content", "marketing", "creative"})

IDEAL_ENERGY_LEVELS: dict[TaskComplexity, dict[CognitiveLoadType, EnergyLevel]] = {
    TaskComplexity.HIGH: {
        CognitiveLoadType.FOCUS: EnergyLevel.HIGH,
        CognitiveLoadType.CREATIVITY: EnergyLevel.HIGH,
        CognitiveLoadType.DECISION_MAKING: EnergyLevel.HIGH,
        CognitiveLoadType.LEARNING: EnergyLevel.HIGH,
        CognitiveLoadType.ROUTINE: EnergyLevel.HIGH,
    },
    TaskComplexity.MEDIUM: {
        CognitiveLoadType.FOCUS: EnergyLevel.HIGH,
        CognitiveLoadType.CREATIVITY: EnergyLevel.MEDIUM,
        CognitiveLoadType.DECISION_MAKING: EnergyLevel.MEDIUM,
        CognitiveLoadType.LEARNING: EnergyLevel.MEDIUM,
        CognitiveLoadType.ROUTINE: EnergyLevel.LOW,
    },
    TaskComplexity.LOW: {
        CognitiveLoadType.FOCUS: EnergyLevel.LOW,
        CognitiveLoadType.CREATIVITY: EnergyLevel.LOW,
        CognitiveLoadType.DECISION_MAKING: EnergyLevel.LOW,
        CognitiveLoadType.LEARNING: EnergyLevel.LOW,
        CognitiveLoadType.ROUTINE: EnergyLevel.LOW,
    },
}

# Minutes when no pomodoro estimate is available
DEFAULT_DURATIONS: dict[TaskComplexity, int] = {
    TaskComplexity.HIGH: 60,
    TaskComplexity.MEDIUM: 45,
    TaskComplexity.LOW: 25,
}

PRIORITY_ORDER: dict[Priority, int] = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}

# Block energy levels to try for a task, best first
ENERGY_FALLBACK_ORDER: dict[EnergyLevel, tuple[EnergyLevel, ...]] = {
    EnergyLevel.HIGH: (EnergyLevel.HIGH, EnergyLevel.MEDIUM, EnergyLevel.LOW),
    EnergyLevel.MEDIUM: (EnergyLevel.MEDIUM, EnergyLevel.HIGH, EnergyLevel.LOW),
    EnergyLevel.LOW: (EnergyLevel.LOW, EnergyLevel.MEDIUM, EnergyLevel.HIGH),
}

_TIER_UP: dict[TaskComplexity, TaskComplexity] = {
    TaskComplexity.LOW: TaskComplexity.MEDIUM,
    TaskComplexity.MEDIUM: TaskComplexity.HIGH,
    TaskComplexity.HIGH: TaskComplexity.HIGH,
}


def _keyword_pattern(keywords: Iterable[str]) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(re.escape(k) for k in keywords) + ")", re.IGNORECASE)


_COMPLEXITY_RE = _keyword_pattern(COMPLEXITY_KEYWORDS)
_LOAD_TYPE_RES: list[tuple[CognitiveLoadType, re.Pattern[str]]] = [
    (load_type, _keyword_pattern(keywords)) for load_type, keywords in COGNITIVE_LOAD_KEYWORDS.items()
]


# ============================================================================
# Classification
# ============================================================================


def estimate_task_complexity(task: Task) -> TaskComplexity:
    """
    Estimate complexity from the pomodoro estimate, bumped by title keywords.

    5+ pomodoros is high, 3-4 medium, anything less (or no estimate) low.
    A complexity keyword in the title raises the result by one tier.
    """
    pomodoros = task.estimated_pomodoros or 0
    if pomodoros >= 5:
        complexity = TaskComplexity.HIGH
    elif pomodoros >= 3:
        complexity = TaskComplexity.MEDIUM
    else:
        complexity = TaskComplexity.LOW

    if task.title and _COMPLEXITY_RE.search(task.title):
        complexity = _TIER_UP[complexity]

    return complexity


def determine_cognitive_load_type(task: Task) -> CognitiveLoadType:
    """Classify the kind of mental effort from title and description keywords."""
    text = f"{task.title} {task.description or ''}"
    for load_type, pattern in _LOAD_TYPE_RES:
        if pattern.search(text):
            return load_type

    if task.estimated_pomodoros is not None and task.estimated_pomodoros <= 1:
        return CognitiveLoadType.ROUTINE
    if task.priority == Priority.HIGH:
        return CognitiveLoadType.FOCUS
    if task.category and task.category.lower() in CREATIVE_CATEGORIES:
        return CognitiveLoadType.CREATIVITY
    return CognitiveLoadType.FOCUS


def determine_ideal_energy_level(task: CognitiveTask) -> EnergyLevel:
    """Look up the energy a task needs from its complexity and load type."""
    complexity = task.complexity or estimate_task_complexity(task)
    load_type = task.cognitive_load_type or determine_cognitive_load_type(task)
    return IDEAL_ENERGY_LEVELS[complexity][load_type]


def enrich_task(task: Task, config: PlannerConfig = DEFAULT_CONFIG) -> CognitiveTask:
    """
    Fill in any missing cognitive metadata for a task.

    Values already set on a CognitiveTask are kept as given.
    """
    cognitive = task if isinstance(task, CognitiveTask) else CognitiveTask.model_validate(task.model_dump())

    complexity = cognitive.complexity or estimate_task_complexity(cognitive)
    load_type = cognitive.cognitive_load_type or determine_cognitive_load_type(cognitive)
    energy = cognitive.ideal_energy_level or IDEAL_ENERGY_LEVELS[complexity][load_type]

    duration = cognitive.estimated_duration
    if duration is None:
        if cognitive.estimated_pomodoros:
            duration = cognitive.estimated_pomodoros * config.pomodoro_minutes
        else:
            duration = DEFAULT_DURATIONS[complexity]

    return cognitive.model_copy(
        update={
            "complexity": complexity,
            "cognitive_load_type": load_type,
            "ideal_energy_level": energy,
            "estimated_duration": duration,
        }
    )


# ============================================================================
# Time Blocks
# ============================================================================


def _align(moment: datetime, tz: tzinfo | None) -> datetime:
    """Make an event datetime comparable with block datetimes in ``tz``."""
    if tz is None and moment.tzinfo is not None:
        return moment.astimezone().replace(tzinfo=None)
    if tz is not None and moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment


def generate_time_blocks(
    day: date | datetime,
    profile: CognitiveProfile | None = None,
    existing_events: Iterable[CalendarEvent] | None = None,
    config: PlannerConfig = DEFAULT_CONFIG,
) -> list[TimeBlock]:
    """
    Split a working day into fixed-size blocks tagged with energy levels.

    Args:
        day: Calendar day; a datetime contributes its date and timezone
        profile: Hour-to-energy mapping; defaults to the configured chronotype
        existing_events: Busy intervals; overlapping blocks become unavailable
        config: Working window and block size

    Returns:
        Blocks in chronological order (20 for the default 08:00-18:00 day)
    """
    if profile is None:
        profile = CognitiveProfile.for_chronotype(config.chronotype)

    tz = day.tzinfo if isinstance(day, datetime) else None
    base = day.date() if isinstance(day, datetime) else day

    events = [
        CalendarEvent(start=_align(e.start, tz), end=_align(e.end, tz), title=e.title)
        for e in (existing_events or [])
    ]

    blocks: list[TimeBlock] = []
    for hour in range(config.day_start_hour, config.day_end_hour):
        for minute in range(0, 60, config.block_minutes):
            start = datetime.combine(base, time(hour, minute), tzinfo=tz)
            block = TimeBlock(
                start_time=start,
                end_time=start + timedelta(minutes=config.block_minutes),
                energy_level=profile.energy_at(hour),
            )
            if any(block.overlaps(e) for e in events):
                block = block.model_copy(update={"available": False})
            blocks.append(block)

    return blocks


# ============================================================================
# Scheduling
# ============================================================================


def _pick_block(blocks: list[TimeBlock], used: set[int], ideal: EnergyLevel) -> int | None:
    """Index of the earliest unused block at the best reachable energy level."""
    for level in ENERGY_FALLBACK_ORDER[ideal]:
        for index, block in enumerate(blocks):
            if index not in used and block.energy_level == level:
                return index
    return None


def schedule_tasks(
    tasks: Iterable[Task],
    time_blocks: Iterable[TimeBlock],
    config: PlannerConfig = DEFAULT_CONFIG,
) -> list[ScheduledTask]:
    """
    Greedily assign tasks to available time blocks.

    Tasks are enriched, then taken in priority order (high, medium, low; input
    order kept for ties). Each task gets the earliest free block matching its
    ideal energy level, falling back along ENERGY_FALLBACK_ORDER. Every block is
    used at most once; tasks that find no free block are left out.

    Returns:
        ScheduledTask pairs in placement (priority) order
    """
    enriched = [enrich_task(t, config) for t in tasks]
    ordered = sorted(enriched, key=lambda t: PRIORITY_ORDER[t.priority])
    free = sorted((b for b in time_blocks if b.available), key=lambda b: b.start_time)

    used: set[int] = set()
    scheduled: list[ScheduledTask] = []

    for task in ordered:
        ideal = task.ideal_energy_level or EnergyLevel.MEDIUM
        index = _pick_block(free, used, ideal)
        if index is None:
            logger.debug("task_unplaced", task_id=task.id, reason="no free block")
            continue

        block = free[index]
        if block.energy_level != ideal:
            logger.debug(
                "energy_fallback",
                task_id=task.id,
                ideal=ideal.value,
                assigned=block.energy_level.value,
            )
        used.add(index)
        scheduled.append(ScheduledTask(task=task, time_block=block))

    logger.debug("tasks_scheduled", placed=len(scheduled), requested=len(enriched))
    return scheduled
