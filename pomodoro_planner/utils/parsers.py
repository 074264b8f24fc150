"""Natural-language task parsing.

Turns free text such as ``"Finish report by tomorrow at 5pm #work ~2 !"`` into a
``ParsedTaskData``. Extraction runs as a fixed pipeline of extract-and-strip
stages; each stage receives the working title left by the previous one and
returns what it found plus the remaining title. Stage order matters because
priority markers look like tags and pomodoro counts look like numbers.

Examples:
    "Call John on Friday #important"      -> due Friday 23:59, high priority
    "Weekly team meeting every Monday"    -> weekly recurrence, no due date
    "Workout ~2 pomodoros #health @gym"   -> 2 pomodoros, tag, category
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from datetime import date, datetime, time, timedelta

from pomodoro_planner.config import DEFAULT_CONFIG, PlannerConfig
from pomodoro_planner.enums import Priority, RecurringPattern, TaskStatus
from pomodoro_planner.logging_config import get_logger
from pomodoro_planner.models.task import ParsedTaskData, Task

logger = get_logger(__name__)

Clock = Callable[[], datetime]

END_OF_DAY = time(23, 59, 59, 999000)

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
_WEEKDAY_ALT = "|".join(WEEKDAYS)

# Optional " at 5", " at 5pm", " at 2:30pm", " at 1430"
_TIME_SUFFIX = r"(?:\s+at\s+(\d{1,2})(?::?(\d{2}))?\s*(?:([ap]m)\b)?)?"
_TIME_SUFFIX_UNCAPTURED = r"(?:\s+at\s+\d{1,2}(?::?\d{2})?\s*(?:[ap]m\b)?)?"

# ============================================================================
# Priority
# ============================================================================

# First matching level wins; any "!" run means high regardless of length
_PRIORITY_MARKERS: list[tuple[Priority, re.Pattern[str]]] = [
    (Priority.HIGH, re.compile(r"#(?:important|high)\b|!+", re.IGNORECASE)),
    (Priority.MEDIUM, re.compile(r"#medium\b", re.IGNORECASE)),
    (Priority.LOW, re.compile(r"#low\b", re.IGNORECASE)),
]
_ANY_PRIORITY_MARKER = re.compile(r"#(?:important|high|medium|low)\b|!+", re.IGNORECASE)


def _extract_priority(title: str) -> tuple[Priority | None, str]:
    """Detect a priority marker and strip every priority marker from the title."""
    for priority, pattern in _PRIORITY_MARKERS:
        if pattern.search(title):
            return priority, _ANY_PRIORITY_MARKER.sub(" ", title)
    return None, title


# ============================================================================
# Estimated effort
# ============================================================================

_ESTIMATE_RE = re.compile(r"~(\d+)(?:\s*pomodoros?\b)?", re.IGNORECASE)


def _extract_estimate(title: str) -> tuple[int | None, str]:
    """Extract the first ``~N`` or ``~N pomodoros`` with N >= 1; ``~0`` is skipped."""
    for match in _ESTIMATE_RE.finditer(title):
        count = int(match.group(1))
        if count >= 1:
            return count, title[: match.start()] + " " + title[match.end() :]
    return None, title


# ============================================================================
# Tags and category
# ============================================================================

_TAG_RE = re.compile(r"#(\w+)")
_CATEGORY_RE = re.compile(r"(?<!\S)@(\w+)")


def _is_standalone(text: str, start: int, end: int) -> bool:
    before_ok = start == 0 or text[start - 1].isspace()
    after_ok = end == len(text) or text[end].isspace()
    return before_ok and after_ok


def _extract_tags(title: str) -> tuple[list[str] | None, str]:
    """
    Collect every ``#word`` as a lowercase tag, first-seen order, no duplicates.

    Numeric tags (``#123``) are only removed from the title when they stand
    alone, so text like ``issue#42`` keeps its number.
    """
    tags: list[str] = []

    def _strip(match: re.Match[str]) -> str:
        tag = match.group(1).lower()
        if tag not in tags:
            tags.append(tag)
        if tag.isdigit() and not _is_standalone(match.string, match.start(), match.end()):
            return match.group(0)
        return " "

    title = _TAG_RE.sub(_strip, title)
    return (tags or None), title


def _extract_category(title: str) -> tuple[str | None, str]:
    """Take the first ``@word`` token as the category."""
    match = _CATEGORY_RE.search(title)
    if not match:
        return None, title
    return match.group(1).lower(), title[: match.start()] + " " + title[match.end() :]


# ============================================================================
# Due date
# ============================================================================


def _clock_time(hour_text: str | None, minute_text: str | None, meridiem: str | None) -> time | None:
    """
    Convert captured clock parts into a time.

    Returns END_OF_DAY when no time was given and None when the time is invalid.
    """
    if hour_text is None:
        return END_OF_DAY

    hour = int(hour_text)
    minute = int(minute_text) if minute_text else 0
    meridiem = meridiem.lower() if meridiem else None

    if meridiem == "pm" and hour < 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0

    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def _on_day(day: date, match: re.Match[str], first_group: int, now: datetime) -> datetime | None:
    clock = _clock_time(match.group(first_group), match.group(first_group + 1), match.group(first_group + 2))
    if clock is None:
        return None
    return datetime.combine(day, clock, tzinfo=now.tzinfo)


def _due_today(match: re.Match[str], now: datetime) -> datetime | None:
    return _on_day(now.date(), match, 1, now)


def _due_tomorrow(match: re.Match[str], now: datetime) -> datetime | None:
    return _on_day(now.date() + timedelta(days=1), match, 1, now)


def _due_next_week(match: re.Match[str], now: datetime) -> datetime | None:
    return datetime.combine(now.date() + timedelta(days=7), END_OF_DAY, tzinfo=now.tzinfo)


def _due_weekday(match: re.Match[str], now: datetime) -> datetime | None:
    """Next occurrence of the weekday, never today."""
    target = WEEKDAYS.index(match.group(1).lower())
    days_ahead = (target - now.weekday()) % 7 or 7
    return _on_day(now.date() + timedelta(days=days_ahead), match, 2, now)


def _due_month_day(match: re.Match[str], now: datetime) -> datetime | None:
    """MM/DD or MM-DD in the current year, or next year once it has passed."""
    month, day = int(match.group(1)), int(match.group(2))
    today = now.date()

    for year in (today.year, today.year + 1):
        try:
            candidate = date(year, month, day)
        except ValueError:
            continue
        if candidate >= today:
            return _on_day(candidate, match, 3, now)
    return None


DueDateHandler = Callable[[re.Match[str], datetime], datetime | None]

# Tried in order; the first pattern whose handler produces a date wins
_DUE_DATE_PATTERNS: list[tuple[re.Pattern[str], DueDateHandler]] = [
    (re.compile(r"\btoday\b" + _TIME_SUFFIX, re.IGNORECASE), _due_today),
    (re.compile(r"\btomorrow\b" + _TIME_SUFFIX, re.IGNORECASE), _due_tomorrow),
    (re.compile(r"\bnext\s+week\b", re.IGNORECASE), _due_next_week),
    (
        re.compile(rf"\b(?:on\s+|next\s+)?(?:this\s+)?({_WEEKDAY_ALT})\b" + _TIME_SUFFIX, re.IGNORECASE | re.ASCII),
        _due_weekday,
    ),
    (
        re.compile(r"\b(?:on\s+)?(\d{1,2})[/\-](\d{1,2})\b" + _TIME_SUFFIX, re.IGNORECASE),
        _due_month_day,
    ),
]


def _extract_due_date(title: str, now: datetime) -> tuple[datetime | None, str]:
    for pattern, handler in _DUE_DATE_PATTERNS:
        match = pattern.search(title)
        if not match:
            continue
        due = handler(match, now)
        if due is None:
            logger.debug("due_date_unparsed", phrase=match.group(0))
            continue
        return due, title[: match.start()] + " " + title[match.end() :]
    return None, title


# ============================================================================
# Recurrence
# ============================================================================

_RECURRING_PATTERNS: list[tuple[re.Pattern[str], RecurringPattern]] = [
    (
        re.compile(r"\bevery\s+(?:day|morning|evening)\b" + _TIME_SUFFIX_UNCAPTURED, re.IGNORECASE),
        RecurringPattern.DAILY,
    ),
    (
        re.compile(rf"\bevery\s+(?:week|{_WEEKDAY_ALT})\b" + _TIME_SUFFIX_UNCAPTURED, re.IGNORECASE | re.ASCII),
        RecurringPattern.WEEKLY,
    ),
    (
        re.compile(r"\bevery\s+(?:month|\d+(?:st|nd|rd|th))\b" + _TIME_SUFFIX_UNCAPTURED, re.IGNORECASE),
        RecurringPattern.MONTHLY,
    ),
    (
        re.compile(r"\bevery\s+\d+\s+days?\b" + _TIME_SUFFIX_UNCAPTURED, re.IGNORECASE),
        RecurringPattern.CUSTOM,
    ),
]
_EVERY_RE = re.compile(r"\bevery\b", re.IGNORECASE)


def _extract_recurrence(source: str, title: str) -> tuple[RecurringPattern | None, str]:
    """
    Detect recurrence in ``source`` and strip it from ``title``.

    ``source`` is the text before due-date extraction, because a weekday phrase
    such as "every Monday" may already have lost its weekday to the date stage.
    """
    for pattern, recurrence in _RECURRING_PATTERNS:
        match = pattern.search(source)
        if not match:
            continue
        phrase = match.group(0)
        if phrase in title:
            title = title.replace(phrase, " ", 1)
        else:
            title = _EVERY_RE.sub(" ", title, count=1)
        return recurrence, title
    return None, title


# ============================================================================
# Title cleanup
# ============================================================================

_WHITESPACE_RE = re.compile(r"\s+")
_DANGLING_BY_RE = re.compile(r"^by\s+|\s+by$", re.IGNORECASE)
_TRAILING_EVERY_RE = re.compile(r"\s+every\b.*$", re.IGNORECASE)
_STRAY_ESTIMATE_RE = re.compile(r"~\d+")


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _clean_title(title: str, is_recurring: bool) -> str:
    title = _DANGLING_BY_RE.sub("", _collapse(title))
    if is_recurring:
        title = _TRAILING_EVERY_RE.sub("", title)
    title = _STRAY_ESTIMATE_RE.sub(" ", title)
    return _collapse(title)


# ============================================================================
# Public API
# ============================================================================


def parse_task(text: str, clock: Clock | None = None) -> ParsedTaskData:
    """
    Parse a free-text task description into structured attributes.

    Never raises for any string input. Attributes that are not detected stay
    None; the title is whatever text remains once recognized tokens are gone.

    Args:
        text: Free-text task description
        clock: Zero-argument callable returning "now"; defaults to datetime.now

    Returns:
        ParsedTaskData with the detected attributes
    """
    if not text or not text.strip():
        return ParsedTaskData(title="")

    now = (clock or datetime.now)()

    priority, title = _extract_priority(text)
    estimated_pomodoros, title = _extract_estimate(title)
    tags, title = _extract_tags(title)
    category, title = _extract_category(title)

    before_dates = title
    due_date, title = _extract_due_date(title, now)
    recurrence, title = _extract_recurrence(before_dates, title)

    if recurrence == RecurringPattern.WEEKLY:
        # Weekly instances are placed by the caller's recurrence scheduling
        due_date = None

    parsed = ParsedTaskData(
        title=_clean_title(title, is_recurring=recurrence is not None),
        due_date=due_date,
        priority=priority,
        estimated_pomodoros=estimated_pomodoros,
        tags=tags,
        category=category,
        is_recurring=True if recurrence else None,
        recurring_pattern=recurrence,
    )
    logger.debug("task_parsed", detected=sorted(parsed.to_dict()))
    return parsed


# ============================================================================
# Enhancement
# ============================================================================

# "2 hours", "90 min", "30 minutes"; a decimal like "1.5 hours" is not a count
_DURATION_RE = re.compile(r"(?<![\d.])(\d+)\s*(hours?|hrs?|minutes?|mins?)\b", re.IGNORECASE)

# Low phrases are checked first so "not urgent" is not read as "urgent"
_PRIORITY_PHRASES: list[tuple[Priority, re.Pattern[str]]] = [
    (
        Priority.LOW,
        re.compile(r"\b(?:not\s+urgent|can\s+wait|low\s+priority|whenever|someday)\b", re.IGNORECASE),
    ),
    (
        Priority.HIGH,
        re.compile(r"\b(?:urgent|asap|important|critical|high\s+priority)\b", re.IGNORECASE),
    ),
]

# First entry found wins, in this order
CATEGORY_KEYWORDS: tuple[str, ...] = ("work", "personal", "home", "health", "finance", "study", "project")
_CATEGORY_KEYWORD_RES: list[tuple[str, re.Pattern[str]]] = [
    (keyword, re.compile(rf"\b{keyword}", re.IGNORECASE)) for keyword in CATEGORY_KEYWORDS
]


def _duration_pomodoros(text: str, pomodoro_minutes: int) -> int | None:
    match = _DURATION_RE.search(text)
    if not match:
        return None
    amount = int(match.group(1))
    minutes = amount * 60 if match.group(2).lower().startswith("h") else amount
    pomodoros = math.ceil(minutes / pomodoro_minutes)
    return pomodoros if pomodoros >= 1 else None


def enhance_parsed_task(
    parsed: ParsedTaskData,
    text: str,
    config: PlannerConfig = DEFAULT_CONFIG,
) -> ParsedTaskData:
    """
    Fill gaps the marker syntax left, using plain-language cues in ``text``.

    - Effort: "2 hours" or "30 min" become pomodoros (rounded up) when no
      ``~N`` estimate was given.
    - Priority: phrases like "asap" or "can wait" set it when it is unset or
      medium.
    - Category: a keyword such as "work" or "health" sets it when no
      ``@category`` was given.

    The title is left as parsed. Returns a new ParsedTaskData.
    """
    update: dict = {}

    if parsed.estimated_pomodoros is None:
        pomodoros = _duration_pomodoros(text, config.pomodoro_minutes)
        if pomodoros is not None:
            update["estimated_pomodoros"] = pomodoros

    if parsed.priority in (None, Priority.MEDIUM):
        for priority, pattern in _PRIORITY_PHRASES:
            if pattern.search(text):
                update["priority"] = priority
                break

    if parsed.category is None:
        for keyword, pattern in _CATEGORY_KEYWORD_RES:
            if pattern.search(text):
                update["category"] = keyword
                break

    if update:
        logger.debug("task_enhanced", fields=sorted(update))
    return parsed.model_copy(update=update)


def parsed_to_task(parsed: ParsedTaskData, task_id: int | str) -> Task:
    """Build a pending Task from parsed attributes; priority defaults to medium."""
    return Task(
        id=task_id,
        title=parsed.title,
        status=TaskStatus.PENDING,
        priority=parsed.priority or Priority.MEDIUM,
        category=parsed.category,
        estimated_pomodoros=parsed.estimated_pomodoros,
        due_date=parsed.due_date,
        tags=parsed.tags,
    )
