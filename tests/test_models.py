"""Tests for Pomodoro Planner data models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from pomodoro_planner import (
    CalendarEvent,
    Chronotype,
    CognitiveProfile,
    CognitiveTask,
    EnergyLevel,
    ParsedTaskData,
    Priority,
    RecurringPattern,
    Task,
    TaskStatus,
    TimeBlock,
)


class TestParsedTaskData:
    """Tests for ParsedTaskData."""

    def test_defaults(self):
        parsed = ParsedTaskData()
        assert parsed.title == ""
        assert parsed.due_date is None
        assert parsed.is_recurring is None

    def test_to_dict_only_detected(self):
        parsed = ParsedTaskData(
            title="Pay rent",
            due_date=datetime(2026, 11, 1, 9, 0),
            priority=Priority.HIGH,
            is_recurring=True,
            recurring_pattern=RecurringPattern.MONTHLY,
        )
        assert parsed.to_dict() == {
            "title": "Pay rent",
            "due_date": "2026-11-01T09:00:00",
            "priority": "high",
            "is_recurring": True,
            "recurring_pattern": "monthly",
        }

    def test_rejects_zero_estimate(self):
        with pytest.raises(ValidationError):
            ParsedTaskData(title="x", estimated_pomodoros=0)


class TestTask:
    """Tests for Task and CognitiveTask."""

    def test_defaults(self):
        task = Task(id=1, title="Write report")
        assert task.status == TaskStatus.PENDING
        assert task.priority == Priority.MEDIUM

    def test_string_id(self):
        assert Task(id="abc-1").id == "abc-1"

    def test_extra_fields_kept(self):
        task = Task(id=1, title="x", project="home")
        assert task.model_dump()["project"] == "home"

    def test_enum_values_from_strings(self):
        task = Task(id=1, status="in_progress", priority="low")
        assert task.status == TaskStatus.IN_PROGRESS
        assert task.priority == Priority.LOW

    def test_invalid_priority(self):
        with pytest.raises(ValidationError):
            Task(id=1, priority="urgent")

    def test_cognitive_task_duration_positive(self):
        with pytest.raises(ValidationError):
            CognitiveTask(id=1, estimated_duration=0)

    def test_cognitive_task_load_type_values(self):
        task = CognitiveTask(id=1, cognitive_load_type="decision-making")
        assert task.cognitive_load_type.value == "decision-making"


class TestCalendarEvent:
    """Tests for CalendarEvent."""

    def test_zero_length_allowed(self):
        moment = datetime(2026, 10, 21, 9, 0)
        event = CalendarEvent(start=moment, end=moment)
        assert event.start == event.end

    def test_end_before_start(self):
        with pytest.raises(ValidationError):
            CalendarEvent(start=datetime(2026, 10, 21, 10, 0), end=datetime(2026, 10, 21, 9, 0))


class TestTimeBlock:
    """Tests for TimeBlock."""

    @pytest.fixture
    def block(self):
        return TimeBlock(
            start_time=datetime(2026, 10, 21, 9, 0),
            end_time=datetime(2026, 10, 21, 9, 30),
            energy_level=EnergyLevel.HIGH,
        )

    def test_frozen(self, block):
        with pytest.raises(ValidationError):
            block.available = False

    def test_overlap(self, block):
        event = CalendarEvent(start=datetime(2026, 10, 21, 9, 15), end=datetime(2026, 10, 21, 10, 0))
        assert block.overlaps(event)

    def test_touching_intervals_do_not_overlap(self, block):
        before = CalendarEvent(start=datetime(2026, 10, 21, 8, 0), end=datetime(2026, 10, 21, 9, 0))
        after = CalendarEvent(start=datetime(2026, 10, 21, 9, 30), end=datetime(2026, 10, 21, 10, 0))
        assert not block.overlaps(before)
        assert not block.overlaps(after)


class TestCognitiveProfile:
    """Tests for CognitiveProfile."""

    def test_default_is_intermediate(self):
        profile = CognitiveProfile()
        assert profile.chronotype == Chronotype.INTERMEDIATE
        assert profile.peak_hours == [9, 10, 11, 15, 16]
        assert profile.focus_session_duration == 25
        assert profile.break_duration == 5

    def test_hour_out_of_range(self):
        with pytest.raises(ValidationError):
            CognitiveProfile(peak_hours=[24])

    def test_sensitivity_range(self):
        with pytest.raises(ValidationError):
            CognitiveProfile(distraction_sensitivity=11)

    def test_for_chronotype(self):
        profile = CognitiveProfile.for_chronotype(Chronotype.NIGHT_OWL, focus_session_duration=50)
        assert profile.chronotype == Chronotype.NIGHT_OWL
        assert profile.peak_hours == [18, 19, 20, 21]
        assert profile.focus_session_duration == 50

    def test_presets_are_copies(self):
        profile = CognitiveProfile.for_chronotype(Chronotype.EARLY_BIRD)
        profile.peak_hours.append(12)
        assert 12 not in CognitiveProfile.for_chronotype(Chronotype.EARLY_BIRD).peak_hours

    @pytest.mark.parametrize(
        "hour,expected",
        [
            (9, EnergyLevel.HIGH),
            (8, EnergyLevel.MEDIUM),
            (12, EnergyLevel.LOW),
            (19, EnergyLevel.MEDIUM),
        ],
    )
    def test_energy_at(self, hour, expected):
        assert CognitiveProfile().energy_at(hour) == expected
