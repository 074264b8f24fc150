"""Pytest configuration and fixtures for pomodoro-planner tests."""

from datetime import datetime, timedelta

import pytest

from pomodoro_planner.config import CONFIG_ENV_VAR
from pomodoro_planner.enums import EnergyLevel, Priority
from pomodoro_planner.models.schedule import TimeBlock
from pomodoro_planner.models.task import CognitiveTask

# Wednesday
FIXED_NOW = datetime(2026, 10, 21, 10, 0)


@pytest.fixture(autouse=True)
def no_config_file(monkeypatch):
    """Keep a developer's config file out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def clock():
    """Clock pinned to FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def make_block():
    """Build a 30-minute block starting at hour:minute on the fixed day."""

    def _make(hour: int, minute: int = 0, energy: EnergyLevel = EnergyLevel.MEDIUM, available: bool = True):
        start = datetime(2026, 10, 21, hour, minute)
        return TimeBlock(
            start_time=start,
            end_time=start + timedelta(minutes=30),
            energy_level=energy,
            available=available,
        )

    return _make


@pytest.fixture
def sample_tasks():
    """Tasks of every priority, deliberately not in priority order."""
    return [
        CognitiveTask(id=1, title="Update spreadsheet", priority=Priority.LOW, estimated_pomodoros=1),
        CognitiveTask(id=2, title="Analyze quarterly data", priority=Priority.HIGH, estimated_pomodoros=5),
        CognitiveTask(id=3, title="Brainstorm names", priority=Priority.MEDIUM, estimated_pomodoros=3),
    ]


@pytest.fixture
def now():
    """The pinned current time."""
    return FIXED_NOW
