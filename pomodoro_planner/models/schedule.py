"""Scheduling models: calendar events, time blocks and cognitive profiles."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pomodoro_planner.enums import Chronotype, EnergyLevel
from pomodoro_planner.models.task import CognitiveTask


class CalendarEvent(BaseModel):
    """An existing commitment that makes overlapping time blocks unavailable."""

    start: datetime
    end: datetime
    title: str | None = None

    @model_validator(mode="after")
    def validate_range(self) -> CalendarEvent:
        if self.end < self.start:
            raise ValueError("Event end must not be before its start")
        return self


class TimeBlock(BaseModel):
    """A fixed-size slot of the working day with its expected energy level."""

    model_config = ConfigDict(frozen=True)

    start_time: datetime
    end_time: datetime
    energy_level: EnergyLevel
    available: bool = True

    def overlaps(self, event: CalendarEvent) -> bool:
        """Whether the half-open block interval intersects the event."""
        return self.start_time < event.end and self.end_time > event.start


class ScheduledTask(BaseModel):
    """A task paired with the time block it was assigned to."""

    task: CognitiveTask
    time_block: TimeBlock


# Hour sets per chronotype: (peak, productive, low energy)
CHRONOTYPE_HOURS: dict[Chronotype, tuple[list[int], list[int], list[int]]] = {
    Chronotype.EARLY_BIRD: (
        [8, 9, 10, 11],
        [7, 8, 9, 10, 11, 12, 13, 14, 15],
        [16, 17, 18, 19, 20, 21, 22, 23, 0, 1, 2, 3, 4],
    ),
    Chronotype.INTERMEDIATE: (
        [9, 10, 11, 15, 16],
        [8, 9, 10, 11, 14, 15, 16, 17],
        [12, 13, 21, 22, 23, 0, 1, 2, 3, 4, 5],
    ),
    Chronotype.NIGHT_OWL: (
        [18, 19, 20, 21],
        [15, 16, 17, 18, 19, 20, 21, 22, 23],
        [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
    ),
}


class CognitiveProfile(BaseModel):
    """User-level rhythm that maps hours of the day to energy levels."""

    chronotype: Chronotype = Chronotype.INTERMEDIATE
    peak_hours: list[int] = Field(default_factory=lambda: list(CHRONOTYPE_HOURS[Chronotype.INTERMEDIATE][0]))
    productive_hours: list[int] = Field(
        default_factory=lambda: list(CHRONOTYPE_HOURS[Chronotype.INTERMEDIATE][1])
    )
    low_energy_hours: list[int] = Field(
        default_factory=lambda: list(CHRONOTYPE_HOURS[Chronotype.INTERMEDIATE][2])
    )
    focus_session_duration: int = Field(default=25, ge=1, description="Minutes")
    break_duration: int = Field(default=5, ge=1, description="Minutes")
    context_switching_cost: int = Field(default=5, ge=1, le=10)
    distraction_sensitivity: int = Field(default=5, ge=1, le=10)

    @field_validator("peak_hours", "productive_hours", "low_energy_hours")
    @classmethod
    def validate_hours(cls, v: list[int]) -> list[int]:
        for hour in v:
            if not 0 <= hour <= 23:
                raise ValueError(f"Hour {hour} is outside 0-23")
        return v

    @classmethod
    def for_chronotype(
        cls,
        chronotype: Chronotype,
        focus_session_duration: int = 25,
        break_duration: int = 5,
    ) -> CognitiveProfile:
        """Build the preset profile for a chronotype."""
        peak, productive, low = CHRONOTYPE_HOURS[chronotype]
        return cls(
            chronotype=chronotype,
            peak_hours=list(peak),
            productive_hours=list(productive),
            low_energy_hours=list(low),
            focus_session_duration=focus_session_duration,
            break_duration=break_duration,
        )

    def energy_at(self, hour: int) -> EnergyLevel:
        """Energy level for an hour of the day; peak wins over productive."""
        if hour in self.peak_hours:
            return EnergyLevel.HIGH
        if hour in self.productive_hours:
            return EnergyLevel.MEDIUM
        if hour in self.low_energy_hours:
            return EnergyLevel.LOW
        return EnergyLevel.MEDIUM
