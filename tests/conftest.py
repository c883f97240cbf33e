"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from fa1codec import AfterTimer, AlarmRecord, PowerLevel, ProgramRecord, TimerStart


@pytest.fixture
def ribs_program() -> ProgramRecord:
    """Program using every control-byte field and the extended temperature range."""
    return ProgramRecord(
        name="Ribs",
        temperature=300,
        power_level=PowerLevel.FAST,
        timer="01:30:00",
        timer_start=TimerStart.AT_SET_TEMPERATURE,
        after_timer=AfterTimer.KEEP_WARM,
    )


@pytest.fixture
def sample_programs(ribs_program: ProgramRecord) -> list[ProgramRecord]:
    """A few programs covering defaults, timers and both temperature ranges."""
    return [
        ribs_program,
        ProgramRecord(name="Pulled Pork", temperature=225),
        ProgramRecord(
            name="Pizza",
            temperature=482,
            powerLevel="Max",
            timer="00:12:30",
            timerStart="At Prompt",
            afterTimer="Stop Cooking",
        ),
    ]


@pytest.fixture
def sample_alarms() -> list[AlarmRecord]:
    """Alarms on both sides of the extension boundary."""
    return [
        AlarmRecord(name="Probe done", temperature=203),
        AlarmRecord(name="Overheat", temperature=400),
    ]
