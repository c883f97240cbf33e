"""Unit tests for record models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fa1codec import AfterTimer, AlarmRecord, PowerLevel, ProgramRecord, TimerStart
from fa1codec.models.base import FROM_IMAGE


class TestProgramRecord:
    """Test ProgramRecord validation."""

    def test_defaults(self) -> None:
        """Only name and temperature are required."""
        program = ProgramRecord(name="Simple", temperature=200)

        assert program.power_level is PowerLevel.SLOW
        assert program.timer == "off"
        assert program.timer_start is TimerStart.AT_BEGINNING
        assert program.after_timer is AfterTimer.CONTINUE_COOKING

    def test_form_aliases(self) -> None:
        """camelCase keys and display labels from the form are accepted."""
        program = ProgramRecord.model_validate(
            {
                "name": "Brisket",
                "temperature": 275,
                "powerLevel": "Medium",
                "timer": "12:00:00",
                "timerStart": "At Set Temperature",
                "afterTimer": "Keep Warm",
            }
        )

        assert program.power_level is PowerLevel.MEDIUM
        assert program.timer_start is TimerStart.AT_SET_TEMPERATURE
        assert program.after_timer is AfterTimer.KEEP_WARM

    def test_unknown_labels_fall_back(self) -> None:
        """Unrecognized enum labels become the first codebook entry."""
        program = ProgramRecord(
            name="Odd", temperature=100, powerLevel="Turbo", afterTimer="Self Destruct"
        )

        assert program.power_level is PowerLevel.SLOW
        assert program.after_timer is AfterTimer.CONTINUE_COOKING

    def test_ordinal_input(self) -> None:
        """Enum fields also accept ordinals."""
        program = ProgramRecord(name="Ord", temperature=100, power_level=3, timer_start=2)

        assert program.power_level is PowerLevel.MAX
        assert program.timer_start is TimerStart.AT_PROMPT

    @pytest.mark.parametrize("timer", ["off", "", "no timer", None, "00:00:00"])
    def test_timer_off_spellings(self, timer: str | None) -> None:
        """Every way of saying 'no timer' normalizes to 'off'."""
        assert ProgramRecord(name="T", temperature=1, timer=timer).timer == "off"

    def test_timer_normalized(self) -> None:
        """Timers are stored zero padded."""
        assert ProgramRecord(name="T", temperature=1, timer="1:5:0").timer == "01:05:00"

    @pytest.mark.parametrize("timer", ["tomorrow", "1:30", 90])
    def test_invalid_timer(self, timer: object) -> None:
        """Timers must be 'off' or HH:MM:SS text."""
        with pytest.raises(ValidationError):
            ProgramRecord(name="T", temperature=1, timer=timer)

    @pytest.mark.parametrize("temperature", [-1, 483])
    def test_temperature_bounds(self, temperature: int) -> None:
        """Temperature must be within [0, 482]."""
        with pytest.raises(ValidationError):
            ProgramRecord(name="T", temperature=temperature)

    def test_non_ascii_name(self) -> None:
        """Names must be ASCII so each character is one byte."""
        with pytest.raises(ValidationError, match="ASCII"):
            ProgramRecord(name="Crème brûlée", temperature=180)

    def test_image_context_keeps_any_name(self) -> None:
        """Records read from an image skip the ASCII check."""
        program = ProgramRecord.model_validate(
            {"name": "Cr\u00e8me", "temperature": 180}, context=FROM_IMAGE
        )
        assert program.name == "Cr\u00e8me"

    def test_long_name_allowed(self) -> None:
        """Long names are accepted and truncated only when encoded."""
        assert len(ProgramRecord(name="x" * 40, temperature=1).name) == 40

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            ProgramRecord(name="T", temperature=1, colour="red")

    def test_validate_assignment(self) -> None:
        """Assignments are validated too."""
        program = ProgramRecord(name="T", temperature=1)
        program.after_timer = "Repeat Timer"  # type: ignore[assignment]

        assert program.after_timer is AfterTimer.REPEAT_TIMER
        with pytest.raises(ValidationError):
            program.temperature = 999

    def test_dump_uses_form_layout(self) -> None:
        """JSON dumps use camelCase keys and display labels."""
        program = ProgramRecord(name="T", temperature=1, power_level=PowerLevel.FAST)

        assert program.model_dump(mode="json", by_alias=True) == {
            "name": "T",
            "temperature": 1,
            "powerLevel": "Fast",
            "timer": "off",
            "timerStart": "At Beginning",
            "afterTimer": "Continue Cooking",
        }


class TestAlarmRecord:
    """Test AlarmRecord validation."""

    def test_fields(self) -> None:
        """Alarms have only name and temperature."""
        alarm = AlarmRecord(name="Done", temperature=203)
        assert alarm.model_dump() == {"name": "Done", "temperature": 203}

    def test_no_program_fields(self) -> None:
        """Program-only fields are rejected."""
        with pytest.raises(ValidationError):
            AlarmRecord(name="Done", temperature=203, timer="01:00:00")

    def test_name_widths(self) -> None:
        """Each record type knows its name field width."""
        assert AlarmRecord.fa1_name_length == 20
        assert ProgramRecord.fa1_name_length == 26
