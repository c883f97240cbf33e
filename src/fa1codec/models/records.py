"""Program and alarm records.

These are the values exchanged with the rest of the application: the encoder
consumes lists of them and the decoder produces them. Field aliases follow the
keys used by the cooking form (``powerLevel``, ``timerStart``, ``afterTimer``)
and enum fields serialize as their display labels, so ``model_dump(mode="json",
by_alias=True)`` yields the form's record layout.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, field_validator

from ..codec.bitpack import TIMER_OFF, format_timer, parse_timer
from ..codec.layout import (
    AFTER_TIMERS,
    ALARM_NAME_LENGTH,
    POWER_LEVELS,
    PROGRAM_NAME_LENGTH,
    TIMER_STARTS,
    AfterTimer,
    PowerLevel,
    TimerStart,
)
from ..exceptions import EncodeError
from .base import BaseRecord


class ProgramRecord(BaseRecord):
    """A cooking program.

    Enum fields accept a member, its label ("Keep Warm"), its member name
    ("KEEP_WARM") or its ordinal; anything else becomes the first member.

    Example:
        >>> program = ProgramRecord(
        ...     name="Brisket", temperature=275, timer="12:00:00", afterTimer="Keep Warm"
        ... )
        >>> program.after_timer
        <AfterTimer.KEEP_WARM: 'Keep Warm'>
    """

    power_level: PowerLevel = Field(default=PowerLevel.SLOW, alias="powerLevel")
    timer: str = TIMER_OFF
    timer_start: TimerStart = Field(default=TimerStart.AT_BEGINNING, alias="timerStart")
    after_timer: AfterTimer = Field(default=AfterTimer.CONTINUE_COOKING, alias="afterTimer")

    fa1_name_length: ClassVar[int] = PROGRAM_NAME_LENGTH

    @field_validator("power_level", mode="before")
    @classmethod
    def _coerce_power_level(cls, value: Any) -> PowerLevel:
        return POWER_LEVELS.coerce(value)

    @field_validator("timer_start", mode="before")
    @classmethod
    def _coerce_timer_start(cls, value: Any) -> TimerStart:
        return TIMER_STARTS.coerce(value)

    @field_validator("after_timer", mode="before")
    @classmethod
    def _coerce_after_timer(cls, value: Any) -> AfterTimer:
        return AFTER_TIMERS.coerce(value)

    @field_validator("timer", mode="before")
    @classmethod
    def _normalize_timer(cls, value: Any) -> str:
        # "off", "no timer", "", None and 00:00:00 all become "off"
        if value is not None and not isinstance(value, str):
            raise ValueError(f"timer must be a string, got {type(value).__name__}")
        try:
            return format_timer(*parse_timer(value))
        except EncodeError as e:
            raise ValueError(str(e)) from e


class AlarmRecord(BaseRecord):
    """A temperature alarm."""

    fa1_name_length: ClassVar[int] = ALARM_NAME_LENGTH
