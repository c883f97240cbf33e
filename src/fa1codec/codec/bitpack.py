"""Field-level packing and unpacking for FA1 entries.

This module converts between record field values and the raw bytes of an
entry: name fields, the split temperature encoding, the control byte and the
three timer bytes. All helpers operate on single unsigned bytes.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from ..exceptions import EncodeError
from .layout import (
    AFTER_TIMER_SHIFT,
    AFTER_TIMERS,
    EXTENSION_FLAG,
    FIELD_MASK,
    POWER_LEVEL_SHIFT,
    POWER_LEVELS,
    TEMP_MAX,
    TEMP_MIN,
    TEMP_MOD,
    TIMER_START_SHIFT,
    TIMER_STARTS,
    AfterTimer,
    PowerLevel,
    TimerStart,
)

TIMER_OFF = "off"
TIMER_OFF_ALIASES = frozenset({"", TIMER_OFF, "no timer"})

_TIMER_PATTERN = re.compile(r"^\s*(\d+):(\d+):(\d+)\s*$")


class ControlByte(NamedTuple):
    """Fields carried by byte 31 of a program entry."""

    after_timer: AfterTimer
    power_level: PowerLevel
    timer_start: TimerStart
    extended: bool


def split_temperature(temperature: int) -> tuple[int, bool]:
    """Split a temperature into its low byte and extension flag.

    Values above 255 are stored as ``temperature - 255`` with the flag set, so
    the largest value 482 becomes (227, True).

    Args:
        temperature: Temperature in device units, 0-482

    Returns:
        (low_byte, extended)

    Raises:
        EncodeError: If temperature is outside [0, 482]
    """
    if not isinstance(temperature, int) or isinstance(temperature, bool):
        raise EncodeError(f"temperature: expected int, got {type(temperature).__name__}")
    if temperature < TEMP_MIN or temperature > TEMP_MAX:
        raise EncodeError(
            f"temperature {temperature} out of bounds [{TEMP_MIN}, {TEMP_MAX}]"
        )
    if temperature > TEMP_MOD:
        return temperature - TEMP_MOD, True
    return temperature, False


def join_temperature(low_byte: int, extended: bool) -> int:
    """Inverse of split_temperature()."""
    return low_byte + TEMP_MOD if extended else low_byte


def pack_control(
    after_timer: AfterTimer | str,
    power_level: PowerLevel | str,
    timer_start: TimerStart | str,
    extended: bool = False,
) -> int:
    """Assemble the program control byte.

    Unrecognized labels pack as ordinal 0.
    """
    byte = (
        ((AFTER_TIMERS.ordinal(after_timer) & FIELD_MASK) << AFTER_TIMER_SHIFT)
        | ((POWER_LEVELS.ordinal(power_level) & FIELD_MASK) << POWER_LEVEL_SHIFT)
        | ((TIMER_STARTS.ordinal(timer_start) & FIELD_MASK) << TIMER_START_SHIFT)
    )
    if extended:
        byte |= EXTENSION_FLAG
    return byte


def unpack_control(byte: int) -> ControlByte:
    """Split a control byte into its fields.

    Ordinals without a codebook entry (timer start 3) fall back to the first
    label of the codebook. Bit 4 is ignored.
    """
    return ControlByte(
        after_timer=AFTER_TIMERS.member((byte >> AFTER_TIMER_SHIFT) & FIELD_MASK),
        power_level=POWER_LEVELS.member((byte >> POWER_LEVEL_SHIFT) & FIELD_MASK),
        timer_start=TIMER_STARTS.member((byte >> TIMER_START_SHIFT) & FIELD_MASK),
        extended=bool(byte & EXTENSION_FLAG),
    )


def parse_timer(timer: str | None) -> tuple[int, int, int]:
    """Parse timer text into (hours, minutes, seconds).

    "off", "no timer", an empty string and None all mean no timer and parse as
    (0, 0, 0). Parts are not clamped, but each must fit in one byte.

    Raises:
        EncodeError: If the text is not HH:MM:SS or a part exceeds 255
    """
    if timer is None or timer.strip().lower() in TIMER_OFF_ALIASES:
        return 0, 0, 0
    match = _TIMER_PATTERN.match(timer)
    if match is None:
        raise EncodeError(f"timer {timer!r} is not 'off' or HH:MM:SS")
    hours, minutes, seconds = (int(part) for part in match.groups())
    for label, part in (("hours", hours), ("minutes", minutes), ("seconds", seconds)):
        if part > 0xFF:
            raise EncodeError(f"timer {label} {part} does not fit in one byte")
    return hours, minutes, seconds


def format_timer(hours: int, minutes: int, seconds: int) -> str:
    """Format timer bytes, "off" when all three are zero."""
    if hours == 0 and minutes == 0 and seconds == 0:
        return TIMER_OFF
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def pack_name(name: str, width: int) -> bytes:
    """Encode a name as ASCII, truncated and zero padded to width bytes.

    Raises:
        EncodeError: If the name contains non-ASCII characters
    """
    try:
        raw = name.encode("ascii")
    except UnicodeEncodeError as e:
        raise EncodeError(f"name {name!r} contains non-ASCII characters") from e
    return raw[:width].ljust(width, b"\x00")


def unpack_name(field: bytes) -> str:
    """Decode a name field: stop at the first zero byte, one byte per character."""
    end = field.find(b"\x00")
    if end >= 0:
        field = field[:end]
    return field.decode("latin-1").strip()
