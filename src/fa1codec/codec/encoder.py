"""FA1 image encoder.

This module provides encode(), which packs program and alarm records into the
fixed 8192-byte FA1 image, and the per-entry helpers it is built on.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..exceptions import CapacityError, EncodeError
from ..models.records import AlarmRecord, ProgramRecord
from ..utils.checksum import entry_checksum
from .bitpack import pack_control, pack_name, parse_timer, split_temperature
from .layout import (
    ALARM_SECTION,
    CHECKSUM_OFFSET,
    CONTROL_OFFSET,
    ENTRY_SIZE,
    EXTENSION_FLAG,
    IMAGE_SIZE,
    PROGRAM_SECTION,
    TEMP_OFFSET,
    TERMINATOR,
    TIMER_OFFSET,
    Section,
)

logger = logging.getLogger(__name__)


def encode(
    programs: Sequence[ProgramRecord] = (),
    alarms: Sequence[AlarmRecord] = (),
) -> bytes:
    """Encode programs and alarms into an FA1 image.

    The image starts as 8192 bytes of 0xFF. Records are written in input order,
    seven per 256-byte block: programs from block 0, alarms from block 16.

    Args:
        programs: Program records, at most 112
        alarms: Alarm records, at most 112

    Returns:
        The 8192-byte image

    Raises:
        CapacityError: If either list holds more than 112 records
        EncodeError: If a record field cannot be encoded

    Example:
        >>> image = encode([ProgramRecord(name="Ribs", temperature=225)], [])
        >>> len(image)
        8192
        >>> image[:4]
        b'Ribs'
    """
    _check_capacity(PROGRAM_SECTION, len(programs))
    _check_capacity(ALARM_SECTION, len(alarms))

    image = bytearray([TERMINATOR]) * IMAGE_SIZE

    for index, program in enumerate(programs):
        offset = PROGRAM_SECTION.slot_offset(index)
        image[offset : offset + ENTRY_SIZE] = encode_program(program)

    for index, alarm in enumerate(alarms):
        offset = ALARM_SECTION.slot_offset(index)
        image[offset : offset + ENTRY_SIZE] = encode_alarm(alarm)

    logger.debug("Encoded %d programs and %d alarms", len(programs), len(alarms))
    return bytes(image)


def encode_program(program: ProgramRecord) -> bytes:
    """Encode a single 36-byte program entry.

    Bytes 26-29 are unused and stay zero.

    Raises:
        EncodeError: If the temperature is out of range or the timer is invalid
    """
    entry = _new_entry(program.name, PROGRAM_SECTION.name_length, program.temperature)

    entry[CONTROL_OFFSET] |= pack_control(
        program.after_timer, program.power_level, program.timer_start
    )
    hours, minutes, seconds = parse_timer(program.timer)
    entry[TIMER_OFFSET : TIMER_OFFSET + 3] = bytes((hours, minutes, seconds))

    entry[CHECKSUM_OFFSET] = entry_checksum(entry)
    return bytes(entry)


def encode_alarm(alarm: AlarmRecord) -> bytes:
    """Encode a single 36-byte alarm entry.

    Only the extension flag of byte 31 is used; timer bytes stay zero.

    Raises:
        EncodeError: If the temperature is out of range
    """
    entry = _new_entry(alarm.name, ALARM_SECTION.name_length, alarm.temperature)
    entry[CHECKSUM_OFFSET] = entry_checksum(entry)
    return bytes(entry)


def _new_entry(name: str, name_length: int, temperature: int) -> bytearray:
    """Build a zero-filled entry holding the name and temperature fields."""
    if not isinstance(name, str):
        raise EncodeError(f"name: expected str, got {type(name).__name__}")

    entry = bytearray(ENTRY_SIZE)
    entry[:name_length] = pack_name(name, name_length)

    low_byte, extended = split_temperature(temperature)
    entry[TEMP_OFFSET] = low_byte
    if extended:
        entry[CONTROL_OFFSET] = EXTENSION_FLAG
    return entry


def _check_capacity(section: Section, count: int) -> None:
    if count > section.capacity:
        raise CapacityError(
            f"{count} {section.name}s exceed the image capacity of "
            f"{section.capacity} ({section.block_count} blocks of "
            f"{section.capacity // section.block_count})"
        )
