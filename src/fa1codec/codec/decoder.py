"""FA1 image decoder.

This module provides decode(), which reads every occupied slot of an FA1 image
back into program and alarm records.

Decoding is total over well-sized images: each slot is read on its own, and a
slot that does not hold a usable record is skipped rather than failing the
whole image. The checksum byte (35) of each entry is deliberately NOT verified
here. It exists for the appliance; use
fa1codec.utils.find_checksum_mismatches() to inspect it.
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Optional, TypeVar

from pydantic import ValidationError

from ..exceptions import DecodeError
from ..models.base import FROM_IMAGE
from ..models.records import AlarmRecord, ProgramRecord
from .bitpack import format_timer, join_temperature, unpack_control, unpack_name
from .layout import (
    ALARM_SECTION,
    CONTROL_OFFSET,
    ENTRY_SIZE,
    EXTENSION_FLAG,
    IMAGE_SIZE,
    PROGRAM_SECTION,
    TEMP_OFFSET,
    TERMINATOR,
    TIMER_OFFSET,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Fa1Contents(NamedTuple):
    """Records decoded from an FA1 image, in block/slot order."""

    programs: list[ProgramRecord]
    alarms: list[AlarmRecord]


def decode(image: bytes) -> Fa1Contents:
    """Decode an FA1 image into its program and alarm records.

    Args:
        image: At least 8192 bytes; anything past offset 8192 is ignored

    Returns:
        Fa1Contents(programs, alarms), which unpacks as a 2-tuple

    Raises:
        DecodeError: If image is shorter than 8192 bytes

    Example:
        >>> programs, alarms = decode(image)
        >>> [p.name for p in programs]
        ['Ribs']
    """
    if len(image) < IMAGE_SIZE:
        raise DecodeError(
            f"Truncated FA1 image: expected {IMAGE_SIZE} bytes, got {len(image)}"
        )

    programs: list[ProgramRecord] = []
    for block, slot, offset in PROGRAM_SECTION.iter_slots():
        if image[offset] == TERMINATOR:
            continue
        entry = bytes(image[offset : offset + ENTRY_SIZE])
        program = _decode_slot(decode_program, entry, block, slot)
        if program is not None:
            logger.debug("Found program at block %d slot %d: %r", block, slot, program.name)
            programs.append(program)

    alarms: list[AlarmRecord] = []
    for block, slot, offset in ALARM_SECTION.iter_slots():
        if image[offset] == TERMINATOR:
            continue
        entry = bytes(image[offset : offset + ENTRY_SIZE])
        alarm = _decode_slot(decode_alarm, entry, block, slot)
        if alarm is not None:
            logger.debug("Found alarm at block %d slot %d: %r", block, slot, alarm.name)
            alarms.append(alarm)

    logger.debug("Decoded %d programs and %d alarms", len(programs), len(alarms))
    return Fa1Contents(programs, alarms)


def decode_program(entry: bytes) -> Optional[ProgramRecord]:
    """Decode a 36-byte program entry.

    Returns:
        The program, or None if its name is empty after trimming

    Raises:
        ValidationError: If the decoded fields do not form a valid record
    """
    name = unpack_name(bytes(entry[: PROGRAM_SECTION.name_length]))
    if not name:
        return None

    control = unpack_control(entry[CONTROL_OFFSET])
    hours, minutes, seconds = entry[TIMER_OFFSET : TIMER_OFFSET + 3]

    return ProgramRecord.model_validate(
        {
            "name": name,
            "temperature": join_temperature(entry[TEMP_OFFSET], control.extended),
            "power_level": control.power_level,
            "timer": format_timer(hours, minutes, seconds),
            "timer_start": control.timer_start,
            "after_timer": control.after_timer,
        },
        context=FROM_IMAGE,
    )


def decode_alarm(entry: bytes) -> Optional[AlarmRecord]:
    """Decode a 36-byte alarm entry.

    Returns:
        The alarm, or None if its name is empty after trimming

    Raises:
        ValidationError: If the decoded fields do not form a valid record
    """
    name = unpack_name(bytes(entry[: ALARM_SECTION.name_length]))
    if not name:
        return None

    extended = bool(entry[CONTROL_OFFSET] & EXTENSION_FLAG)
    return AlarmRecord.model_validate(
        {"name": name, "temperature": join_temperature(entry[TEMP_OFFSET], extended)},
        context=FROM_IMAGE,
    )


def _decode_slot(
    decoder: Callable[[bytes], Optional[R]], entry: bytes, block: int, slot: int
) -> Optional[R]:
    """Run an entry decoder, turning an invalid slot into None."""
    try:
        return decoder(entry)
    except ValidationError as e:
        logger.warning(
            "Skipping unreadable entry at block %d slot %d: %s",
            block,
            slot,
            e.errors()[0]["msg"],
        )
        return None
