"""Image report CLI command."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from ..codec.decoder import decode_alarm, decode_program
from ..codec.layout import ALARM_SECTION, ENTRY_SIZE, PROGRAM_SECTION, TERMINATOR, Section
from ..models.records import ProgramRecord
from ..utils.checksum import find_checksum_mismatches, verify_entry_checksum


def report_file(file_path: Path) -> None:
    """Print a slot-by-slot report of an FA1 file.

    Args:
        file_path: Path to the FA1 image
    """
    image = file_path.read_bytes()
    mismatches = find_checksum_mismatches(image)

    print("|" * 7, "fa1codec: FA1 Image Codec", "|" * 7)
    print(f"{file_path.name}: {len(image)} bytes")
    print()

    for section in (PROGRAM_SECTION, ALARM_SECTION):
        report_section(image, section)

    print(f"{'=' * 24} Summary {'=' * 24}")
    if mismatches:
        print(f"{len(mismatches)} entr{'ies' if len(mismatches) != 1 else 'y'} with bad checksum")
    else:
        print("All checksums OK")
    print()


def report_section(image: bytes, section: Section) -> None:
    """Print the occupied slots of one section.

    Args:
        image: FA1 image bytes
        section: Section to report
    """
    title = f" {section.name.capitalize()}s "
    print(f"{'-' * 26}{title}{'-' * 26}")

    used = 0
    for block, slot, offset in section.iter_slots():
        if image[offset] == TERMINATOR:
            continue
        entry = bytes(image[offset : offset + ENTRY_SIZE])
        decoder = decode_program if section is PROGRAM_SECTION else decode_alarm
        try:
            record = decoder(entry)
        except ValidationError:
            print(f"  [{block:2d}.{slot}] @{offset:04X} <unreadable>")
            continue
        if record is None:
            continue
        used += 1

        slot_desc = f"[{block:2d}.{slot}] @{offset:04X} {record.name}"
        status = "ok" if verify_entry_checksum(entry) else "BAD CHECKSUM"
        detail = f"{record.temperature}"
        if isinstance(record, ProgramRecord):
            detail += (
                f" {record.power_level.value}, timer {record.timer}"
                f" ({record.timer_start.value}, then {record.after_timer.value})"
            )
        dots = "." * max(1, 40 - len(slot_desc))
        print(f"  {slot_desc}{dots}{detail} [{status}]")

    print(f"  {used} of {section.capacity} slots used")
    print()
