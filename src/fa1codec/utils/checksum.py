"""Entry checksum calculations.

Every FA1 entry ends with a one-byte checksum: the unsigned sum of the 35
preceding bytes, modulo 256. The appliance uses it to validate entries it
loads. The decoder in this package never checks it, so a tampered checksum
does not change what decode() returns; find_checksum_mismatches() is the
opt-in way to see what the device would reject.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..codec.layout import (
    ALARM_SECTION,
    CHECKSUM_OFFSET,
    ENTRY_SIZE,
    IMAGE_SIZE,
    PROGRAM_SECTION,
    TERMINATOR,
)
from ..exceptions import DecodeError


@dataclass(frozen=True)
class ChecksumMismatch:
    """An occupied slot whose stored checksum disagrees with its contents.

    Attributes:
        section: "program" or "alarm"
        block: Block index in the image (0-31)
        slot: Entry index inside the block (0-6)
        offset: Byte offset of the entry in the image
        stored: Checksum byte found in the entry
        calculated: Checksum computed from the entry's first 35 bytes
    """

    section: str
    block: int
    slot: int
    offset: int
    stored: int
    calculated: int


def checksum8(data: bytes) -> int:
    """Calculate the 8-bit additive checksum of data.

    Example:
        >>> checksum8(b"\\x01\\x02\\xff")
        2
    """
    return sum(data) & 0xFF


def entry_checksum(entry: bytes) -> int:
    """Calculate the checksum of an entry (bytes [0, 35))."""
    return checksum8(entry[:CHECKSUM_OFFSET])


def verify_entry_checksum(entry: bytes) -> bool:
    """Return True if byte 35 of the entry matches its calculated checksum.

    Raises:
        ValueError: If entry is shorter than 36 bytes
    """
    if len(entry) < ENTRY_SIZE:
        raise ValueError(f"entry must be {ENTRY_SIZE} bytes, got {len(entry)}")
    return entry[CHECKSUM_OFFSET] == entry_checksum(entry)


def find_checksum_mismatches(image: bytes) -> list[ChecksumMismatch]:
    """List every occupied slot of an image whose checksum is wrong.

    Empty slots (first byte 0xFF) are not checked.

    Raises:
        DecodeError: If image is shorter than 8192 bytes
    """
    if len(image) < IMAGE_SIZE:
        raise DecodeError(f"FA1 image must be {IMAGE_SIZE} bytes, got {len(image)}")

    mismatches: list[ChecksumMismatch] = []
    for section in (PROGRAM_SECTION, ALARM_SECTION):
        for block, slot, offset in section.iter_slots():
            entry = image[offset : offset + ENTRY_SIZE]
            if entry[0] == TERMINATOR:
                continue
            calculated = entry_checksum(entry)
            if entry[CHECKSUM_OFFSET] != calculated:
                mismatches.append(
                    ChecksumMismatch(
                        section=section.name,
                        block=block,
                        slot=slot,
                        offset=offset,
                        stored=entry[CHECKSUM_OFFSET],
                        calculated=calculated,
                    )
                )
    return mismatches
