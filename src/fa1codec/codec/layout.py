"""Fixed layout of the FA1 image.

The image is 8192 bytes split into two 4096-byte sections: programs in blocks
0-15 and alarms in blocks 16-31. Every block is 256 bytes and holds up to seven
36-byte entries; the last 4 bytes of each block are filler. Bytes not written by
an entry hold the terminator value 0xFF, and an entry whose first byte is 0xFF
is an empty slot.

Entry layout (offsets relative to the entry start):

    [0, N)   name, ASCII, zero padded (N = 26 for programs, 20 for alarms)
    30       temperature low byte
    31       control byte (programs) / extension flag only (alarms)
    32-34    timer hours, minutes, seconds (programs only)
    35       checksum: sum of bytes [0, 35) mod 256

Control byte (bit 7 is the high bit):

    bit 7     temperature extension flag (add 255 to byte 30)
    bits 6-5  after-timer ordinal
    bits 3-2  power-level ordinal
    bits 1-0  timer-start ordinal

This module is read-only shared state for the encoder and decoder.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

from ..exceptions import CapacityError

# Image geometry
IMAGE_SIZE = 8192
ALARM_OFFSET = 4096
BLOCK_SIZE = 256
ENTRY_SIZE = 36
ENTRIES_PER_BLOCK = 7
BLOCKS_PER_SECTION = ALARM_OFFSET // BLOCK_SIZE  # 16

TERMINATOR = 0xFF

# Name field widths
PROGRAM_NAME_LENGTH = 26
ALARM_NAME_LENGTH = 20

# Temperature domain; values above TEMP_MOD use the extension flag
TEMP_MIN = 0
TEMP_MAX = 482
TEMP_MOD = 255

# Entry byte offsets
TEMP_OFFSET = 30
CONTROL_OFFSET = 31
TIMER_OFFSET = 32
CHECKSUM_OFFSET = 35

# Control byte fields
EXTENSION_FLAG = 0x80
AFTER_TIMER_SHIFT = 5
POWER_LEVEL_SHIFT = 2
TIMER_START_SHIFT = 0
FIELD_MASK = 0x03


@dataclass(frozen=True)
class Section:
    """One of the two record pools in the image.

    Attributes:
        name: Section name ("program" or "alarm")
        first_block: Index of the first block of the section
        block_count: Number of blocks in the section
        name_length: Width of the name field in bytes
    """

    name: str
    first_block: int
    block_count: int
    name_length: int

    @property
    def capacity(self) -> int:
        """Maximum number of records the section can hold."""
        return self.block_count * ENTRIES_PER_BLOCK

    @property
    def start(self) -> int:
        """Byte offset of the section inside the image."""
        return self.first_block * BLOCK_SIZE

    def slot_offset(self, index: int) -> int:
        """Return the image byte offset of the index-th record of this section.

        Raises:
            CapacityError: If index is outside [0, capacity)
        """
        if index < 0 or index >= self.capacity:
            raise CapacityError(
                f"{self.name} index {index} out of range "
                f"(section holds {self.capacity} entries)"
            )
        block, slot = divmod(index, ENTRIES_PER_BLOCK)
        return (self.first_block + block) * BLOCK_SIZE + slot * ENTRY_SIZE

    def iter_slots(self) -> Iterator[tuple[int, int, int]]:
        """Yield (block, slot, offset) for every slot, in image order."""
        for block in range(self.first_block, self.first_block + self.block_count):
            for slot in range(ENTRIES_PER_BLOCK):
                yield block, slot, block * BLOCK_SIZE + slot * ENTRY_SIZE


PROGRAM_SECTION = Section(
    name="program",
    first_block=0,
    block_count=BLOCKS_PER_SECTION,
    name_length=PROGRAM_NAME_LENGTH,
)
ALARM_SECTION = Section(
    name="alarm",
    first_block=ALARM_OFFSET // BLOCK_SIZE,
    block_count=BLOCKS_PER_SECTION,
    name_length=ALARM_NAME_LENGTH,
)


class PowerLevel(enum.Enum):
    """Heating power level (2 bits of the control byte)."""

    SLOW = "Slow"
    MEDIUM = "Medium"
    FAST = "Fast"
    MAX = "Max"


class TimerStart(enum.Enum):
    """When the program timer starts counting (2 bits of the control byte)."""

    AT_BEGINNING = "At Beginning"
    AT_SET_TEMPERATURE = "At Set Temperature"
    AT_PROMPT = "At Prompt"


class AfterTimer(enum.Enum):
    """What the appliance does when the timer expires (2 bits of the control byte)."""

    CONTINUE_COOKING = "Continue Cooking"
    STOP_COOKING = "Stop Cooking"
    KEEP_WARM = "Keep Warm"
    REPEAT_TIMER = "Repeat Timer"


E = TypeVar("E", bound=enum.Enum)


class Codebook(Generic[E]):
    """Bidirectional ordinal <-> member map for one control-byte enum.

    The ordinal of a member is its declaration position. Unknown ordinals and
    unknown labels resolve to the first member, never to an error.

    Example:
        >>> POWER_LEVELS.ordinal(PowerLevel.FAST)
        2
        >>> POWER_LEVELS.member(7)
        <PowerLevel.SLOW: 'Slow'>
        >>> POWER_LEVELS.coerce("Medium")
        <PowerLevel.MEDIUM: 'Medium'>
    """

    def __init__(self, enum_type: type[E]) -> None:
        self.enum_type = enum_type
        self._members: list[E] = list(enum_type)
        self._ordinals: dict[E, int] = {m: i for i, m in enumerate(self._members)}

    @property
    def default(self) -> E:
        return self._members[0]

    def __len__(self) -> int:
        return len(self._members)

    def ordinal(self, value: Any) -> int:
        """Return the ordinal for a member or label, 0 if unrecognized."""
        return self._ordinals[self.coerce(value)]

    def member(self, ordinal: int) -> E:
        """Return the member for an ordinal, the default if out of range."""
        if 0 <= ordinal < len(self._members):
            return self._members[ordinal]
        return self.default

    def coerce(self, value: Any) -> E:
        """Resolve a member, label, member name or ordinal to a member.

        Anything unrecognized resolves to the default member.
        """
        if isinstance(value, self.enum_type):
            return value
        if isinstance(value, bool):
            return self.default
        if isinstance(value, int):
            return self.member(value)
        if isinstance(value, str):
            for m in self._members:
                if value == m.value or value == m.name:
                    return m
        return self.default


POWER_LEVELS: Codebook[PowerLevel] = Codebook(PowerLevel)
TIMER_STARTS: Codebook[TimerStart] = Codebook(TimerStart)
AFTER_TIMERS: Codebook[AfterTimer] = Codebook(AfterTimer)
