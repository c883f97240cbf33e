"""fa1codec: FA1 Image Codec

A Python library for reading and writing FA1 images, the fixed 8192-byte
configuration files a cooking-appliance controller loads its programs and
alarms from.

Key Features:
- Pydantic-based program and alarm records
- Bit-exact encoder for the device layout
- Tolerant decoder that skips empty and unreadable slots
- Opt-in checksum inspection
- Command-line tool for dumping, building and checking images

Quick Start:
    >>> from fa1codec import AlarmRecord, ProgramRecord, decode, encode
    >>>
    >>> brisket = ProgramRecord(
    ...     name="Brisket",
    ...     temperature=275,
    ...     powerLevel="Slow",
    ...     timer="12:00:00",
    ...     timerStart="At Set Temperature",
    ...     afterTimer="Keep Warm",
    ... )
    >>> image = encode([brisket], [AlarmRecord(name="Probe done", temperature=203)])
    >>> programs, alarms = decode(image)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
    ALARM_SECTION,
    IMAGE_SIZE,
    PROGRAM_SECTION,
    AfterTimer,
    Fa1Contents,
    PowerLevel,
    TimerStart,
    decode,
    decode_alarm,
    decode_program,
    encode,
    encode_alarm,
    encode_program,
)
from .exceptions import CapacityError, DecodeError, EncodeError, Fa1Error, RecordFormatError
from .fileio import DEFAULT_FILENAME, dump_records, load_records, read_image, write_image
from .models import AlarmRecord, ProgramRecord
from .utils import (
    ChecksumMismatch,
    checksum8,
    entry_checksum,
    find_checksum_mismatches,
    verify_entry_checksum,
)

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_program",
    "encode_alarm",
    "decode_program",
    "decode_alarm",
    "Fa1Contents",
    # Records
    "ProgramRecord",
    "AlarmRecord",
    "PowerLevel",
    "TimerStart",
    "AfterTimer",
    # Layout
    "IMAGE_SIZE",
    "PROGRAM_SECTION",
    "ALARM_SECTION",
    # Exceptions
    "Fa1Error",
    "EncodeError",
    "CapacityError",
    "DecodeError",
    "RecordFormatError",
    # Files
    "DEFAULT_FILENAME",
    "read_image",
    "write_image",
    "dump_records",
    "load_records",
    # Checksum
    "ChecksumMismatch",
    "checksum8",
    "entry_checksum",
    "verify_entry_checksum",
    "find_checksum_mismatches",
    # Version
    "__version__",
]
