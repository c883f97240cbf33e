"""Reading and writing FA1 files and record interchange documents.

FA1 images are written to ``CMC850.FA1`` by default, the file name the
appliance loads. Records can also be exchanged as JSON in the same shape the
cooking form uses::

    {
      "programs": [
        {"name": "Brisket", "temperature": 275, "powerLevel": "Slow",
         "timer": "12:00:00", "timerStart": "At Set Temperature",
         "afterTimer": "Keep Warm"}
      ],
      "alarms": [{"name": "Probe done", "temperature": 203}]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from .codec import Fa1Contents, decode, encode
from .exceptions import RecordFormatError
from .models import AlarmRecord, ProgramRecord

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "CMC850.FA1"

PathLike = Union[str, Path]

_PROGRAM_LIST = TypeAdapter(list[ProgramRecord])
_ALARM_LIST = TypeAdapter(list[AlarmRecord])


def write_image(
    path: PathLike,
    programs: Sequence[ProgramRecord] = (),
    alarms: Sequence[AlarmRecord] = (),
) -> Path:
    """Encode records and write the image to path.

    If path is an existing directory, the image is written to
    ``CMC850.FA1`` inside it.

    Returns:
        The path written

    Raises:
        CapacityError: If either list holds more than 112 records
        EncodeError: If a record cannot be encoded
        OSError: If the file cannot be written
    """
    target = Path(path)
    if target.is_dir():
        target = target / DEFAULT_FILENAME

    image = encode(programs, alarms)
    target.write_bytes(image)
    logger.info("Wrote %d programs and %d alarms to %s", len(programs), len(alarms), target)
    return target


def read_image(path: PathLike) -> Fa1Contents:
    """Read and decode an FA1 file.

    Raises:
        DecodeError: If the file is shorter than 8192 bytes
        OSError: If the file cannot be read
    """
    target = Path(path)
    data = target.read_bytes()
    logger.info("Parsing FA1 file %s (%d bytes)", target, len(data))
    return decode(data)


def dump_records(contents: Fa1Contents, indent: int | None = 2) -> str:
    """Serialize records to the JSON interchange format."""
    document = {
        "programs": [p.model_dump(mode="json", by_alias=True) for p in contents.programs],
        "alarms": [a.model_dump(mode="json", by_alias=True) for a in contents.alarms],
    }
    return json.dumps(document, indent=indent)


def load_records(text: str | bytes) -> Fa1Contents:
    """Parse a JSON interchange document into records.

    Either list may be omitted and is then empty. Bytes are decoded as JSON
    text (UTF-8, UTF-16 or UTF-32).

    Raises:
        RecordFormatError: If the text is not valid JSON or a record is invalid
    """
    try:
        document: Any = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RecordFormatError(f"Invalid JSON: {e}") from e

    if not isinstance(document, dict):
        raise RecordFormatError("Record document must be a JSON object")

    try:
        programs = _PROGRAM_LIST.validate_python(document.get("programs", []))
        alarms = _ALARM_LIST.validate_python(document.get("alarms", []))
    except ValidationError as e:
        raise RecordFormatError(f"Invalid record data: {e}") from e

    return Fa1Contents(programs, alarms)
