"""Exception hierarchy for fa1codec.

All exceptions inherit from Fa1Error so callers can catch any codec-specific
error with a single except clause. Problems with a single entry inside an image
are not errors: the decoder skips such slots and keeps going.
"""

from __future__ import annotations


class Fa1Error(Exception):
    """Base exception for all fa1codec errors."""

    pass


class EncodeError(Fa1Error):
    """Raised when a record cannot be written into an image.

    Examples:
        - Temperature outside [0, 482]
        - Timer part that does not fit in one byte
        - Malformed timer text
    """

    pass


class CapacityError(EncodeError):
    """Raised when a section cannot hold the requested number of records.

    Each section (programs, alarms) holds 16 blocks of 7 entries. Writing a
    113th record would spill into the next section or past the end of the image.
    """

    pass


class DecodeError(Fa1Error):
    """Raised when a byte sequence is not an FA1 image.

    Examples:
        - Image shorter than 8192 bytes
    """

    pass


class RecordFormatError(Fa1Error):
    """Raised when a record interchange (JSON) document cannot be loaded.

    Examples:
        - Invalid JSON
        - Missing "programs"/"alarms" lists
        - Record fields failing validation
    """

    pass
