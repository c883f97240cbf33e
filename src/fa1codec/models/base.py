"""Base record class and shared Pydantic configuration.

This module provides the BaseRecord class that ProgramRecord and AlarmRecord
inherit from.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ..codec.layout import TEMP_MAX, TEMP_MIN

# Validation context for records read back from an image
FROM_IMAGE = {"from_image": True}


class BaseRecord(BaseModel):
    """Base class for records stored in an FA1 image.

    Every record has an ASCII name and a temperature. Subclasses set
    ``fa1_name_length`` to the width of their name field; longer names are
    accepted here and truncated when encoded. Records validated with the
    FROM_IMAGE context keep whatever name the image stored, one character per
    byte; such names only re-encode if they are ASCII.

    Attributes:
        name: Record name, ASCII only
        temperature: Temperature in device units, 0-482
        fa1_name_length: Width of the name field in the image, in bytes
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # Accept both snake_case names and the form's camelCase aliases
        populate_by_name=True,
    )

    name: str
    temperature: int = Field(ge=TEMP_MIN, le=TEMP_MAX)

    fa1_name_length: ClassVar[int] = 0

    @field_validator("name")
    @classmethod
    def _name_is_ascii(cls, value: str, info: ValidationInfo) -> str:
        # Stored names are taken one byte per character, whatever the byte
        if info.context and info.context.get("from_image"):
            return value
        if not value.isascii():
            raise ValueError("name must contain only ASCII characters")
        return value
