"""Pydantic record models for fa1codec.

This module provides the ProgramRecord and AlarmRecord value types.
"""

from __future__ import annotations

from .base import BaseRecord
from .records import AlarmRecord, ProgramRecord

__all__ = [
    "BaseRecord",
    "ProgramRecord",
    "AlarmRecord",
]
