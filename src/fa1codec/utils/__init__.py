"""Utility functions for fa1codec.

This module provides the entry checksum and checksum inspection helpers.
"""

from __future__ import annotations

from .checksum import (
    ChecksumMismatch,
    checksum8,
    entry_checksum,
    find_checksum_mismatches,
    verify_entry_checksum,
)

__all__ = [
    "ChecksumMismatch",
    "checksum8",
    "entry_checksum",
    "verify_entry_checksum",
    "find_checksum_mismatches",
]
