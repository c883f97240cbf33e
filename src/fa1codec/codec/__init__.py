"""FA1 image codec.

This module provides the encoder and decoder for the fixed-layout FA1 image,
together with the layout constants and enum codebooks they share.
"""

from __future__ import annotations

from .decoder import Fa1Contents, decode, decode_alarm, decode_program
from .encoder import encode, encode_alarm, encode_program
from .layout import (
    ALARM_SECTION,
    IMAGE_SIZE,
    PROGRAM_SECTION,
    AfterTimer,
    Codebook,
    PowerLevel,
    Section,
    TimerStart,
)

__all__ = [
    "encode",
    "encode_program",
    "encode_alarm",
    "decode",
    "decode_program",
    "decode_alarm",
    "Fa1Contents",
    "IMAGE_SIZE",
    "Section",
    "PROGRAM_SECTION",
    "ALARM_SECTION",
    "Codebook",
    "PowerLevel",
    "TimerStart",
    "AfterTimer",
]
