"""Encoding detection for log files opened for tailing."""

from __future__ import annotations

from tailcodec._utils import SAMPLE_SIZE
from tailcodec.detector import detect_bytes, detect_encoding
from tailcodec.enums import EncodingDecision
from tailcodec.pipeline.utf8 import looks_like_utf8
from tailcodec.registry import (
    codec_name,
    from_display_name,
    get_decoder,
    to_display_name,
)

__version__ = "1.0.0"
__all__ = [
    "SAMPLE_SIZE",
    "EncodingDecision",
    "codec_name",
    "detect_bytes",
    "detect_encoding",
    "from_display_name",
    "get_decoder",
    "looks_like_utf8",
    "to_display_name",
]
