"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from tailcodec._utils import MIN_SIGNATURE_BYTES
from tailcodec.enums import EncodingDecision

# Checked in order; the 3-byte UTF-8 mark goes first.
_BOMS: tuple[tuple[bytes, EncodingDecision], ...] = (
    (b"\xef\xbb\xbf", EncodingDecision.UTF8_BOM),
    (b"\xff\xfe", EncodingDecision.UTF16_LE),
    (b"\xfe\xff", EncodingDecision.UTF16_BE),
)


def detect_bom(data: bytes) -> EncodingDecision | None:
    """Check for a BOM at the start of data. Returns a decision or None.

    Signatures shorter than three bytes are never matched, so a file holding
    nothing but a 2-byte UTF-16 mark falls through to the platform default.
    """
    if len(data) < MIN_SIGNATURE_BYTES:
        return None
    for bom_bytes, decision in _BOMS:
        if data.startswith(bom_bytes):
            return decision
    return None
