"""Internal shared utilities for tailcodec."""

from __future__ import annotations

import locale

#: Maximum number of bytes read from the start of a file for classification.
SAMPLE_SIZE: int = 8192

#: Number of leading bytes inspected for a byte-order mark.
SIGNATURE_SIZE: int = 4

#: Files shorter than this cannot carry a meaningful signature.
MIN_SIGNATURE_BYTES: int = 3


def _validate_sample_size(sample_size: int) -> None:
    """Raise ValueError if *sample_size* is not an integer in ``1..SAMPLE_SIZE``."""
    if (
        isinstance(sample_size, bool)
        or not isinstance(sample_size, int)
        or not 1 <= sample_size <= SAMPLE_SIZE
    ):
        msg = f"sample_size must be an integer between 1 and {SAMPLE_SIZE}"
        raise ValueError(msg)


def platform_default_codec() -> str:
    """Return the codec name of the platform's preferred text encoding."""
    return locale.getpreferredencoding(False)
