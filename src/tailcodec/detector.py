"""Encoding detection for files that are about to be tailed."""

from __future__ import annotations

import logging
import os
import stat

from tailcodec._utils import (
    MIN_SIGNATURE_BYTES,
    SAMPLE_SIZE,
    SIGNATURE_SIZE,
    _validate_sample_size,
)
from tailcodec.enums import EncodingDecision
from tailcodec.pipeline.bom import detect_bom
from tailcodec.pipeline.orchestrator import classify_sample, classify_unmarked

logger = logging.getLogger(__name__)

StrOrBytesPath = str | bytes | os.PathLike[str] | os.PathLike[bytes]


def detect_encoding(
    path: StrOrBytesPath | None, sample_size: int = SAMPLE_SIZE
) -> EncodingDecision:
    """Decide which encoding to decode the file at *path* with.

    The file is opened read-only, which leaves it open to a concurrent
    writer, and at most *sample_size* bytes are read from its start.  Missing
    or unreadable files, anything that is not a regular file (FIFOs, devices,
    directories), integer file descriptors, and any I/O error while reading
    yield :attr:`EncodingDecision.PLATFORM_DEFAULT`; filesystem problems are
    never raised to the caller.

    :param path: Path of the file to inspect.
    :param sample_size: Maximum number of bytes to score, at most 8192.
    :returns: The encoding decision.
    :raises ValueError: If *sample_size* is out of range.
    """
    _validate_sample_size(sample_size)
    if not isinstance(path, (str, bytes, os.PathLike)) or path in ("", b""):
        return EncodingDecision.PLATFORM_DEFAULT

    try:
        # Opening a FIFO with no writer blocks
        if not stat.S_ISREG(os.stat(path).st_mode):
            logger.debug("%s: not a regular file", path)
            return EncodingDecision.PLATFORM_DEFAULT
        with open(path, "rb") as f:
            signature = f.read(SIGNATURE_SIZE)
            if len(signature) < MIN_SIGNATURE_BYTES:
                logger.debug("%s: too short for a signature", path)
                return EncodingDecision.PLATFORM_DEFAULT

            bom_result = detect_bom(signature)
            if bom_result is not None:
                return bom_result

            file_length = os.fstat(f.fileno()).st_size
            f.seek(0)
            sample = f.read(min(sample_size, file_length))
    except (OSError, ValueError, TypeError) as e:
        logger.debug("%s: encoding detection failed: %s", path, e)
        return EncodingDecision.PLATFORM_DEFAULT

    return classify_unmarked(sample)


def detect_bytes(
    byte_str: bytes | bytearray, sample_size: int = SAMPLE_SIZE
) -> EncodingDecision:
    """Classify bytes already read from the start of a file.

    Applies the same rules as :func:`detect_encoding` to an in-memory prefix,
    scoring at most *sample_size* bytes.

    :raises ValueError: If *sample_size* is out of range.
    """
    _validate_sample_size(sample_size)
    data = byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
    return classify_sample(data, max_bytes=sample_size)
