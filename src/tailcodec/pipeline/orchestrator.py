"""Pipeline orchestrator: runs the classification stages over a sample."""

from __future__ import annotations

import logging

from tailcodec._utils import MIN_SIGNATURE_BYTES, SAMPLE_SIZE
from tailcodec.enums import EncodingDecision
from tailcodec.pipeline.bom import detect_bom
from tailcodec.pipeline.utf8 import has_non_ascii_utf8, score_utf8

logger = logging.getLogger(__name__)


def classify_sample(data: bytes, max_bytes: int = SAMPLE_SIZE) -> EncodingDecision:
    """Classify a prefix of a file.

    Stages run in order: byte-order mark, strict UTF-8 with non-ASCII
    content, lenient UTF-8 scoring.  Anything else, including prefixes too
    short to carry a signature, is :attr:`EncodingDecision.PLATFORM_DEFAULT`.

    :param data: Bytes from the start of the file.
    :param max_bytes: Only the first *max_bytes* bytes are scored.
    :returns: The encoding decision.
    """
    if len(data) < MIN_SIGNATURE_BYTES:
        logger.debug("sample too short (%d bytes)", len(data))
        return EncodingDecision.PLATFORM_DEFAULT

    bom_result = detect_bom(data)
    if bom_result is not None:
        logger.debug("byte-order mark found: %s", bom_result.name)
        return bom_result

    return classify_unmarked(data[:max_bytes])


def classify_unmarked(sample: bytes) -> EncodingDecision:
    """Classify a sample already known not to start with a byte-order mark."""
    if has_non_ascii_utf8(sample):
        return EncodingDecision.UTF8

    score = score_utf8(sample)
    logger.debug(
        "utf-8 score: %d of %d non-ascii bytes valid (%d%%)",
        score.valid_multibyte_bytes,
        score.non_ascii_bytes,
        score.ratio,
    )
    if score.likely_utf8:
        return EncodingDecision.UTF8
    return EncodingDecision.PLATFORM_DEFAULT
