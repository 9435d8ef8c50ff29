"""Stage 2: UTF-8 validation and lenient scoring.

Log files are often mostly UTF-8 with the odd stray byte from another
encoding, so besides a strict decode this stage scores how much of the
non-ASCII content forms well-formed multi-byte sequences.
"""

from __future__ import annotations

from tailcodec.pipeline import Utf8Score


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def _sequence_length(data: bytes, i: int, length: int) -> int:
    """Length of the well-formed sequence starting at ``data[i]``, or 0.

    Only the bit patterns of the lead and continuation bytes are checked;
    overlong forms and surrogates are accepted.  Never reads past *length*.
    """
    byte = data[i]
    if byte & 0xE0 == 0xC0:
        seq_len = 2
    elif byte & 0xF0 == 0xE0:
        seq_len = 3
    elif byte & 0xF8 == 0xF0:
        seq_len = 4
    else:
        return 0

    if i + seq_len > length:
        return 0
    for j in range(i + 1, i + seq_len):
        if not _is_continuation(data[j]):
            return 0
    return seq_len


def score_utf8(data: bytes) -> Utf8Score:
    """Scan *data* once and count non-ASCII bytes and valid multi-byte bytes.

    Every byte >= 0x80 reached by the scan counts towards ``non_ascii_bytes``
    once; bytes consumed as continuations of a valid sequence are skipped.
    A malformed or truncated sequence advances the scan by a single byte.

    :param data: The raw sample to examine.
    :returns: A :class:`~tailcodec.pipeline.Utf8Score`.
    """
    i = 0
    length = len(data)
    non_ascii = 0
    valid_multibyte = 0

    while i < length:
        if data[i] < 0x80:
            i += 1
            continue

        non_ascii += 1
        seq_len = _sequence_length(data, i, length)
        if seq_len:
            valid_multibyte += seq_len
            i += seq_len
        else:
            i += 1

    return Utf8Score(
        length=length,
        non_ascii_bytes=non_ascii,
        valid_multibyte_bytes=valid_multibyte,
    )


def looks_like_utf8(data: bytes) -> bool:
    """Return True if *data* is probably UTF-8 despite minor corruption.

    At least half of the non-ASCII bytes must take part in well-formed
    multi-byte sequences.  Pure ASCII counts as UTF-8; an empty sample does
    not.
    """
    return score_utf8(data).likely_utf8


def has_non_ascii_utf8(data: bytes) -> bool:
    """Return True if *data* is strictly valid UTF-8 with a non-ASCII character."""
    if data.isascii():
        return False
    try:
        data.decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return False
    return True
