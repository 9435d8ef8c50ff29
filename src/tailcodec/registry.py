"""Encoding registry: display names, synonyms and codec names.

This module defines:

1. **Display names**: the human-readable label stored in a tail
   configuration for each :class:`~tailcodec.enums.EncodingDecision`.  The
   labels are persisted, so they must never change once released; parsing a
   label always yields the decision it was written for.

2. **Synonyms**: additional spellings accepted when reading configuration
   written by hand or by older versions (e.g. ``UTF-8`` for ``UTF8``).

3. **Codec names** and byte-order-mark lengths used by a tail reader to turn
   a decision into an incremental decoder.
"""

from __future__ import annotations

import codecs
import dataclasses

from tailcodec._utils import platform_default_codec
from tailcodec.enums import EncodingDecision


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingInfo:
    """Static metadata for one encoding decision."""

    decision: EncodingDecision
    display_name: str
    aliases: tuple[str, ...]
    python_codec: str | None
    bom: bytes = b""


# Display names are a persisted format: append new aliases, never rename.
# ``python_codec`` of None means "resolve the platform default at call time".
REGISTRY: dict[EncodingDecision, EncodingInfo] = {
    EncodingDecision.UTF8_BOM: EncodingInfo(
        decision=EncodingDecision.UTF8_BOM,
        display_name="UTF8 BOM",
        aliases=("UTF-8 BOM", "UTF-8-SIG", "UTF8-SIG"),
        python_codec="utf-8-sig",
        bom=codecs.BOM_UTF8,
    ),
    EncodingDecision.UTF8: EncodingInfo(
        decision=EncodingDecision.UTF8,
        display_name="UTF8",
        aliases=("UTF-8",),
        python_codec="utf-8",
    ),
    EncodingDecision.UTF16_LE: EncodingInfo(
        decision=EncodingDecision.UTF16_LE,
        display_name="Unicode (UTF16 LE)",
        aliases=("Unicode", "UTF16", "UTF-16", "UTF-16LE", "UTF-16-LE", "UTF16 LE"),
        python_codec="utf-16-le",
        bom=codecs.BOM_UTF16_LE,
    ),
    EncodingDecision.UTF16_BE: EncodingInfo(
        decision=EncodingDecision.UTF16_BE,
        display_name="Unicode (UTF16 BE)",
        aliases=("BigEndianUnicode", "UTF-16BE", "UTF-16-BE", "UTF16 BE"),
        python_codec="utf-16-be",
        bom=codecs.BOM_UTF16_BE,
    ),
    EncodingDecision.ASCII: EncodingInfo(
        decision=EncodingDecision.ASCII,
        display_name="ASCII",
        aliases=("US-ASCII",),
        python_codec="ascii",
    ),
    EncodingDecision.PLATFORM_DEFAULT: EncodingInfo(
        decision=EncodingDecision.PLATFORM_DEFAULT,
        display_name="Default",
        aliases=(),
        python_codec=None,
    ),
}


def _build_lookup() -> dict[str, EncodingDecision]:
    lookup: dict[str, EncodingDecision] = {}
    for info in REGISTRY.values():
        for label in (info.display_name, *info.aliases):
            key = label.upper()
            if key in lookup:
                msg = f"duplicate encoding label: {label!r}"
                raise ValueError(msg)
            lookup[key] = info.decision
    return lookup


_LABEL_LOOKUP: dict[str, EncodingDecision] = _build_lookup()


def to_display_name(decision: EncodingDecision | None) -> str:
    """Return the persisted label for *decision*.

    ``None`` is treated as :attr:`EncodingDecision.PLATFORM_DEFAULT`.
    """
    if decision is None:
        decision = EncodingDecision.PLATFORM_DEFAULT
    return REGISTRY[decision].display_name


def from_display_name(name: str | None) -> EncodingDecision:
    """Parse a persisted label back into an :class:`EncodingDecision`.

    Matching is case-insensitive and ignores surrounding whitespace.
    Empty, ``None`` or unrecognized labels yield
    :attr:`EncodingDecision.PLATFORM_DEFAULT`; this function never raises.

    :param name: A display name or one of its synonyms.
    :returns: The matching decision.
    """
    if not isinstance(name, str):
        return EncodingDecision.PLATFORM_DEFAULT
    return _LABEL_LOOKUP.get(name.strip().upper(), EncodingDecision.PLATFORM_DEFAULT)


def codec_name(decision: EncodingDecision) -> str:
    """Return the Python codec name for *decision*."""
    codec = REGISTRY[decision].python_codec
    if codec is None:
        return platform_default_codec()
    return codec


def bom_length(decision: EncodingDecision) -> int:
    """Number of leading mark bytes a file with this encoding carries."""
    return len(REGISTRY[decision].bom)


def get_decoder(
    decision: EncodingDecision, errors: str = "replace"
) -> codecs.IncrementalDecoder:
    """Build an incremental decoder for a tail reader.

    The decoder keeps partial multi-byte sequences between :meth:`decode`
    calls, so the initial content and every later append can be fed to it
    as they are read.  ``utf-8-sig`` strips its own mark; for UTF-16 the
    reader should skip :func:`bom_length` bytes before the first feed.

    :param decision: The encoding to decode with.
    :param errors: Codec error handler, ``"replace"`` by default so a wrong
        guess shows replacement characters instead of failing.
    """
    return codecs.getincrementaldecoder(codec_name(decision))(errors=errors)
