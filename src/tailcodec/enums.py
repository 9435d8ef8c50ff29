"""Enumerations for tailcodec."""

import enum


class EncodingDecision(enum.Enum):
    """The closed set of encodings a tailed file can be decoded with.

    Values are stable identifiers; the human-readable labels persisted in
    configuration live in :mod:`tailcodec.registry`.
    """

    UTF8_BOM = "utf8-bom"
    UTF8 = "utf8"
    UTF16_LE = "utf16-le"
    UTF16_BE = "utf16-be"
    ASCII = "ascii"
    PLATFORM_DEFAULT = "default"

    @property
    def display_name(self) -> str:
        """Label used when persisting this decision."""
        from tailcodec.registry import to_display_name

        return to_display_name(self)

    @property
    def codec(self) -> str:
        """Python codec name used to decode text for this decision."""
        from tailcodec.registry import codec_name

        return codec_name(self)

    @property
    def has_bom(self) -> bool:
        """Whether files with this encoding start with a byte-order mark."""
        from tailcodec.registry import bom_length

        return bom_length(self) > 0
