"""Classification pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

#: Minimum share (in percent) of non-ASCII bytes that must belong to
#: well-formed multi-byte sequences for a sample to count as UTF-8.
UTF8_THRESHOLD_PERCENT: int = 50


@dataclasses.dataclass(frozen=True, slots=True)
class Utf8Score:
    """Counters gathered by the lenient UTF-8 scan of a sample."""

    length: int
    non_ascii_bytes: int
    valid_multibyte_bytes: int

    @property
    def ratio(self) -> int:
        """Valid multi-byte bytes per 100 non-ASCII bytes.

        Only the lead byte of a valid sequence is counted as non-ASCII while
        all of its bytes count as valid, so the value can exceed 100.
        Integer division, as used by the threshold check.  A sample with no
        non-ASCII bytes reports 100.
        """
        if self.non_ascii_bytes == 0:
            return 100
        return self.valid_multibyte_bytes * 100 // self.non_ascii_bytes

    @property
    def likely_utf8(self) -> bool:
        """Whether the sample passes the lenient UTF-8 check."""
        if self.length == 0:
            return False
        return self.ratio >= UTF8_THRESHOLD_PERCENT
