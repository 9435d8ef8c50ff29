from __future__ import annotations

from tailcodec.pipeline.utf8 import has_non_ascii_utf8, looks_like_utf8, score_utf8


def test_valid_utf8_with_multibyte():
    data = "Héllo wörld café".encode()
    assert looks_like_utf8(data)
    score = score_utf8(data)
    assert score.non_ascii_bytes == 3
    assert score.valid_multibyte_bytes == 6


def test_valid_utf8_chinese():
    score = score_utf8("你好世界".encode())
    assert score.non_ascii_bytes == 4
    assert score.valid_multibyte_bytes == 12
    assert score.likely_utf8


def test_valid_utf8_emoji():
    score = score_utf8("Hello 🌍".encode())
    assert score.non_ascii_bytes == 1
    assert score.valid_multibyte_bytes == 4


def test_pure_ascii_is_utf8():
    assert looks_like_utf8(b"Hello world")
    score = score_utf8(b"Hello world")
    assert score.non_ascii_bytes == 0
    assert score.ratio == 100


def test_empty_input():
    assert looks_like_utf8(b"") is False


def test_latin1_is_not_utf8():
    data = "Héllo wörld café".encode("latin-1")
    score = score_utf8(data)
    assert score.non_ascii_bytes == 3
    assert score.valid_multibyte_bytes == 0
    assert looks_like_utf8(data) is False


def test_every_high_byte_in_order_has_no_valid_sequence():
    data = bytes(range(0x80, 0x100))
    score = score_utf8(data)
    assert score.non_ascii_bytes == 128
    assert score.valid_multibyte_bytes == 0
    assert looks_like_utf8(data) is False


def test_minor_corruption_tolerated():
    data = "Héllo wörld".encode() + b"\xff"
    assert looks_like_utf8(data)


def test_threshold_is_inclusive():
    # 2 valid bytes over 4 non-ASCII bytes is exactly 50%
    assert looks_like_utf8(b"a\xc3\xa9\xff\xff\xff")
    # 2 over 5 is 40%
    assert not looks_like_utf8(b"a\xc3\xa9\xff\xff\xff\xff")


def test_lead_with_bad_continuation_advances_one_byte():
    # C3 followed by ASCII is malformed; the "A" is still scanned as ASCII
    score = score_utf8(b"\xc3A\xc3\xa9")
    assert score.non_ascii_bytes == 2
    assert score.valid_multibyte_bytes == 2


def test_overlong_and_surrogate_forms_pass_bit_pattern_check():
    score = score_utf8(b"\xc0\xaf\xed\xa0\x80")
    assert score.valid_multibyte_bytes == 5


def test_five_byte_lead_is_malformed():
    score = score_utf8(b"\xf8\x88\x80\x80\x80")
    assert score.valid_multibyte_bytes == 0
    assert score.non_ascii_bytes == 5


def test_truncated_sequence_at_end_of_sample():
    # 8191 bytes: a valid euro sign, ASCII filler, then E2 82 missing its
    # final continuation byte
    data = b"\xe2\x82\xac" + b"a" * 8186 + b"\xe2\x82"
    assert len(data) == 8191
    score = score_utf8(data)
    assert score.valid_multibyte_bytes == 3
    assert score.non_ascii_bytes == 3
    assert score.length == 8191


def test_truncated_sequence_alone_is_not_utf8():
    data = b"a" * 8189 + b"\xe2\x82"
    score = score_utf8(data)
    assert score.valid_multibyte_bytes == 0
    assert looks_like_utf8(data) is False


def test_truncated_four_byte_sequence():
    score = score_utf8(b"ok \xf0\x9f\x8c")
    assert score.valid_multibyte_bytes == 0
    assert score.non_ascii_bytes == 3


def test_has_non_ascii_utf8():
    assert has_non_ascii_utf8("café".encode())
    assert not has_non_ascii_utf8(b"cafe")
    assert not has_non_ascii_utf8("café".encode("latin-1"))
    assert not has_non_ascii_utf8(b"")
