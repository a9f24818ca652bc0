# tests/test_bilou.py

from spantags.bilou import BilouCodec
from spantags.models import Span


def test_encode_multi_token_span():
    tags = BilouCodec().encode([Span(0, 4, "person")], 4)
    assert tags == ["person-start", "person-continue", "person-continue", "person-last"]


def test_encode_two_token_span_has_no_continue():
    tags = BilouCodec().encode([Span(1, 3, "person")], 4)
    assert tags == ["other", "person-start", "person-last", "other"]


def test_encode_single_token_span_is_unit():
    tags = BilouCodec().encode([Span(1, 2, "person")], 3)
    assert tags == ["other", "person-unit", "other"]
    assert not any(t.endswith("start") or t.endswith("last") for t in tags)


def test_encode_untyped():
    assert BilouCodec().encode([Span(0, 1)], 1) == ["default-unit"]


def test_decode_round_trip():
    spans = [
        Span(0, 1, "person"),
        Span(2, 5, "organization"),
        Span(5, 7, "location"),
        Span(8, 9, "date"),
    ]
    codec = BilouCodec()
    assert set(codec.decode(codec.encode(spans, 10))) == set(spans)


def test_decode_orphan_last_is_dropped():
    tags = ["other", "person-last", "location-unit"]
    assert BilouCodec().decode(tags) == [Span(2, 3, "location")]


def test_decode_unit_inside_open_span():
    tags = ["person-start", "date-unit", "person-last"]
    spans = BilouCodec().decode(tags)
    assert Span(1, 2, "date") in spans
    assert len(spans) == 2


def test_decode_unterminated_span_is_not_emitted():
    assert BilouCodec().decode(["person-start", "person-continue"]) == []


def test_vocabulary_consistent():
    codec = BilouCodec()
    assert codec.is_vocabulary_consistent(["person-start", "person-last", "other"])
    assert codec.is_vocabulary_consistent(["person-unit", "other"])
    assert codec.is_vocabulary_consistent(
        ["person-start", "person-continue", "person-last", "person-unit", "other"]
    )


def test_vocabulary_start_without_last():
    assert not BilouCodec().is_vocabulary_consistent(["person-start", "other"])


def test_vocabulary_last_without_start():
    assert not BilouCodec().is_vocabulary_consistent(["person-unit", "person-last", "other"])


def test_vocabulary_needs_start_or_unit():
    assert not BilouCodec().is_vocabulary_consistent(["other"])
    assert not BilouCodec().is_vocabulary_consistent([])


def test_vocabulary_orphan_continue():
    codec = BilouCodec()
    assert not codec.is_vocabulary_consistent(
        ["person-start", "person-last", "date-continue", "other"]
    )
