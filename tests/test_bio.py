# tests/test_bio.py

from spantags.bio import BioCodec
from spantags.models import Span


def test_encode_multi_token_span():
    tags = BioCodec().encode([Span(1, 5, "person")], 6)
    assert tags == [
        "other",
        "person-start",
        "person-continue",
        "person-continue",
        "person-continue",
        "other",
    ]


def test_encode_single_token_span_is_lone_start():
    assert BioCodec().encode([Span(0, 1, "person")], 2) == ["person-start", "other"]


def test_encode_untyped_span_uses_default():
    assert BioCodec().encode([Span(0, 2)], 2) == ["default-start", "default-continue"]


def test_encode_later_span_overwrites_earlier():
    tags = BioCodec().encode([Span(0, 3, "a"), Span(1, 2, "b")], 3)
    assert tags == ["a-start", "b-start", "a-continue"]


def test_encode_without_spans():
    assert BioCodec().encode([], 3) == ["other"] * 3
    assert BioCodec().encode([], 0) == []


def test_decode_round_trip():
    spans = [Span(0, 2, "person"), Span(3, 4, "location"), Span(5, 8, "organization")]
    codec = BioCodec()
    assert codec.decode(codec.encode(spans, 9)) == spans


def test_decode_adjacent_spans():
    tags = ["person-start", "person-continue", "location-start", "other"]
    assert BioCodec().decode(tags) == [Span(0, 2, "person"), Span(2, 3, "location")]


def test_decode_flushes_trailing_span():
    tags = ["other", "person-start", "person-continue"]
    assert BioCodec().decode(tags) == [Span(1, 3, "person")]


def test_decode_ignores_leading_continue():
    tags = ["person-continue", "other", "person-start"]
    assert BioCodec().decode(tags) == [Span(2, 3, "person")]


def test_decode_unknown_tag_does_not_close_span():
    tags = ["person-start", "garbage", "other"]
    # type comes from the tag before "other", which has no "-role" suffix
    assert BioCodec().decode(tags) == [Span(0, 1)]


def test_decode_empty():
    assert BioCodec().decode([]) == []


def test_vocabulary_consistent():
    codec = BioCodec()
    assert codec.is_vocabulary_consistent(["person-start", "person-continue", "other"])
    assert codec.is_vocabulary_consistent(["person-start", "other"])


def test_vocabulary_orphan_continue():
    codec = BioCodec()
    assert not codec.is_vocabulary_consistent(["person-continue", "other"])
    assert not codec.is_vocabulary_consistent(
        ["person-start", "location-continue", "other"]
    )


def test_vocabulary_unexpected_tag():
    assert not BioCodec().is_vocabulary_consistent(["person-start", "person-last", "other"])
