# spantags/bio.py

from __future__ import annotations

from typing import Iterable, List, Sequence

from .models import Span
from .tags import (
    CONTINUE,
    OTHER,
    START,
    extract_name_type,
    outcome,
    type_prefix,
)
from .validators import BioSequenceValidator


class BioCodec:
    """
    Begin/Inside/Outside chunking.

    A span of n tokens is tagged "<type>-start" followed by n-1
    "<type>-continue" tags; everything else is "other".
    """

    name = "bio"
    roles = (START, CONTINUE, OTHER)

    def encode(self, spans: Iterable[Span], length: int) -> List[str]:
        tags = [OTHER] * length
        # No overlap checks, later spans overwrite earlier ones
        for span in spans:
            tags[span.start] = outcome(span.type, START)
            for i in range(span.start + 1, span.end):
                tags[i] = outcome(span.type, CONTINUE)
        return tags

    def decode(self, tags: Sequence[str]) -> List[Span]:
        spans: List[Span] = []
        start = -1
        end = -1

        for i, tag in enumerate(tags):
            if tag.endswith(START):
                if start != -1:
                    spans.append(Span(start, end, extract_name_type(tags[i - 1])))
                start = i
                end = i + 1
            elif tag.endswith(CONTINUE):
                end = i + 1
            elif tag.endswith(OTHER):
                if start != -1:
                    spans.append(Span(start, end, extract_name_type(tags[i - 1])))
                    start = -1
                    end = -1

        if start != -1:
            spans.append(Span(start, end, extract_name_type(tags[-1])))

        return spans

    def is_vocabulary_consistent(self, tags: Iterable[str]) -> bool:
        """
        A usable BIO vocabulary has at least one "*-start" tag, and every
        "*-continue" tag has a "*-start" of the same type. Anything else
        except "other" makes the vocabulary unusable.
        """
        starts = set()
        conts = set()

        for tag in tags:
            if tag.endswith(START):
                starts.add(type_prefix(tag, START))
            elif tag.endswith(CONTINUE):
                conts.add(type_prefix(tag, CONTINUE))
            elif tag != OTHER:
                return False

        if not starts:
            return False

        return conts <= starts

    def make_validator(self) -> BioSequenceValidator:
        return BioSequenceValidator()
