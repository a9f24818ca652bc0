# spantags/bilou.py

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from .models import Span
from .tags import (
    CONTINUE,
    LAST,
    OTHER,
    START,
    UNIT,
    extract_name_type,
    outcome,
    type_prefix,
)
from .validators import BilouSequenceValidator

logger = logging.getLogger(__name__)


class BilouCodec:
    """
    Begin/Inside/Last/Unit/Outside chunking.

    Multi-token spans are tagged start, continue..., last; single-token
    spans get a single "unit" tag.
    """

    name = "bilou"
    roles = (START, CONTINUE, LAST, UNIT, OTHER)

    def encode(self, spans: Iterable[Span], length: int) -> List[str]:
        tags = [OTHER] * length
        for span in spans:
            if span.length() > 1:
                tags[span.start] = outcome(span.type, START)
                for i in range(span.start + 1, span.end - 1):
                    tags[i] = outcome(span.type, CONTINUE)
                tags[span.end - 1] = outcome(span.type, LAST)
            else:
                tags[span.start] = outcome(span.type, UNIT)
        return tags

    def decode(self, tags: Sequence[str]) -> List[Span]:
        spans: List[Span] = []
        start = -1
        end = -1

        for i, tag in enumerate(tags):
            if tag.endswith(START):
                start = i
                end = i + 1
            elif tag.endswith(CONTINUE):
                end = i + 1
            elif tag.endswith(LAST):
                if start != -1:
                    spans.append(Span(start, end + 1, extract_name_type(tags[i - 1])))
                    start = -1
                    end = -1
                else:
                    logger.debug("Dropping %r at %d: no open span", tag, i)
            elif tag.endswith(UNIT):
                spans.append(Span(i, i + 1, extract_name_type(tag)))

        return spans

    def is_vocabulary_consistent(self, tags: Iterable[str]) -> bool:
        """
        start needs a matching last, continue needs a matching start or last,
        last needs a matching start, unit needs nothing. At least one start
        or unit tag must exist.
        """
        starts = set()
        conts = set()
        lasts = set()
        units = set()

        for tag in tags:
            if tag.endswith(START):
                starts.add(type_prefix(tag, START))
            elif tag.endswith(CONTINUE):
                conts.add(type_prefix(tag, CONTINUE))
            elif tag.endswith(LAST):
                lasts.add(type_prefix(tag, LAST))
            elif tag.endswith(UNIT):
                units.add(type_prefix(tag, UNIT))
            elif tag != OTHER:
                return False

        if not starts and not units:
            return False

        if not starts <= lasts:
            return False
        if any(p not in starts and p not in lasts for p in conts):
            return False
        return lasts <= starts

    def make_validator(self) -> BilouSequenceValidator:
        return BilouSequenceValidator()
