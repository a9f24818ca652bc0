# spantags/resolve.py

from __future__ import annotations

from typing import Iterable, List
from spantags.models import Span


def drop_overlapping_spans(spans: Iterable[Span]) -> List[Span]:
    """
    Remove overlapping spans so that encoding is unambiguous:
    - spans are ordered by start, longer first on ties
    - the first span of each overlapping group is kept
    """
    ordered = sorted(spans, key=lambda s: (s.start, -s.end))

    result: List[Span] = []
    for span in ordered:
        if result and result[-1].overlaps(span):
            continue
        result.append(span)

    return result
