# spantags/validators.py

from __future__ import annotations

from typing import Protocol, Sequence

from .tags import CONTINUE, LAST, START, extract_name_type


class SequenceValidator(Protocol):
    def is_legal(self, position: int, prior_tags: Sequence[str], candidate: str) -> bool:
        ...


def _continues_same_type(prior_tags: Sequence[str], candidate: str) -> bool:
    """
    True if the last prior tag is a start/continue whose type matches candidate.
    """
    if not prior_tags:
        return False

    previous = prior_tags[-1]
    if not (previous.endswith(START) or previous.endswith(CONTINUE)):
        return False

    previous_type = extract_name_type(previous)
    name_type = extract_name_type(candidate)
    if previous_type is None and name_type is None:
        return True
    return name_type is not None and name_type == previous_type


class BioSequenceValidator:
    """
    Prunes BIO paths: a continue must extend a start/continue of the same type.
    start and other are always legal.
    """

    def is_legal(self, position: int, prior_tags: Sequence[str], candidate: str) -> bool:
        if candidate.endswith(CONTINUE):
            return _continues_same_type(prior_tags, candidate)
        return True


class BilouSequenceValidator:
    """
    Prunes BILOU paths: continue and last must extend a start/continue of the
    same type. start, unit and other are always legal.
    """

    def is_legal(self, position: int, prior_tags: Sequence[str], candidate: str) -> bool:
        if candidate.endswith(CONTINUE) or candidate.endswith(LAST):
            return _continues_same_type(prior_tags, candidate)
        return True


def is_valid_sequence(tags: Sequence[str], validator: SequenceValidator) -> bool:
    """
    Return True if every step of a complete tag sequence is legal.
    """
    for i, tag in enumerate(tags):
        if not validator.is_legal(i, tags[:i], tag):
            return False
    return True
