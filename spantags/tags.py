# spantags/tags.py

from __future__ import annotations

import regex as re
from typing import Optional

START = "start"
CONTINUE = "continue"
LAST = "last"
UNIT = "unit"
OTHER = "other"

# Used in place of a missing span type when encoding
DEFAULT_TYPE = "default"

TYPED_OUTCOME_RE = re.compile(r"(.+)-\w+")


def outcome(span_type: Optional[str], role: str) -> str:
    return f"{span_type or DEFAULT_TYPE}-{role}"


def extract_name_type(tag: str) -> Optional[str]:
    """
    Return the type part of a tag like "person-start" -> "person".
    Tags without a "-role" suffix (e.g. "other") have no type.
    """
    m = TYPED_OUTCOME_RE.fullmatch(tag)
    if m:
        return m.group(1)
    return None


def type_prefix(tag: str, role: str) -> str:
    # "person-start" -> "person-", used to pair up roles of the same type
    return tag[: len(tag) - len(role)]
