# spantags/codec.py

from __future__ import annotations

from typing import Dict, Type, Union

from .bilou import BilouCodec
from .bio import BioCodec

SequenceCodec = Union[BioCodec, BilouCodec]

CODECS: Dict[str, Type[SequenceCodec]] = {
    BioCodec.name: BioCodec,
    BilouCodec.name: BilouCodec,
}


def get_codec(scheme: str) -> SequenceCodec:
    """Build the codec for a chunking scheme name ("bio" or "bilou")."""
    cls = CODECS.get(scheme.lower())
    if cls is None:
        raise ValueError(
            f"Unknown chunking scheme {scheme!r}, expected one of {sorted(CODECS)}"
        )
    return cls()
