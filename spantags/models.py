# spantags/models.py

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Span:
    start: int
    end: int
    type: Optional[str] = None

    def __post_init__(self):
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def overlaps(self, other: "Span") -> bool:
        return not (self.end <= other.start or other.end <= self.start)

    def contains(self, other: "Span") -> bool:
        return self.start <= other.start and other.end <= self.end

    def length(self) -> int:
        return self.end - self.start

    def covered(self, tokens: Sequence[str]) -> Tuple[str, ...]:
        return tuple(tokens[self.start:self.end])


@dataclass(frozen=True)
class NameSample:
    """
    A tokenized sentence with its labeled name spans.

    clear_adaptive_data marks the first sentence of a new document; the
    context builder's adaptive state should be reset before it is tagged.
    """

    tokens: Tuple[str, ...]
    names: Tuple[Span, ...] = ()
    clear_adaptive_data: bool = False

    def __post_init__(self):
        object.__setattr__(self, "tokens", tuple(self.tokens))
        object.__setattr__(self, "names", tuple(self.names))
        for name in self.names:
            if name.end > len(self.tokens):
                raise ValueError(
                    f"Name span {name} is outside of sentence with {len(self.tokens)} tokens"
                )
