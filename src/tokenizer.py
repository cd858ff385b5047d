from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

# Words are separated by the literal space character only.
WORD_SEPARATOR = " "


def normalize_text(s: str) -> str:
    return s.lower()


@dataclass(frozen=True)
class Words:
    """Lazy view over the words of a text; each iteration starts from the beginning."""

    text: str

    def __iter__(self) -> Iterator[str]:
        start = 0
        n = len(self.text)
        while start <= n:
            end = self.text.find(WORD_SEPARATOR, start)
            if end == -1:
                end = n
            if end > start:
                yield self.text[start:end]
            start = end + 1


def tokenize(text: str) -> Words:
    return Words(normalize_text(text))
