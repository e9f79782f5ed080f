from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, List

# A language rule engine: lowercase word in, stem out.
StemRules = Callable[[str], str]


class Stemmer(ABC):
    """Port: reduce words to their stems."""

    @abstractmethod
    def stem(self, word: str) -> str: ...

    def stem_words(self, words: List[str]) -> List[str]:
        return [self.stem(w) for w in words]
