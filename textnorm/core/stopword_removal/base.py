from __future__ import annotations
from abc import ABC, abstractmethod
from typing import FrozenSet, List, Tuple


class StopwordSource(ABC):
    """Port: an immutable stopword set with membership test."""

    @abstractmethod
    def get_stop_words(self) -> FrozenSet[str]: ...

    @abstractmethod
    def is_stopword(self, word: str) -> bool: ...


class StopwordRemover(ABC):
    """Port: drop stopwords from tokens, keeping source order."""

    @abstractmethod
    def remove(self, tokens: List[str]) -> Tuple[List[str], List[str]]:
        """
        Returns (kept_tokens, removed_tokens)
        """
        ...
