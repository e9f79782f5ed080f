from __future__ import annotations
from abc import ABC, abstractmethod


class TextNormalizer(ABC):
    """Port: canonicalize raw text without tokenizing it."""

    @abstractmethod
    def normalize(self, text: str) -> str: ...
