from __future__ import annotations
from abc import ABC, abstractmethod
from typing import FrozenSet, List

from textnorm.core.tokenization.config import OptionsLike


class Tokenizer(ABC):
    """Port: turn raw text into an ordered list of clean tokens."""

    @abstractmethod
    def tokenize(self, text: str, options: OptionsLike = None) -> List[str]: ...

    @abstractmethod
    def join(self, tokens: List[str]) -> str: ...

    @abstractmethod
    def chunk(self, text: str, size: int, options: OptionsLike = None) -> List[str]: ...

    @abstractmethod
    def get_stop_words(self, options: OptionsLike = None) -> FrozenSet[str]: ...
