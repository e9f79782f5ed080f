from __future__ import annotations
from typing import List

from textnorm.core.stemming.rules.portuguese import stem_portuguese
from textnorm.core.tokenization.config import OptionsLike
from textnorm.lang.base import Container, build_language_module

PORTUGUESE = build_language_module("pt", "Brazilian Portuguese", stem_portuguese)


def tokenize(text: str, options: OptionsLike = None) -> List[str]:
    return PORTUGUESE.tokenize(text, options)


def register(container: Container) -> None:
    PORTUGUESE.register(container)
