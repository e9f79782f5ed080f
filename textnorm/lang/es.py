from __future__ import annotations
from typing import List

from textnorm.core.stemming.rules.spanish import stem_spanish
from textnorm.core.tokenization.config import OptionsLike
from textnorm.lang.base import Container, build_language_module

SPANISH = build_language_module("es", "Spanish", stem_spanish)


def tokenize(text: str, options: OptionsLike = None) -> List[str]:
    return SPANISH.tokenize(text, options)


def register(container: Container) -> None:
    SPANISH.register(container)
