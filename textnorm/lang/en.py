from __future__ import annotations
from typing import List

from textnorm.core.stemming.rules.english import stem_english
from textnorm.core.tokenization.config import OptionsLike
from textnorm.lang.base import Container, build_language_module

ENGLISH = build_language_module("en", "English", stem_english)


def tokenize(text: str, options: OptionsLike = None) -> List[str]:
    return ENGLISH.tokenize(text, options)


def register(container: Container) -> None:
    ENGLISH.register(container)
