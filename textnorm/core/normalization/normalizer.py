from __future__ import annotations
import re

from textnorm.core.normalization.base import TextNormalizer


class WhitespaceNormalizer(TextNormalizer):
    """
    Trims and collapses every whitespace run (spaces, tabs, newlines) to one
    space. Diacritics and punctuation pass through untouched.

    Shared by all languages for now; ``language`` only tags the instance.
    """

    _re_ws = re.compile(r"\s+")

    def __init__(self, language: str | None = None):
        self.language = language

    def normalize(self, text: str) -> str:
        if not text:
            return ""
        return self._re_ws.sub(" ", str(text).strip())

    def __repr__(self) -> str:
        return f"WhitespaceNormalizer(language={self.language!r})"
