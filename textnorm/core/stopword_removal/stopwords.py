from __future__ import annotations
import logging
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple

from textnorm.core.stopword_removal.base import StopwordRemover, StopwordSource
from textnorm.utils.exceptions import StopwordsNotFoundError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

EMPTY_STOP_WORDS: FrozenSet[str] = frozenset()


@lru_cache(maxsize=None)
def load_stop_words(language: str) -> FrozenSet[str]:
    """
    Read ``data/<language>.txt`` once: one word per line, ``#`` starts a
    comment, blank lines ignored.
    """
    path = DATA_DIR / f"{language}.txt"
    if not path.is_file():
        raise StopwordsNotFoundError(
            code="STOPWORDS_NOT_FOUND",
            message=f"No stopword list for language '{language}'.",
        )

    words = set()
    for line in path.read_text(encoding="utf-8").splitlines():
        word = line.split("#", 1)[0].strip()
        if word:
            words.add(word)

    logger.debug("Loaded %d stopwords for '%s'", len(words), language)
    return frozenset(words)


class StopwordList(StopwordSource):
    """Read-only accessor over one language's stopword set."""

    def __init__(self, language: str):
        self.language = language

    def get_stop_words(self) -> FrozenSet[str]:
        return load_stop_words(self.language)

    def is_stopword(self, word: str) -> bool:
        return word in self.get_stop_words()

    def __repr__(self) -> str:
        return f"StopwordList({self.language!r})"


class DefaultStopwordRemover(StopwordRemover):
    """Filters tokens against the union of a language set and custom words."""

    def __init__(
        self,
        stop_words: Iterable[str] = EMPTY_STOP_WORDS,
        custom_stop_words: Iterable[str] = (),
    ):
        self._language = frozenset(stop_words)
        self._custom = frozenset(custom_stop_words)

    @property
    def is_empty(self) -> bool:
        return not self._language and not self._custom

    def remove(self, tokens: List[str]) -> Tuple[List[str], List[str]]:
        if self.is_empty:
            return tokens, []

        cleaned: List[str] = []
        removed: List[str] = []
        for t in tokens:
            if t in self._language or t in self._custom:
                removed.append(t)
                continue
            cleaned.append(t)
        return cleaned, removed
