from __future__ import annotations
import logging
from typing import Dict

from textnorm.core.stemming.base import Stemmer, StemRules
from textnorm.core.stemming.config import StemmerDictionary, StemmerDictionaryLike

logger = logging.getLogger(__name__)


class CachedStemmer(Stemmer):
    """
    Wraps a language rule function with a per-instance cache and the
    before/after exception dictionary.

    Resolution order for ``stem(word)``:
      1. cached value for ``word``
      2. exact ``before`` match (no rules, no ``after``)
      3. ``rules(word.lower())``
      4. ``after`` replacement keyed by the rule output
      5. cache under the original surface form

    The cache is unbounded and not thread-safe; share an instance across
    threads only behind a lock, or call ``clear_cache`` to release memory.
    """

    def __init__(self, rules: StemRules, dictionary: StemmerDictionaryLike = None):
        self.rules = rules
        self.dictionary = StemmerDictionary.coerce(dictionary)
        self._cache: Dict[str, str] = {}

    def stem(self, word: str) -> str:
        cached = self._cache.get(word)
        if cached is not None:
            return cached

        if word in self.dictionary.before:
            result = self.dictionary.before[word]
            self._cache[word] = result
            return result

        stemmed = self.rules(word.lower())
        result = self.dictionary.after.get(stemmed, stemmed)
        self._cache[word] = result
        return result

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        logger.debug("Clearing stem cache (%d entries)", len(self._cache))
        self._cache.clear()
