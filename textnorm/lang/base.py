from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Protocol

from textnorm.core.normalization.normalizer import WhitespaceNormalizer
from textnorm.core.stemming.base import StemRules
from textnorm.core.stemming.config import StemmerDictionaryLike
from textnorm.core.stemming.stemmer import CachedStemmer
from textnorm.core.stopword_removal.stopwords import StopwordList
from textnorm.core.tokenization.config import OptionsLike
from textnorm.core.tokenization.tokenizer import DefaultTokenizer


class Container(Protocol):
    """Composition container that language capabilities are offered to."""

    def use(self, component: Any) -> None: ...


@dataclass(frozen=True)
class LanguageModule:
    """
    Everything language-specific, as data: a stopword list, a normalizer and
    a stemming rule function. Tokenizers and stemmers are built from it.
    """

    code: str
    name: str
    stopwords: StopwordList
    normalizer: WhitespaceNormalizer
    rules: StemRules

    def create_tokenizer(self, config: OptionsLike = None) -> DefaultTokenizer:
        return DefaultTokenizer(config, stopwords=self.stopwords)

    def create_stemmer(self, dictionary: StemmerDictionaryLike = None) -> CachedStemmer:
        return CachedStemmer(self.rules, dictionary)

    def tokenize(self, text: str, options: OptionsLike = None) -> List[str]:
        """One-off tokenization with a fresh tokenizer bound to this language."""
        return self.create_tokenizer().tokenize(text, options)

    def normalize(self, text: str) -> str:
        return self.normalizer.normalize(text)

    def register(self, container: Container) -> None:
        """Offer tokenizer, stemmer, stopwords and normalizer, once each."""
        container.use(self.create_tokenizer)
        container.use(self.create_stemmer)
        container.use(self.stopwords)
        container.use(self.normalizer)


def build_language_module(code: str, name: str, rules: StemRules) -> LanguageModule:
    return LanguageModule(
        code=code,
        name=name,
        stopwords=StopwordList(code),
        normalizer=WhitespaceNormalizer(code),
        rules=rules,
    )
