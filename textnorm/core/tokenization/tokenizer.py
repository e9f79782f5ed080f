from __future__ import annotations
import logging
import re
import string
from typing import FrozenSet, List, Optional

from textnorm.core.stopword_removal.base import StopwordSource
from textnorm.core.stopword_removal.stopwords import (
    EMPTY_STOP_WORDS,
    DefaultStopwordRemover,
)
from textnorm.core.tokenization.base import Tokenizer
from textnorm.core.tokenization.config import (
    OptionsLike,
    TokenizationConfig,
    base_config,
)
from textnorm.core.tokenization.ngrams import (
    NGram,
    as_positive_int,
    get_ngrams,
    strip_diacritics,
    word_ngrams,
)
from textnorm.utils.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class DefaultTokenizer(Tokenizer):
    """
    Configurable tokenizer: lowercase -> strip diacritics -> drop digits ->
    punctuation to spaces -> split -> length filter -> stopword filter.

    Bind a language by passing its ``StopwordSource``; without one the
    tokenizer is language-less and only custom stopwords apply.

    >>> DefaultTokenizer().tokenize("Hello, world! This is a test.")
    ['hello', 'world', 'this', 'is', 'test']
    """

    # ASCII punctuation, Spanish inverted marks, guillemets and the
    # curly/low quotation marks U+2018..U+201F.
    _re_punct = re.compile(
        "["
        + re.escape(string.punctuation)
        + "\u00a1\u00bf\u00ab\u00bb\u2039\u203a\u2018-\u201f"
        + "]"
    )
    _re_digits = re.compile(r"[0-9]+")

    get_ngrams = staticmethod(get_ngrams)

    def __init__(
        self,
        config: OptionsLike = None,
        stopwords: Optional[StopwordSource] = None,
    ):
        self.cfg = base_config().merged(TokenizationConfig.coerce(config))
        self.stopwords = stopwords

    def _resolve(self, options: OptionsLike) -> TokenizationConfig:
        return self.cfg.merged(TokenizationConfig.coerce(options))

    def tokenize(self, text: str, options: OptionsLike = None) -> List[str]:
        if not isinstance(text, str):
            raise InvalidInputError(
                code="INVALID_TEXT", message="Input text must be a string."
            )
        opts = self._resolve(options)

        if not text or not text.strip():
            return []

        s = text
        if opts.lowercase:
            s = s.lower()
        if opts.remove_diacritics:
            s = strip_diacritics(s)
        if opts.remove_numbers:
            s = self._re_digits.sub(" ", s)
        # replace, never delete: keeps "l'etat" as two words
        s = self._re_punct.sub(" ", s).strip()
        if not s:
            return []

        tokens = [t for t in s.split() if self._is_valid_token(t, opts)]

        if opts.remove_stop_words:
            return self._filter_stop_words(tokens, opts)
        return tokens

    def join(self, tokens: List[str]) -> str:
        return " ".join(tokens)

    def chunk(self, text: str, size: int, options: OptionsLike = None) -> List[str]:
        n = as_positive_int(size)
        if n is None:
            return []

        tokens = self.tokenize(text, options)
        return [self.join(tokens[i : i + n]) for i in range(0, len(tokens), n)]

    def get_stop_words(self, options: OptionsLike = None) -> FrozenSet[str]:
        opts = self._resolve(options)
        if opts.language_stop_words_set is not None:
            return opts.language_stop_words_set
        if self.stopwords is None:
            return EMPTY_STOP_WORDS
        return self.stopwords.get_stop_words()

    def get_trigrams(
        self,
        text: str,
        options: OptionsLike = None,
        n: Optional[int] = None,
        join_tokens: bool = False,
    ) -> List[NGram]:
        """Word n-grams over the tokens of ``text`` (``NGRAM_SIZE``, trigrams by default)."""
        return word_ngrams(self.tokenize(text, options), n, join_tokens)

    @staticmethod
    def _is_valid_token(token: str, opts: TokenizationConfig) -> bool:
        if not token:
            return False
        if opts.min_length is not None and len(token) < opts.min_length:
            return False
        if opts.max_length is not None and len(token) > opts.max_length:
            return False
        return True

    def _filter_stop_words(
        self, tokens: List[str], opts: TokenizationConfig
    ) -> List[str]:
        remover = DefaultStopwordRemover(
            self.get_stop_words(opts), opts.custom_stop_words or ()
        )
        kept, removed = remover.remove(tokens)
        if removed:
            logger.debug("Removed %d stopword token(s)", len(removed))
        return kept
