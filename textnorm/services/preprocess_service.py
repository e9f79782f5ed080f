from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from textnorm.core.config import settings
from textnorm.core.tokenization.config import OptionsLike
from textnorm.lang.base import LanguageModule
from textnorm.lang.registry import get_language_module
from textnorm.utils.exceptions import InvalidOptionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreprocessResult:
    language: str
    tokens: List[str]
    stems: List[str]


class PreprocessService:
    """
    Front half of a sentiment pipeline: pick a language module, tokenize,
    then stem every token in order. Scoring is left to the caller.

    Works on a single text or on a DataFrame column:
      - ``preprocess``: one text -> PreprocessResult
      - ``preprocess_frame``: adds ``tokens`` and ``stems`` list columns
    """

    def __init__(self, language: Optional[str] = None):
        self.language = language or settings.DEFAULT_LANGUAGE

    def _module(self, lang: Optional[str]) -> LanguageModule:
        return get_language_module(lang or self.language)

    def preprocess(
        self,
        text: str,
        lang: Optional[str] = None,
        *,
        options: OptionsLike = None,
    ) -> PreprocessResult:
        module = self._module(lang)
        tokenizer = module.create_tokenizer(options)
        stemmer = module.create_stemmer()

        tokens = tokenizer.tokenize(text)
        return PreprocessResult(
            language=module.code,
            tokens=tokens,
            stems=stemmer.stem_words(tokens),
        )

    def preprocess_frame(
        self,
        df: pd.DataFrame,
        column: str = "review",
        lang: Optional[str] = None,
        *,
        options: OptionsLike = None,
    ) -> pd.DataFrame:
        if column not in df.columns:
            raise InvalidOptionError(
                code="TEXT_COLUMN_NOT_FOUND", message=f"'{column}' column not found."
            )

        module = self._module(lang)
        tokenizer = module.create_tokenizer(options)
        # one stemmer for the whole frame so repeated words hit the cache
        stemmer = module.create_stemmer()

        texts = df[column].fillna("").astype(str)
        tokens_col: List[List[str]] = []
        stems_col: List[List[str]] = []
        for s in texts:
            toks = tokenizer.tokenize(s)
            tokens_col.append(toks)
            stems_col.append(stemmer.stem_words(toks))

        out = pd.DataFrame(
            {
                column: texts,
                "tokens": tokens_col,
                "stems": stems_col,
            },
            index=df.index,
        )

        logger.info(
            "Preprocessed %d row(s) as '%s' (%d distinct words cached)",
            len(out),
            module.code,
            stemmer.cache_size,
        )
        return out
