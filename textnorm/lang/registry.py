from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple

from textnorm.core.stemming.config import StemmerDictionaryLike
from textnorm.core.stemming.stemmer import CachedStemmer
from textnorm.core.tokenization.config import OptionsLike
from textnorm.core.tokenization.tokenizer import DefaultTokenizer
from textnorm.lang.base import LanguageModule
from textnorm.lang.en import ENGLISH
from textnorm.lang.es import SPANISH
from textnorm.lang.pt import PORTUGUESE

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

_MODULES: Dict[str, LanguageModule] = {
    m.code: m for m in (ENGLISH, SPANISH, PORTUGUESE)
}


def supported_languages() -> List[str]:
    return list(_MODULES)


def get_language_module(code: Optional[str] = None) -> LanguageModule:
    """Case-insensitive lookup; anything unknown (or missing) falls back to English."""
    key = (code or "").strip().lower()
    module = _MODULES.get(key)
    if module is None:
        logger.debug(
            "Unsupported language %r, falling back to '%s'", code, FALLBACK_LANGUAGE
        )
        return _MODULES[FALLBACK_LANGUAGE]
    return module


def create_pipeline(
    code: Optional[str] = None,
    config: OptionsLike = None,
    dictionary: StemmerDictionaryLike = None,
) -> Tuple[DefaultTokenizer, CachedStemmer]:
    module = get_language_module(code)
    return module.create_tokenizer(config), module.create_stemmer(dictionary)
