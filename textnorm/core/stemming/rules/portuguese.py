"""
Brazilian Portuguese suffix-stripping rules.

>>> [stem_portuguese(w) for w in ("limões", "falando", "falar", "casas")]
['limão', 'fal', 'fal', 'casa']
"""

from __future__ import annotations
from typing import FrozenSet

from textnorm.core.stemming.rules.common import (
    LATIN_VOWELS,
    MIN_STEM_LENGTH,
    drop_trailing_e,
    reduce_double_consonant,
)

PORTUGUESE_VOWELS: FrozenSet[str] = LATIN_VOWELS | frozenset("ãõáéíóú")

_NASAL_PLURALS = ("ões", "ães")
_GERUNDS = ("ando", "endo", "indo")
_PARTICIPLES = ("ado", "ido")
_INFINITIVES = ("ar", "er", "ir")


def stem_portuguese(word: str) -> str:
    w = word
    if len(w) < MIN_STEM_LENGTH:
        return w

    # Step 1: plurals
    if w.endswith(_NASAL_PLURALS) and len(w) > 3:
        w = w[:-3] + "ão"
    elif w.endswith("es") and len(w) > 4:
        w = w[:-2]
    elif w.endswith("s") and not w.endswith("ss") and len(w) > 3:
        w = w[:-1]

    # Step 2: gerund / participle, then infinitive on the result
    if w.endswith(_GERUNDS) and len(w) > 5:
        w = w[:-4]
    elif w.endswith(_PARTICIPLES) and len(w) > 4:
        w = w[:-3]
    if w.endswith(_INFINITIVES) and len(w) > 3:
        w = w[:-2]

    # Step 3: adverbs
    if w.endswith("mente") and len(w) > 6:
        w = w[:-5]

    w = drop_trailing_e(w, PORTUGUESE_VOWELS)
    return reduce_double_consonant(w)
