"""
Spanish suffix-stripping rules.

>>> [stem_spanish(w) for w in ("gatos", "luces", "caminando", "hablar")]
['gato', 'luz', 'camin', 'habl']
"""

from __future__ import annotations

from textnorm.core.stemming.rules.common import (
    MIN_STEM_LENGTH,
    drop_trailing_e,
    reduce_double_consonant,
)

_GERUNDS = ("ando", "iendo")
_PARTICIPLES = ("ado", "ido")
_INFINITIVES = ("ar", "er", "ir")


def stem_spanish(word: str) -> str:
    w = word
    if len(w) < MIN_STEM_LENGTH:
        return w

    # Step 1: plurals (luces -> luz, naciones -> nacion, gatos -> gato)
    if w.endswith("ces") and len(w) > 3:
        w = w[:-3] + "z"
    elif w.endswith("es") and len(w) > 3:
        w = w[:-2]
    elif w.endswith("s") and not w.endswith("ss") and len(w) > 3:
        w = w[:-1]

    # Step 2: gerund / participle, then infinitive on the result.
    # Gerunds always drop 4 chars, so "comiendo" -> "comi".
    if w.endswith(_GERUNDS) and len(w) > 5:
        w = w[:-4]
    elif w.endswith(_PARTICIPLES) and len(w) > 4:
        w = w[:-3]
    if w.endswith(_INFINITIVES) and len(w) > 3:
        w = w[:-2]

    # Step 3: adverbs
    if w.endswith("mente") and len(w) > 6:
        w = w[:-5]

    w = drop_trailing_e(w)
    return reduce_double_consonant(w)
