"""
English suffix-stripping rules.

1. plurals: sses -> ss, ies -> y, trailing s (not ss) dropped
2. ing / ed removed when the remainder has a vowel
3. trailing e removed when the remainder has a vowel
4. ization -> ize, ational -> ate, fulness -> ful, ousness -> ous
5. final double consonant reduced (except l, s, z)

>>> stem_english("dresses"), stem_english("ponies"), stem_english("running")
('dress', 'pony', 'run')
"""

from __future__ import annotations

from textnorm.core.stemming.rules.common import (
    MIN_STEM_LENGTH,
    drop_trailing_e,
    has_vowel,
    reduce_double_consonant,
)

# (suffix, replacement, word must be longer than)
_DERIVATIONAL = (
    ("ization", "ize", 7),
    ("ational", "ate", 7),
    ("fulness", "ful", 8),
    ("ousness", "ous", 7),
)


def stem_english(word: str) -> str:
    w = word
    if len(w) < MIN_STEM_LENGTH:
        return w

    # Step 1: plurals
    if w.endswith("sses"):
        w = w[:-2]
    elif w.endswith("ies"):
        w = w[:-3] + "y"
    elif w.endswith("s") and not w.endswith("ss"):
        w = w[:-1]

    # Step 2: -ing / -ed
    if w.endswith("ing") and len(w) > 4:
        if has_vowel(w[:-3]):
            w = w[:-3]
    elif w.endswith("ed") and len(w) > 3:
        if has_vowel(w[:-2]):
            w = w[:-2]

    # Step 3
    w = drop_trailing_e(w)

    # Step 4: first matching derivational suffix only
    for suffix, replacement, min_len in _DERIVATIONAL:
        if w.endswith(suffix) and len(w) > min_len:
            w = w[: -len(suffix)] + replacement
            break

    # Step 5
    return reduce_double_consonant(w)
