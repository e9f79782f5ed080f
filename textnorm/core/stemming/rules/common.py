from __future__ import annotations
from typing import FrozenSet

MIN_STEM_LENGTH = 3

LATIN_VOWELS: FrozenSet[str] = frozenset("aeiou")

# final doubles kept as-is ("fall", "buzz", "class")
KEEP_DOUBLE: FrozenSet[str] = frozenset("lsz")


def has_vowel(s: str, vowels: FrozenSet[str] = LATIN_VOWELS) -> bool:
    return any(c in vowels for c in s)


def reduce_double_consonant(word: str) -> str:
    if len(word) > 2 and word[-1] == word[-2] and word[-1] not in KEEP_DOUBLE:
        return word[:-1]
    return word


def drop_trailing_e(word: str, vowels: FrozenSet[str] = LATIN_VOWELS) -> str:
    if word.endswith("e") and len(word) > 3 and has_vowel(word[:-1], vowels):
        return word[:-1]
    return word
