from __future__ import annotations
import re
import unicodedata
from typing import List, Optional, Sequence, Tuple, Union

from nltk.util import ngrams

from textnorm.core.config import settings

NGram = Union[str, Tuple[str, ...]]

# U+0021..U+0040: ASCII symbols and digits
_re_ascii_symbols = re.compile(r"[!-@]+")
_re_ws = re.compile(r"\s+")


def strip_diacritics(text: str) -> str:
    """
    Remove diacritical marks ('réaliste' -> 'realiste', 'piñata' -> 'pinata').

    NFD splits base letters from their combining marks; marks (category Mn)
    are dropped and the remainder recomposed so other scripts survive intact.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def as_positive_int(value) -> Optional[int]:
    """``value`` as an int if it is a positive integral number, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float) and value.is_integer() and value > 0:
        return int(value)
    return None


def default_size(n: Optional[int]) -> Optional[int]:
    """``n``, or the configured ``NGRAM_SIZE`` when it is None (read per call)."""
    return settings.NGRAM_SIZE if n is None else n


def get_ngrams(
    text: str, n: Optional[int] = None, join_tokens: bool = True
) -> List[NGram]:
    """
    Character n-grams of ``text``.

    The text is stripped of diacritics, ASCII symbols/digits become spaces,
    whitespace is collapsed, then it is trimmed, lowercased and padded with one
    space on each side. A padded length ``L`` yields ``L - n + 1`` windows.
    ``n`` defaults to ``settings.NGRAM_SIZE``.

    >>> get_ngrams("abcde", 3)
    [' ab', 'abc', 'bcd', 'cde', 'de ']
    """
    if not text:
        return []
    size = as_positive_int(default_size(n))
    if size is None:
        return []

    cleaned = strip_diacritics(str(text))
    cleaned = _re_ascii_symbols.sub(" ", cleaned)
    cleaned = _re_ws.sub(" ", cleaned).strip().lower()
    padded = f" {cleaned} "

    if len(padded) < size:
        return []
    return _windows(padded, size, join_tokens, sep="")


def word_ngrams(
    tokens: Sequence[str], n: Optional[int] = None, join_tokens: bool = False
) -> List[NGram]:
    """Sliding windows of ``n`` tokens; empty when there are fewer than n."""
    size = as_positive_int(default_size(n))
    if size is None or len(tokens) < size:
        return []
    return _windows(tokens, size, join_tokens, sep=" ")


def _windows(seq: Sequence[str], n: int, join: bool, sep: str) -> List[NGram]:
    grams = ngrams(seq, n)
    if join:
        return [sep.join(g) for g in grams]
    return [tuple(g) for g in grams]
