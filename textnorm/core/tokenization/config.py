from __future__ import annotations
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

from textnorm.core.config import settings
from textnorm.utils.exceptions import InvalidOptionError


@dataclass(frozen=True)
class TokenizationConfig:
    """
    Tokenizer options. ``None`` means "inherit from the layer below"
    (per-call -> instance defaults -> global base defaults).
    """

    lowercase: Optional[bool] = None
    remove_diacritics: Optional[bool] = None
    remove_stop_words: Optional[bool] = None
    remove_numbers: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    custom_stop_words: Optional[Tuple[str, ...]] = None  # ordered
    # replaces (never unions with) the language's built-in set
    language_stop_words_set: Optional[FrozenSet[str]] = None

    def __post_init__(self):
        if self.custom_stop_words is not None and not isinstance(
            self.custom_stop_words, tuple
        ):
            object.__setattr__(
                self, "custom_stop_words", _to_tuple(self.custom_stop_words)
            )
        if self.language_stop_words_set is not None and not isinstance(
            self.language_stop_words_set, frozenset
        ):
            object.__setattr__(
                self,
                "language_stop_words_set",
                frozenset(map(str, self.language_stop_words_set)),
            )

    def merged(self, override: Optional[TokenizationConfig]) -> TokenizationConfig:
        """Return a copy where every field set on ``override`` wins."""
        if override is None:
            return self
        changes = {
            f.name: getattr(override, f.name)
            for f in fields(override)
            if getattr(override, f.name) is not None
        }
        return replace(self, **changes) if changes else self

    @classmethod
    def coerce(cls, value: OptionsLike) -> Optional[TokenizationConfig]:
        if value is None or isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise InvalidOptionError(
                code="INVALID_TOKENIZER_OPTIONS",
                message=f"Expected TokenizationConfig or mapping, got {type(value).__name__}.",
            )
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(value) - known)
        if unknown:
            raise InvalidOptionError(
                code="UNKNOWN_TOKENIZER_OPTION",
                message=f"Unknown tokenizer option(s): {', '.join(unknown)}.",
            )
        return cls(**dict(value))


OptionsLike = Union[TokenizationConfig, Mapping[str, Any], None]


def _to_tuple(x: Iterable[str] | str) -> Tuple[str, ...]:
    if isinstance(x, str):
        return (x,)
    return tuple(map(str, x))


@lru_cache(maxsize=1)
def base_config() -> TokenizationConfig:
    """Fully-resolved global defaults, read once from settings."""
    return TokenizationConfig(
        lowercase=settings.TOKENIZER_LOWERCASE,
        remove_diacritics=settings.TOKENIZER_REMOVE_DIACRITICS,
        remove_stop_words=settings.TOKENIZER_REMOVE_STOP_WORDS,
        remove_numbers=settings.TOKENIZER_REMOVE_NUMBERS,
        min_length=settings.TOKENIZER_MIN_LENGTH,
        max_length=settings.TOKENIZER_MAX_LENGTH,
        custom_stop_words=(),
        language_stop_words_set=None,
    )
