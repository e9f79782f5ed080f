from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from textnorm.utils.exceptions import InvalidOptionError


def _to_dict(x: Mapping[str, str] | None) -> Dict[str, str]:
    return {str(k): str(v) for k, v in (x or {}).items()}


@dataclass(frozen=True)
class StemmerDictionary:
    # surface form -> final stem; skips the rules and ``after`` entirely
    before: Dict[str, str] = field(default_factory=dict)
    # rule-engine output -> replacement stem
    after: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "before", _to_dict(self.before))
        object.__setattr__(self, "after", _to_dict(self.after))

    @classmethod
    def coerce(
        cls, value: Union[StemmerDictionary, Mapping[str, Any], None]
    ) -> StemmerDictionary:
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise InvalidOptionError(
                code="INVALID_STEMMER_DICTIONARY",
                message=f"Expected StemmerDictionary or mapping, got {type(value).__name__}.",
            )
        unknown = sorted(set(value) - {"before", "after"})
        if unknown:
            raise InvalidOptionError(
                code="UNKNOWN_STEMMER_DICTIONARY_KEY",
                message=f"Unknown stemmer dictionary key(s): {', '.join(unknown)}.",
            )
        return cls(before=value.get("before"), after=value.get("after"))


StemmerDictionaryLike = Optional[Union[StemmerDictionary, Mapping[str, Any]]]
