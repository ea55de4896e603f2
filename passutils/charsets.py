"""
passutils.charsets
Character classes, generation options and the filtered character pool.
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .errors import EmptyPoolError, InvalidOptionError

logger = logging.getLogger(__name__)

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = '!@#$%^&*()+_-=}{[]|:;"/?.><,`~'
SIMILAR = frozenset("ilLI|`oO0")


class CharacterClass(Enum):
    # declaration order is the order pools are concatenated and minimums drawn
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NUMERIC = "numeric"
    SYMBOL = "symbol"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]

    @property
    def label(self) -> str:
        return self.value


_ALPHABETS = MappingProxyType({
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.NUMERIC: NUMBERS,
    CharacterClass.SYMBOL: SYMBOLS,
})


@dataclass(frozen=True)
class GenerationOptions:
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = True
    similar: bool = True
    exclude: str = ""

    def __post_init__(self):
        for name in ("uppercase", "lowercase", "numbers", "symbols", "similar"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidOptionError(
                    f"{name} must be true or false, got {type(value).__name__}"
                )
        if not isinstance(self.exclude, str):
            raise InvalidOptionError(
                f"exclude must be a string, got {type(self.exclude).__name__}"
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "GenerationOptions":
        """Build options from a plain dict such as a parsed JSON body."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidOptionError(
                f"Generation options must be an object, got {type(data).__name__}"
            )
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidOptionError(f"Unknown generation option(s): {', '.join(unknown)}")
        return cls(**data)

    def enabled(self, character_class: CharacterClass) -> bool:
        return getattr(self, _OPTION_FLAGS[character_class])


_OPTION_FLAGS = {
    CharacterClass.LOWERCASE: "lowercase",
    CharacterClass.UPPERCASE: "uppercase",
    CharacterClass.NUMERIC: "numbers",
    CharacterClass.SYMBOL: "symbols",
}


@dataclass(frozen=True)
class Pool:
    """Per-class filtered alphabets. `full` joins them in class order."""

    classes: Mapping[CharacterClass, str]

    def __getitem__(self, character_class: CharacterClass) -> str:
        return self.classes[character_class]

    @property
    def full(self) -> str:
        return "".join(self.classes[c] for c in CharacterClass)


def _strip(alphabet: str, unwanted) -> str:
    return "".join(ch for ch in alphabet if ch not in unwanted)


def build_pool(options: GenerationOptions) -> Pool:
    """
    Filter each enabled class alphabet by the exclusion set and, when
    `similar` is off, by the visually similar characters.
    Raises EmptyPoolError if nothing is left to draw from.
    """
    excluded = frozenset(options.exclude)
    classes: Dict[CharacterClass, str] = {}
    for character_class in CharacterClass:
        chars = character_class.alphabet if options.enabled(character_class) else ""
        if excluded:
            chars = _strip(chars, excluded)
        if not options.similar:
            chars = _strip(chars, SIMILAR)
        classes[character_class] = chars

    pool = Pool(MappingProxyType(classes))
    if not pool.full:
        raise EmptyPoolError("Character pool is empty. Enable at least one character type.")
    logger.debug(
        "Built character pool: %s",
        ", ".join(f"{c.label}={len(chars)}" for c, chars in classes.items()),
    )
    return pool
