"""
passutils.requirements
Per-class minimum counts and the checks that make them satisfiable.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .charsets import CharacterClass, GenerationOptions, Pool
from .errors import (
    DisabledClassRequirementError,
    EmptyClassPoolRequirementError,
    InvalidOptionError,
    InvalidRequirementError,
    LengthTooShortError,
)
from .validation import require_integer

# JSON bodies use camelCase field names
_ALIASES = {
    "minUpper": "min_upper",
    "minLower": "min_lower",
    "minNumbers": "min_numbers",
    "minSymbols": "min_symbols",
}

_FIELDS = {
    CharacterClass.LOWERCASE: "min_lower",
    CharacterClass.UPPERCASE: "min_upper",
    CharacterClass.NUMERIC: "min_numbers",
    CharacterClass.SYMBOL: "min_symbols",
}


@dataclass(frozen=True)
class Requirements:
    min_upper: int = 0
    min_lower: int = 0
    min_numbers: int = 0
    min_symbols: int = 0

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Requirements":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidOptionError(
                f"Requirements must be an object, got {type(data).__name__}"
            )
        kwargs = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in _FIELDS.values():
                raise InvalidOptionError(f"Unknown requirement: {key}")
            if name in kwargs:
                raise InvalidOptionError(f"Requirement given twice: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    def minimum(self, character_class: CharacterClass) -> int:
        return getattr(self, _FIELDS[character_class])

    @property
    def total(self) -> int:
        return sum(self.minimum(c) for c in CharacterClass)


def validate_requirements(
    length: int,
    options: GenerationOptions,
    requirements: Requirements,
    pool: Pool,
) -> None:
    """
    Check that `requirements` can be met by a password of `length` drawn from
    `pool`. Runs before any random draw; raises on the first failed check:

    - InvalidNumberError / InvalidRequirementError for a malformed or negative minimum
    - LengthTooShortError when the minimums add up to more than `length`
    - DisabledClassRequirementError for a minimum on a disabled class
    - EmptyClassPoolRequirementError for a minimum on a class filtered to nothing
    """
    for character_class in CharacterClass:
        name = _FIELDS[character_class]
        value = require_integer(requirements.minimum(character_class), name)
        if value < 0:
            raise InvalidRequirementError(f"{name} must not be negative")

    total = requirements.total
    if total > length:
        raise LengthTooShortError(length, total)

    for character_class in CharacterClass:
        if requirements.minimum(character_class) > 0 and not options.enabled(character_class):
            raise DisabledClassRequirementError(character_class)

    for character_class in CharacterClass:
        if requirements.minimum(character_class) > 0 and not pool[character_class]:
            raise EmptyClassPoolRequirementError(character_class)
