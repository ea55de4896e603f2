"""passutils: constrained, cryptographically secure password generation."""

from .charsets import CharacterClass, GenerationOptions, Pool, build_pool
from .errors import (
    DisabledClassRequirementError,
    EmptyClassPoolRequirementError,
    EmptyPoolError,
    EntropySourceError,
    InvalidAmountError,
    InvalidNumberError,
    InvalidOptionError,
    InvalidRequirementError,
    InvalidSequenceError,
    LengthTooShortError,
    OutOfRangeError,
    PassUtilsError,
    PasswordGenerationError,
    UnsatisfiableRequirementError,
)
from .generator import generate_multiple_passwords, generate_password
from .requirements import Requirements, validate_requirements
from .shuffle import shuffle

__all__ = [
    "CharacterClass",
    "GenerationOptions",
    "Pool",
    "Requirements",
    "build_pool",
    "validate_requirements",
    "generate_password",
    "generate_multiple_passwords",
    "shuffle",
    "PassUtilsError",
    "PasswordGenerationError",
    "EntropySourceError",
    "InvalidNumberError",
    "OutOfRangeError",
    "InvalidAmountError",
    "InvalidRequirementError",
    "EmptyPoolError",
    "UnsatisfiableRequirementError",
    "LengthTooShortError",
    "DisabledClassRequirementError",
    "EmptyClassPoolRequirementError",
    "InvalidSequenceError",
    "InvalidOptionError",
]
