"""
passutils.generator
Secure password generator with per-class minimum counts.

Characters are picked as `value % len(pool)` where `value` is a uniform
32-bit integer from the OS entropy source. When the pool size does not
divide 2**32 this favours the first characters of the pool by at most
len(pool) / 2**32, which is accepted instead of rejection sampling.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from . import random_source
from .charsets import CharacterClass, GenerationOptions, Pool, build_pool
from .errors import InvalidAmountError
from .requirements import Requirements, validate_requirements
from .shuffle import shuffle
from .validation import validate_positive

logger = logging.getLogger(__name__)

OptionsLike = Union[GenerationOptions, Mapping[str, Any], None]
RequirementsLike = Union[Requirements, Mapping[str, Any], None]


def _as_options(options: OptionsLike) -> GenerationOptions:
    if isinstance(options, GenerationOptions):
        return options
    return GenerationOptions.from_mapping(options)


def _as_requirements(requirements: RequirementsLike) -> Requirements:
    if isinstance(requirements, Requirements):
        return requirements
    return Requirements.from_mapping(requirements)


def _draw(chars: str, count: int) -> List[str]:
    """Pick `count` characters from `chars` with replacement."""
    size = len(chars)
    return [chars[value % size] for value in random_source.random_uint32s(count)]


def assemble(length: int, pool: Pool, requirements: Requirements) -> List[str]:
    """
    Return the unshuffled characters: each class minimum in class order,
    then filler from the full pool up to `length`.
    """
    chars: List[str] = []
    for character_class in CharacterClass:
        minimum = requirements.minimum(character_class)
        if minimum > 0:
            chars.extend(_draw(pool[character_class], minimum))

    remaining = length - requirements.total
    if remaining > 0:
        chars.extend(_draw(pool.full, remaining))
    return chars


def generate_password(
    length: int,
    options: OptionsLike = None,
    requirements: RequirementsLike = None,
) -> str:
    """
    Generate a cryptographically secure password of exactly `length` characters.

    `options` and `requirements` accept the dataclasses or plain dicts, e.g.
    {"similar": False, "exclude": "aeiou"} and {"minUpper": 2}.
    All validation happens before any randomness is consumed.
    """
    validate_positive(length, "Password length")
    opts = _as_options(options)
    reqs = _as_requirements(requirements)

    pool = build_pool(opts)
    validate_requirements(length, opts, reqs, pool)

    chars = assemble(length, pool, reqs)
    shuffle(chars)
    return "".join(chars)


def generate_multiple_passwords(
    amount: int,
    length: int,
    options: OptionsLike = None,
    requirements: RequirementsLike = None,
) -> List[str]:
    """Generate `amount` independent passwords. Duplicates are not filtered."""
    validate_positive(length, "Password length")
    validate_positive(amount, "Amount of passwords", InvalidAmountError)
    logger.debug("Generating %d passwords of length %d", amount, length)
    return [generate_password(length, options, requirements) for _ in range(amount)]
