"""
passutils.shuffle
Fisher-Yates shuffle driven by the secure random source.
"""

from collections.abc import MutableSequence

from . import random_source
from .errors import InvalidSequenceError


def _fisher_yates(items: MutableSequence) -> None:
    n = len(items)
    if n < 2:
        return
    values = random_source.random_uint32s(n - 1)
    for step, i in enumerate(range(n - 1, 0, -1)):
        # same modulo approximation as character selection
        j = values[step] % (i + 1)
        items[i], items[j] = items[j], items[i]


def shuffle(sequence):
    """
    Randomly permute `sequence`.
    A str is returned as a new shuffled str; a mutable sequence is shuffled
    in place and returned.
    """
    if isinstance(sequence, str):
        chars = list(sequence)
        _fisher_yates(chars)
        return "".join(chars)
    if isinstance(sequence, MutableSequence):
        _fisher_yates(sequence)
        return sequence
    raise InvalidSequenceError(
        f"Cannot shuffle {type(sequence).__name__}: not a valid sequence"
    )
