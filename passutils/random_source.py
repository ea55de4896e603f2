"""
passutils.random_source
Uniform 32-bit integers from the operating system's CSPRNG.

This is the only place the generator obtains randomness. There is no fallback
to the `random` module: if the OS cannot supply entropy the caller fails.
"""

import os
from typing import List

from .errors import EntropySourceError, OutOfRangeError
from .validation import require_integer

UINT32_BYTES = 4


def random_uint32s(count: int) -> List[int]:
    """
    Return `count` independent integers, each uniform over [0, 2**32).
    """
    require_integer(count, "Random value count")
    if count < 0:
        raise OutOfRangeError("Random value count must not be negative")
    if count == 0:
        return []
    try:
        raw = os.urandom(count * UINT32_BYTES)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError("Unable to read from the system entropy source") from e
    return [
        int.from_bytes(raw[i:i + UINT32_BYTES], "little")
        for i in range(0, len(raw), UINT32_BYTES)
    ]
