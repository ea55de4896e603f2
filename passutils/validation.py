"""Shared checks for the numeric parameters of the generator."""

from typing import Type

from .errors import InvalidNumberError, OutOfRangeError


def require_integer(value, name: str) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidNumberError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def validate_positive(value, name: str, error: Type[OutOfRangeError] = OutOfRangeError) -> int:
    """
    Ensure value is an integer greater than 0.
    Raises InvalidNumberError for non-integers and `error` for values < 1.
    """
    require_integer(value, name)
    if value <= 0:
        raise error(f"{name} must be greater than 0")
    return value
