"""
passutils.errors
Exception classes raised by the password generator.

Each error also derives from the builtin that matches its kind, so callers
catching TypeError or ValueError keep working.
"""


class PassUtilsError(Exception):
    """Base exception for all passutils errors."""

    pass


class EntropySourceError(PassUtilsError, RuntimeError):
    """The operating system could not supply random bytes."""

    pass


class PasswordGenerationError(PassUtilsError):
    """Base for errors raised while validating or generating a password."""

    pass


class InvalidNumberError(PasswordGenerationError, TypeError):
    """A numeric parameter is not a well-formed integer."""

    pass


class OutOfRangeError(PasswordGenerationError, ValueError):
    """A numeric parameter is below its allowed minimum."""

    pass


class InvalidAmountError(OutOfRangeError):
    """The number of passwords requested is not positive."""

    pass


class InvalidRequirementError(OutOfRangeError):
    """A minimum count is negative."""

    pass


class EmptyPoolError(OutOfRangeError):
    """Filtering left no characters to draw from."""

    pass


class UnsatisfiableRequirementError(PasswordGenerationError, ValueError):
    """The requirements cannot be met with the given length and options."""

    pass


class LengthTooShortError(UnsatisfiableRequirementError):
    def __init__(self, length: int, minimum_length: int):
        self.length = length
        self.minimum_length = minimum_length
        super().__init__(
            f"Password length {length} is too short for the requirements; "
            f"minimum length is {minimum_length}"
        )


class DisabledClassRequirementError(UnsatisfiableRequirementError):
    def __init__(self, character_class):
        self.character_class = character_class
        super().__init__(
            f"A minimum of {character_class.label} characters was requested "
            f"but {character_class.label} characters are disabled"
        )


class EmptyClassPoolRequirementError(UnsatisfiableRequirementError):
    def __init__(self, character_class):
        self.character_class = character_class
        super().__init__(
            f"A minimum of {character_class.label} characters was requested "
            f"but every {character_class.label} character was filtered out"
        )


class InvalidSequenceError(PasswordGenerationError, TypeError):
    """Shuffle was given something that is not a string or mutable sequence."""

    pass


class InvalidOptionError(PasswordGenerationError, ValueError):
    """Unknown or malformed generation option."""

    pass
