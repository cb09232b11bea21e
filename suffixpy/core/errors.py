"""Exception types raised by the suffix index."""


class SuffixIndexError(Exception):
    """Base class for contract violations against a suffix index."""


class IndexOutOfRangeError(SuffixIndexError, IndexError):
    """A rank index fell outside the bound an operation requires.

    Attributes:
        index: The offending rank index
        lower: Smallest valid index (inclusive)
        upper: Largest valid index plus one (exclusive)
    """

    def __init__(self, index: int, lower: int, upper: int) -> None:
        self.index = index
        self.lower = lower
        self.upper = upper
        super().__init__(f"index {index} out of range [{lower}, {upper})")


class InvalidInputError(SuffixIndexError, TypeError):
    """Text or key was absent or not a string."""


def require_text(value: object, name: str) -> str:
    """Return value unchanged if it is a str, otherwise raise InvalidInputError."""
    if value is None:
        raise InvalidInputError(f"{name} must not be None")
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a str, got {type(value).__name__}")
    return value
