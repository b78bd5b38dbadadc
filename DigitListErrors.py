class InvalidDigitError(ValueError):
    """Exception raised when a digit lies outside [0, radix) for the list it is given to."""

    pass


class InvalidRadixError(ValueError):
    """Exception raised when a radix lies outside the supported range [2, 36]."""

    pass


class IndexOutOfRangeError(IndexError):
    """Exception raised when a positional argument violates the bounds of the list."""

    pass


class ConcurrentModificationError(RuntimeError):
    """Exception raised when a cursor detects a structural change made outside of itself."""

    pass


class IllegalStateError(RuntimeError):
    """Exception raised when a cursor is asked to set or remove without a previously returned digit."""

    pass


class NoSuchElementError(IndexError):
    """Exception raised when a cursor is advanced past either end of the list."""

    pass
