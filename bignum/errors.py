class BigIntError(Exception):
    """Base class for every error raised by bignum."""

    pass


class ParseError(BigIntError, ValueError):
    """Raised when a string is not a number in the accepted grammar."""

    pass


class DivisionByZeroError(BigIntError, ZeroDivisionError):
    pass


class DomainError(BigIntError, ValueError):
    """Raised when an operation is undefined for its operand (sqrt of a negative)."""

    pass


class RangeError(BigIntError, OverflowError):
    """Raised when a value does not fit in the requested native width."""

    pass


class BaseError(BigIntError, ValueError):
    pass
