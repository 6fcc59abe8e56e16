from .bigint import BigInt
from .checked import (
    Result,
    try_divide,
    try_from_native,
    try_parse,
    try_quotient,
    try_remainder,
    try_sqrt,
    try_to_native,
    try_to_string,
)
from .conversion import NativeType
from .errors import (
    BaseError,
    BigIntError,
    DivisionByZeroError,
    DomainError,
    ParseError,
    RangeError,
)

__all__ = [
    "BigInt",
    "NativeType",
    "Result",
    "BigIntError",
    "ParseError",
    "DivisionByZeroError",
    "DomainError",
    "RangeError",
    "BaseError",
    "try_parse",
    "try_divide",
    "try_quotient",
    "try_remainder",
    "try_sqrt",
    "try_to_string",
    "try_to_native",
    "try_from_native",
]
