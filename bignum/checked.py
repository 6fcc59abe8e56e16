"""Non-raising entry points for the fallible operations.

Each `try_*` function returns a `Result` holding either the value in
`success` or the `BigIntError` in `error`. Errors other than
`BigIntError` (a wrong operand type, say) still propagate.
"""
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .bigint import BigInt, Value
from .conversion import NativeType
from .errors import BigIntError


@dataclass
class Result:
    success: Optional[Any] = None
    error: Optional[BigIntError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.success


def _attempt(fn: Callable[[], Any]) -> Result:
    try:
        return Result(success=fn())
    except BigIntError as e:
        return Result(error=e)


def try_parse(text: str) -> Result:
    return _attempt(lambda: BigInt.parse(text))


def try_divide(a: Value, b: Value) -> Result:
    return _attempt(lambda: BigInt(a).divide(BigInt(b)))


def try_quotient(a: Value, b: Value) -> Result:
    return _attempt(lambda: BigInt(a).quotient(BigInt(b)))


def try_remainder(a: Value, b: Value) -> Result:
    return _attempt(lambda: BigInt(a).remainder(BigInt(b)))


def try_sqrt(a: Value) -> Result:
    return _attempt(lambda: BigInt(a).sqrt())


def try_to_string(a: Value, base: int = 10, prefix: str = '') -> Result:
    return _attempt(lambda: BigInt(a).to_string(base, prefix))


def try_to_native(a: Value, kind: NativeType) -> Result:
    return _attempt(lambda: BigInt(a).to_native(kind))


def try_from_native(value: int, kind: NativeType) -> Result:
    return _attempt(lambda: BigInt.from_native(value, kind))
