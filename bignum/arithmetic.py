from typing import Tuple

from . import words as w
from .errors import DivisionByZeroError, DomainError


class Arithmetic:
    __slots__ = ()

    def add(self, other) -> 'BigInt':
        other = self._operand(other)
        if self.is_neg == other.is_neg:
            if len(self.words) >= len(other.words):
                return self._make(w.add(self.words, other.words), self.is_neg)
            return self._make(w.add(other.words, self.words), self.is_neg)

        res = w.compare(self.words, other.words)
        if res == 0:
            return self._make([0])
        hi, lo = (self, other) if res > 0 else (other, self)
        return self._make(w.sub(hi.words, lo.words), hi.is_neg)

    def sub(self, other) -> 'BigInt':
        return self.add(self._operand(other).neg())

    def mul(self, other) -> 'BigInt':
        other = self._operand(other)
        if not self or not other:
            return self._make([0])
        return self._make(w.mul(self.words, other.words), self.is_neg != other.is_neg)

    def divide(self, other) -> Tuple['BigInt', 'BigInt']:
        """Truncating division, returns (quotient, remainder).

        The remainder has the dividend's sign and |remainder| < |divisor|.
        """
        other = self._operand(other)
        if not other:
            raise DivisionByZeroError("division by zero")

        quot, rem = w.divmod_words(self.words, other.words)
        return (self._make(quot, self.is_neg != other.is_neg),
                self._make(rem, self.is_neg))

    def quotient(self, other) -> 'BigInt':
        return self.divide(other)[0]

    def remainder(self, other) -> 'BigInt':
        return self.divide(other)[1]

    def neg(self) -> 'BigInt':
        return self._make(list(self.words), not self.is_neg)

    def abs(self) -> 'BigInt':
        return self._make(list(self.words))

    def succ(self) -> 'BigInt':
        return self.add(1)

    def pred(self) -> 'BigInt':
        return self.sub(1)

    def sqrt(self) -> 'BigInt':
        """Floor square root by binary search: r*r <= self < (r+1)*(r+1)."""
        if self == 0 or self == 1:
            return self._make(list(self.words))

        if self.is_neg:
            raise DomainError("sqrt called for negative integer")

        lo = self._make([1])
        hi = self.quotient(2).add(1)

        while lo < hi.pred():
            mid = lo.add(hi).quotient(2)
            res = mid.mul(mid).compare(self)
            if res == 0:
                lo = mid
                break

            if res < 0:
                lo = mid
            else:
                hi = mid

        return lo

    def __add__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.sub(self)

    def __mul__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.mul(self)

    def __truediv__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.quotient(other)

    def __rtruediv__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.quotient(self)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.remainder(other)

    def __rmod__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.remainder(self)

    def __divmod__(self, other) -> Tuple['BigInt', 'BigInt']:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rdivmod__(self, other) -> Tuple['BigInt', 'BigInt']:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __neg__(self) -> 'BigInt':
        return self.neg()

    def __pos__(self) -> 'BigInt':
        return self._make(list(self.words), self.is_neg)

    def __abs__(self) -> 'BigInt':
        return self.abs()
