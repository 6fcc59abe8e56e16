import operator
from typing import Callable

from . import words as w


class BitwiseLogic:
    """Two's-complement bitwise operators over sign-magnitude storage.

    Negative operands are expanded to their two's-complement pattern with
    `words.invert`, combined word by word, and the result is inverted back
    to a magnitude when the operator's truth table says it is negative.
    Operands are aligned to one word more than the longer magnitude so the
    top word always holds pure sign bits.
    """

    __slots__ = ()

    def _combine(self, other, op: Callable[[int, int], int], is_neg: bool) -> 'BigInt':
        size = max(len(self.words), len(other.words)) + 1
        lhs = w.invert(self.words, size) if self.is_neg else self.words + [0] * (size - len(self.words))
        rhs = w.invert(other.words, size) if other.is_neg else other.words + [0] * (size - len(other.words))

        out = [op(a, b) for a, b in zip(lhs, rhs)]
        if is_neg:
            out = w.invert(out)
        return self._make(out, is_neg)

    def and_(self, other) -> 'BigInt':
        other = self._operand(other)
        return self._combine(other, operator.and_, self.is_neg and other.is_neg)

    def or_(self, other) -> 'BigInt':
        other = self._operand(other)
        return self._combine(other, operator.or_, self.is_neg or other.is_neg)

    def xor(self, other) -> 'BigInt':
        other = self._operand(other)
        return self._combine(other, operator.xor, self.is_neg != other.is_neg)

    def invert(self) -> 'BigInt':
        return self.add(1).neg()

    def shift_left(self, n: int) -> 'BigInt':
        n = operator.index(n)
        if n < 0:
            return self.shift_right(-n)
        if n == 0 or not self:
            return self._make(list(self.words), self.is_neg)
        return self._make(w.shift_left(self.words, n), self.is_neg)

    def shift_right(self, n: int) -> 'BigInt':
        n = operator.index(n)
        if n < 0:
            return self.shift_left(-n)
        if n == 0 or not self:
            return self._make(list(self.words), self.is_neg)
        return self._make(w.shift_right(self.words, n), self.is_neg)

    def __and__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.and_(other)

    def __rand__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.and_(self)

    def __or__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.or_(other)

    def __ror__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.or_(self)

    def __xor__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.xor(other)

    def __rxor__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.xor(self)

    def __invert__(self) -> 'BigInt':
        return self.invert()

    def __lshift__(self, other) -> 'BigInt':
        try:
            n = operator.index(other)
        except TypeError:
            return NotImplemented
        return self.shift_left(n)

    def __rlshift__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.shift_left(int(self))

    def __rshift__(self, other) -> 'BigInt':
        try:
            n = operator.index(other)
        except TypeError:
            return NotImplemented
        return self.shift_right(n)

    def __rrshift__(self, other) -> 'BigInt':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.shift_right(int(self))
