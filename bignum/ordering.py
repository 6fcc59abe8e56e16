from . import words as w


class Ordering:
    __slots__ = ()

    def compare(self, other) -> int:
        """Three-way signed comparison: -1, 0 or 1."""
        other = self._operand(other)
        if self.is_neg != other.is_neg:
            # zero compares equal to zero whatever its sign field says
            if w.is_zero(self.words) and w.is_zero(other.words):
                return 0
            return -1 if self.is_neg else 1

        res = w.compare(self.words, other.words)
        return -res if self.is_neg else res

    def compare_abs(self, other) -> int:
        """Three-way comparison of magnitudes, ignoring sign."""
        other = self._operand(other)
        return w.compare(self.words, other.words)

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(int(self))

    def __bool__(self) -> bool:
        return not w.is_zero(self.words)
