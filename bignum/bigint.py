from typing import List, Optional, Union

from . import words as w
from .arithmetic import Arithmetic
from .bitwise import BitwiseLogic
from .conversion import Conversion, bytes_to_words, parse_words
from .ordering import Ordering

Value = Union['BigInt', int, str, bytes, bytearray]


class BigInt(Ordering, Arithmetic, BitwiseLogic, Conversion):
    """Arbitrary-precision signed integer.

    Stored as sign and magnitude: `is_neg` plus `words`, a list of 32-bit
    words, least-significant first. The word list is never empty, carries
    no most-significant zero words, and zero is never negative.

    Division (`/`, `//`, `%`, `divmod`) truncates toward zero and the
    remainder takes the dividend's sign, like C rather than Python's int.
    """

    __slots__ = ("is_neg", "words")

    def __init__(self, n: Value = 0) -> None:
        if isinstance(n, BigInt):
            words, is_neg = list(n.words), n.is_neg
        elif isinstance(n, int):
            words, is_neg = w.from_int(n), n < 0
        elif isinstance(n, str):
            words, is_neg = parse_words(n)
        elif isinstance(n, (bytes, bytearray)):
            words, is_neg = bytes_to_words(n)
        else:
            raise TypeError(f"cannot build BigInt from {type(n).__name__}")

        self.words: List[int] = w.clamp(words)
        self.is_neg: bool = is_neg and not w.is_zero(self.words)

    @classmethod
    def _make(cls, words: List[int], is_neg: bool = False) -> 'BigInt':
        obj = cls.__new__(cls)
        obj.words = w.clamp(words)
        obj.is_neg = is_neg and not w.is_zero(obj.words)
        return obj

    @classmethod
    def _coerce(cls, other) -> Optional['BigInt']:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int):
            return cls(other)
        return None

    @classmethod
    def _operand(cls, other) -> 'BigInt':
        res = cls._coerce(other)
        if res is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")
        return res

    def size(self) -> int:
        """Bytes of storage used by the magnitude."""
        return len(self.words) * (w.WORD_BITS // 8)

    def bit_length(self) -> int:
        return (len(self.words) - 1) * w.WORD_BITS + self.words[-1].bit_length()

    def __copy__(self) -> 'BigInt':
        return self._make(list(self.words), self.is_neg)

    def __deepcopy__(self, memo) -> 'BigInt':
        return self.__copy__()
