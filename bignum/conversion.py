import enum
import struct
from typing import List, Optional, Tuple

from . import words as w
from .errors import BaseError, ParseError, RangeError

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
PREFIXES = {'0x': 16, '0o': 8, '0b': 2}
MIN_BASE = 2
MAX_BASE = 16


class NativeType(enum.Enum):
    INT8 = (8, True)
    INT16 = (16, True)
    INT32 = (32, True)
    INT64 = (64, True)
    UINT8 = (8, False)
    UINT16 = (16, False)
    UINT32 = (32, False)
    UINT64 = (64, False)

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


def digit_value(c: str) -> Optional[int]:
    if not c.isascii():
        return None
    d = DIGITS.find(c.upper())
    return d if d >= 0 else None


def parse_words(text: str) -> Tuple[List[int], bool]:
    i = 0
    is_neg = False
    if text[:1] == '-':
        is_neg = True
        i += 1

    base = PREFIXES.get(text[i:i + 2])
    if base is None:
        base = 10
    else:
        i += 2

    if i == len(text):
        raise ParseError(f"string is not a number: {text!r}")

    mag = [0]
    for c in text[i:]:
        digit = digit_value(c)
        if digit is None or digit >= base:
            raise ParseError(f"string is not a number: {text!r} (bad digit {c!r} for base {base})")
        w.mul_add_small(mag, base, digit)

    return w.clamp(mag), is_neg


def format_words(words: List[int], is_neg: bool, base: int = 10, prefix: str = '') -> str:
    if base < MIN_BASE or base > MAX_BASE:
        raise BaseError(f"base of integer can only be in the range [{MIN_BASE}, {MAX_BASE}], got {base}")

    if w.is_zero(words):
        return '0'

    res: List[str] = []
    mag = list(words)
    while not w.is_zero(mag):
        mag, r = w.divmod_small(mag, base)
        res.append(DIGITS[r])

    return ('-' if is_neg else '') + prefix + ''.join(reversed(res))


def bytes_to_words(data: bytes) -> Tuple[List[int], bool]:
    """Decode big-endian two's complement; an empty sequence is zero."""
    if not data:
        return [0], False

    is_neg = bool(data[0] & 0x80)
    fill = b'\xff' if is_neg else b'\x00'
    data = fill * (-len(data) % 4) + bytes(data)
    count = len(data) // 4
    pattern = list(reversed(struct.unpack(f'>{count}I', data)))

    if is_neg:
        pattern = w.invert(pattern)
    return w.clamp(pattern), is_neg


def words_to_bytes(words: List[int], is_neg: bool) -> bytes:
    """Minimal big-endian two's complement encoding."""
    size = len(words) + 1
    if is_neg:
        pattern = w.invert(words, size)
        fill = 0xff
    else:
        pattern = words + [0]
        fill = 0x00

    data = struct.pack(f'>{size}I', *reversed(pattern))
    start = 0
    while start < len(data) - 1 and data[start] == fill and (data[start + 1] & 0x80) == (fill & 0x80):
        start += 1
    return data[start:]


class Conversion:
    __slots__ = ()

    @classmethod
    def parse(cls, text: str) -> 'BigInt':
        words, is_neg = parse_words(text)
        return cls._make(words, is_neg)

    def to_string(self, base: int = 10, prefix: str = '') -> str:
        return format_words(self.words, self.is_neg, base, prefix)

    @classmethod
    def from_native(cls, value: int, kind: NativeType) -> 'BigInt':
        if value < kind.min or value > kind.max:
            raise RangeError(f"{value} is out of bounds for {kind.name}")

        if not kind.signed:
            return cls._make(w.from_int(value))

        # negate the minimum value without leaving the type's range
        add_one = False
        if value == kind.min:
            value += 1
            add_one = True

        is_neg = value < 0
        mag = -value if is_neg else value
        if add_one:
            mag += 1
        return cls._make(w.from_int(mag), is_neg)

    def to_native(self, kind: NativeType) -> int:
        if self.compare(kind.max) > 0 or self.compare(kind.min) < 0:
            raise RangeError(f"{self.to_string()} is out of bounds for {kind.name}")
        return int(self)

    @classmethod
    def from_byte_array(cls, data: bytes) -> 'BigInt':
        words, is_neg = bytes_to_words(data)
        return cls._make(words, is_neg)

    def to_byte_array(self) -> bytes:
        return words_to_bytes(self.words, self.is_neg)

    def __int__(self) -> int:
        res = w.to_int(self.words)
        return -res if self.is_neg else res

    __index__ = __int__

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{'-' if self.is_neg else ''}{self.words}"
