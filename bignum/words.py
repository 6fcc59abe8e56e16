from typing import List, Tuple

from .errors import DivisionByZeroError

WORD_BITS = 32
BASE = (1 << WORD_BITS)
MASK = BASE - 1

Words = List[int]


def clamp(words: Words) -> Words:
    """Drop most-significant zero words, keeping at least one word."""
    i = len(words)
    while i > 1:
        if words[i - 1] != 0:
            break
        i -= 1
    if i == 0:
        words[:] = [0]
    else:
        del words[i:]
    return words


def is_zero(words: Words) -> bool:
    return len(words) == 1 and words[0] == 0


def from_int(n: int) -> Words:
    a: Words = []
    n = abs(n)
    while True:
        a.append(n & MASK)
        n >>= WORD_BITS
        if n == 0:
            break
    return a


def to_int(words: Words) -> int:
    a = 0
    for x in reversed(words):
        a = (a << WORD_BITS) | x
    return a


def compare(lhs: Words, rhs: Words) -> int:
    if len(lhs) != len(rhs):
        return 1 if len(lhs) > len(rhs) else -1

    for i in range(len(lhs) - 1, -1, -1):
        if lhs[i] != rhs[i]:
            return 1 if lhs[i] > rhs[i] else -1

    return 0


def add(hi: Words, lo: Words) -> Words:
    # len(hi) >= len(lo)
    out: Words = [0] * len(hi)
    carry = 0
    for i in range(len(lo)):
        acc = hi[i] + lo[i] + carry
        out[i] = acc & MASK
        carry = acc >> WORD_BITS

    for i in range(len(lo), len(hi)):
        acc = hi[i] + carry
        out[i] = acc & MASK
        carry = acc >> WORD_BITS

    if carry:
        out.append(carry)
    return out


def sub(hi: Words, lo: Words) -> Words:
    # |hi| >= |lo|, checked by the caller
    out: Words = [0] * len(hi)
    borrow = 0
    for i in range(len(hi)):
        acc = hi[i] - borrow
        if i < len(lo):
            acc -= lo[i]
        if acc < 0:
            acc += BASE
            borrow = 1
        else:
            borrow = 0
        out[i] = acc
    return clamp(out)


def mul(hi: Words, lo: Words) -> Words:
    out: Words = [0] * (len(hi) + len(lo))
    for i, h in enumerate(hi):
        if h == 0:
            continue
        carry = 0
        for j, l in enumerate(lo):
            acc = out[i + j] + h * l + carry
            out[i + j] = acc & MASK
            carry = acc >> WORD_BITS
        out[i + len(lo)] = carry
    return clamp(out)


def mul_add_small(words: Words, m: int, a: int) -> None:
    """In place: words = words * m + a, with m and a below BASE."""
    carry = a
    for i in range(len(words)):
        acc = words[i] * m + carry
        words[i] = acc & MASK
        carry = acc >> WORD_BITS
    if carry:
        words.append(carry)


def divmod_small(words: Words, d: int) -> Tuple[Words, int]:
    quot: Words = [0] * len(words)
    k = 0
    for j in range(len(words) - 1, -1, -1):
        cur = (k << WORD_BITS) | words[j]
        quot[j] = cur // d
        k = cur - quot[j] * d
    return clamp(quot), k


def _normalize(words: Words, s: int) -> Tuple[Words, int]:
    out: Words = []
    carry = 0
    for w in words:
        out.append(((w << s) | carry) & MASK)
        carry = w >> (WORD_BITS - s)
    return out, carry


def divmod_knuth(u: Words, v: Words) -> Tuple[Words, Words]:
    """Knuth's Algorithm D (TAOCP vol. 2, 4.3.1).

    Requires len(v) >= 2 and |u| >= |v|. Both operands are shifted left
    by s bits so the top word of the divisor has its high bit set; each
    quotient digit is then estimated from the top two dividend words and
    is at most one too large after the correction loop.
    """
    m = len(u)
    n = len(v)
    s = WORD_BITS - v[-1].bit_length()

    vn, _ = _normalize(v, s)
    un, top = _normalize(u, s)
    un.append(top)

    quot: Words = [0] * (m - n + 1)
    v1 = vn[n - 1]
    v2 = vn[n - 2]

    for j in range(m - n, -1, -1):
        num = (un[j + n] << WORD_BITS) | un[j + n - 1]
        qhat, rhat = divmod(num, v1)

        while qhat >= BASE or qhat * v2 > ((rhat << WORD_BITS) | un[j + n - 2]):
            qhat -= 1
            rhat += v1
            if rhat >= BASE:
                break

        # multiply and subtract
        k = 0
        for i in range(n):
            p = qhat * vn[i]
            t = un[i + j] - k - (p & MASK)
            un[i + j] = t & MASK
            k = (p >> WORD_BITS) - (t >> WORD_BITS)

        t = un[j + n] - k
        un[j + n] = t & MASK
        quot[j] = qhat

        if t < 0:
            # qhat was one too large, add the divisor back
            quot[j] -= 1
            carry = 0
            for i in range(n):
                acc = un[i + j] + vn[i] + carry
                un[i + j] = acc & MASK
                carry = acc >> WORD_BITS
            un[j + n] = (un[j + n] + carry) & MASK

    rem: Words = [0] * n
    for i in range(n):
        rem[i] = (un[i] >> s) | ((un[i + 1] << (WORD_BITS - s)) & MASK)

    return clamp(quot), clamp(rem)


def divmod_words(u: Words, v: Words) -> Tuple[Words, Words]:
    if is_zero(v):
        raise DivisionByZeroError("division by zero")

    if compare(u, v) < 0:
        return [0], list(u)

    if len(v) == 1:
        q, r = divmod_small(u, v[0])
        return q, [r]

    return divmod_knuth(u, v)


def shift_right(words: Words, n: int) -> Words:
    w, r = divmod(n, WORD_BITS)
    if w >= len(words):
        return [0]

    out = words[w:]
    if r == 0:
        return clamp(out)

    shift = WORD_BITS - r
    mask = (1 << r) - 1
    carry = 0
    for i in range(len(out) - 1, -1, -1):
        word = out[i]
        out[i] = (word >> r) | (carry << shift)
        carry = word & mask
    return clamp(out)


def shift_left(words: Words, n: int) -> Words:
    w, r = divmod(n, WORD_BITS)
    out = [0] * w + list(words)
    if r == 0:
        return clamp(out)

    shift = WORD_BITS - r
    carry = 0
    for i in range(w, len(out)):
        word = out[i]
        out[i] = ((word << r) & MASK) | carry
        carry = word >> shift
    if carry:
        out.append(carry)
    return clamp(out)


def invert(words: Words, size: int = 0) -> Words:
    """Two's complement of a magnitude over `size` words (or its own length).

    Flipping every bit and adding one maps a negative value's magnitude to
    its two's-complement pattern and a pattern back to the magnitude.
    Overflow past the top word is discarded.
    """
    size = max(size, len(words))
    out = [(~x) & MASK for x in words] + [MASK] * (size - len(words))
    carry = 1
    for i in range(size):
        if not carry:
            break
        acc = out[i] + carry
        out[i] = acc & MASK
        carry = acc >> WORD_BITS
    return out
