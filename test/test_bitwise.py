import pytest

from bignum import BigInt

VALUES = [
    0, 1, -1, 2, -2, 5, -5, 0xFF, -0x80, (1 << 31), -(1 << 31), (1 << 32) - 1,
    -((1 << 32) - 1), 1 << 32, -(1 << 32), (1 << 64) + 12345, -(1 << 64) - 12345,
    -0x80000000, -0xFFFFFFFF, 0x123456789ABCDEF0123456789,
]


@pytest.mark.parametrize("a", VALUES)
@pytest.mark.parametrize("b", VALUES)
def test_binary_ops_match_twos_complement(a, b):
    x, y = BigInt(a), BigInt(b)
    assert x & y == a & b
    assert x | y == a | b
    assert x ^ y == a ^ b


@pytest.mark.parametrize("a", VALUES)
def test_not(a):
    assert ~BigInt(a) == ~a
    assert BigInt(a).invert() == -(a + 1)


def test_not_minus_one_is_canonical_zero():
    res = ~BigInt(-1)
    assert res == 0
    assert not res.is_neg


def test_and_of_negatives_can_grow():
    # ...1000...0 & ...1111...0001 carries into a new word
    res = BigInt(-0x80000000) & BigInt(-0xFFFFFFFF)
    assert res == -(1 << 32)
    assert res.words == [0, 1]


def test_random_against_native(rng):
    for _ in range(500):
        a = rng.getrandbits(rng.randint(1, 200)) * rng.choice((1, -1))
        b = rng.getrandbits(rng.randint(1, 200)) * rng.choice((1, -1))
        x, y = BigInt(a), BigInt(b)
        assert int(x & y) == a & b
        assert int(x | y) == a | b
        assert int(x ^ y) == a ^ b
        assert int(~x) == ~a


def test_mixed_with_native_ints():
    assert 0xF0 & BigInt(0x3C) == 0x30
    assert BigInt(0xF0) | 0x0F == 0xFF
    assert 0xFF ^ BigInt(0x0F) == 0xF0


def test_compound_assignment(rng):
    for _ in range(100):
        r1 = rng.getrandbits(31)
        r2 = rng.getrandbits(31)
        i1 = BigInt(r1)
        i1 |= r2
        assert i1 == r1 | r2
        i1 = BigInt(r1)
        i1 &= r2
        assert i1 == r1 & r2
        i1 = BigInt(r1)
        i1 ^= r2
        assert i1 == r1 ^ r2
