import primefac
import pytest

from bignum import BigInt, DivisionByZeroError


def random_prime(rng, bits: int) -> int:
    n = rng.getrandbits(bits) | (1 << (bits - 1)) | 1
    while not primefac.isprime(n):
        n += 2
    return n


def test_small_truncating_cases():
    assert BigInt("7").divide(BigInt("2")) == (3, 1)
    assert BigInt("-7").divide(BigInt("2")) == (-3, -1)
    assert BigInt("7").divide(BigInt("-2")) == (-3, 1)
    assert BigInt("-7").divide(BigInt("-2")) == (3, -1)


def test_operators_truncate():
    assert BigInt(-7) / 2 == -3
    assert BigInt(-7) // 2 == -3
    assert BigInt(-7) % 2 == -1
    assert divmod(BigInt(-7), 2) == (-3, -1)
    assert 7 / BigInt(-2) == -3
    assert 7 % BigInt(-2) == 1


@pytest.mark.parametrize("x", [0, 1, -1, 1 << 100, -(1 << 100)])
def test_division_by_zero(x):
    with pytest.raises(DivisionByZeroError):
        BigInt(x).divide(BigInt(0))
    with pytest.raises(ZeroDivisionError):
        BigInt(x) / 0
    with pytest.raises(ZeroDivisionError):
        BigInt(x) % 0


def test_dividend_smaller_than_divisor():
    q, r = BigInt(-5).divide(BigInt(1 << 80))
    assert q == 0 and not q.is_neg
    assert r == -5


def test_zero_dividend():
    q, r = BigInt(0).divide(BigInt(-(1 << 80)))
    assert q == 0 and not q.is_neg
    assert r == 0 and not r.is_neg


def test_native_sign_combinations(rng, native_divmod):
    for _ in range(1000):
        r1 = rng.getrandbits(31)
        r2 = rng.getrandbits(31) or 1
        for a, b in ((r1, r2), (r1, -r2), (-r1, r2), (-r1, -r2)):
            q, r = native_divmod(a, b)
            assert BigInt(a) / BigInt(b) == q
            assert BigInt(a) % BigInt(b) == r


def test_division_identity(rng, native_divmod):
    for _ in range(500):
        a = rng.getrandbits(rng.randint(1, 512)) * rng.choice((1, -1))
        b = (rng.getrandbits(rng.randint(1, 256)) or 1) * rng.choice((1, -1))
        x, y = BigInt(a), BigInt(b)
        q, r = x.divide(y)
        assert (int(q), int(r)) == native_divmod(a, b)
        assert q * y + r == x
        assert r.compare_abs(y) < 0
        assert r == 0 or r.is_neg == x.is_neg


def test_prime_divisors(rng):
    for _ in range(50):
        p = random_prime(rng, rng.randint(40, 160))
        k = rng.getrandbits(rng.randint(1, 300)) + 1
        q, r = BigInt(k * p).divide(BigInt(p))
        assert q == k
        assert r == 0
        q, r = BigInt(k * p + 1).divide(BigInt(p))
        assert q == k
        assert r == 1


def test_small_primes_single_word_path():
    n = BigInt(1 << 200)
    for p, _ in zip(primefac.primegen(), range(200)):
        q, r = n.divide(p)
        assert (int(q), int(r)) == divmod(1 << 200, p)


def test_compound_division(rng):
    for _ in range(100):
        r1 = rng.getrandbits(31)
        r2 = rng.getrandbits(31) or 1
        i1 = BigInt(r1)
        i1 /= r2
        assert i1 == r1 // r2
        i1 = BigInt(r1)
        i1 %= r2
        assert i1 == r1 % r2
