import primefac
import pytest

from bignum import BigInt, DomainError


@pytest.mark.parametrize("n, root", [
    (0, 0), (1, 1), (2, 1), (3, 1), (4, 2), (5, 2), (6, 2), (7, 2), (8, 2), (9, 3),
])
def test_small_values(n, root):
    assert BigInt(n).sqrt() == root


def test_from_strings():
    assert BigInt("9").sqrt() == 3
    assert BigInt("8").sqrt() == 2


def test_negative_is_a_domain_error():
    with pytest.raises(DomainError):
        BigInt(-1).sqrt()
    with pytest.raises(ValueError):
        BigInt(-(1 << 80)).sqrt()


def test_floor_bounds(rng):
    for _ in range(200):
        i1 = BigInt(rng.getrandbits(32))
        root = i1.sqrt()
        root1 = root + 1
        assert root * root <= i1 < root1 * root1
        assert (i1 * i1).sqrt() == i1


def test_wide_values(rng):
    for _ in range(30):
        n = rng.getrandbits(rng.randint(64, 256))
        root = BigInt(n).sqrt()
        assert int(root) ** 2 <= n < (int(root) + 1) ** 2


def test_square_of_prime(rng):
    for _ in range(10):
        p = rng.getrandbits(80) | 1
        while not primefac.isprime(p):
            p += 2
        assert BigInt(p * p).sqrt() == p
        assert BigInt(p * p - 1).sqrt() == p - 1
