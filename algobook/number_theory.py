"""Number theory: primes, sieves, Carmichael numbers, lattice points, Euclid steps."""

from math import gcd, isqrt


def is_prime(n):
    """Trial division primality test."""
    if n < 2:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def is_carmichael(n):
    """Tell whether ``n`` is composite and ``x**n % n == x`` for every ``1 < x < n``."""
    if n < 2 or is_prime(n):
        return False
    return all(pow(x, n, n) == x for x in range(2, n))


def lattice_points_between(x1, y1, x2, y2):
    """Number of lattice points strictly inside the segment joining two lattice points."""
    return max(gcd(abs(x1 - x2), abs(y1 - y2)) - 1, 0)


def _sieve(limit):
    flags = bytearray([1]) * (limit + 1)
    flags[: min(2, limit + 1)] = bytes(min(2, limit + 1))
    for p in range(2, isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return flags


def count_primes(n):
    """Number of primes not greater than ``n``."""
    if n < 2:
        return 0
    return sum(_sieve(n))


def count_primes_in_range(a, b):
    """Number of primes ``p`` with ``a <= p < b``, by a segmented sieve."""
    if a < 0:
        raise ValueError(f"range start must not be negative, got {a}")
    if b <= a:
        return 0
    small = _sieve(isqrt(b - 1))
    segment = bytearray([1]) * (b - a)
    for p, flag in enumerate(small):
        if flag:
            first = max(p * p, -(-a // p) * p)
            segment[first - a :: p] = bytes(len(range(first, b, p)))
    for number in range(a, min(2, b)):
        segment[number - a] = 0
    return sum(segment)


def sugoroku(a, b):
    """Sum of the Euclidean quotients, plus one, taken until the remainder is 1.

    Returns -1 when the remainder reaches 0 first, that is when ``a`` and ``b``
    are not coprime.
    """
    steps = 1
    while True:
        if b == 1:
            return steps
        if b == 0:
            return -1
        steps += a // b
        a, b = b, a % b