"""Number-theory helpers: primes, fast powers, binomials, digit DP and hashing."""

from __future__ import annotations

import time
from functools import lru_cache

MOD = 1_000_000_007
_MASK64 = (1 << 64) - 1


def primes_up_to(n: int) -> list[int]:
    """Return all primes p with 2 <= p <= n (sieve of Eratosthenes)."""
    if n < 2:
        return []
    composite = [False] * (n + 1)
    for i in range(2, n + 1):
        if not composite[i]:
            for multiple in range(i * i, n + 1, i):
                composite[multiple] = True
    return [i for i in range(2, n + 1) if not composite[i]]


def binpow(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent`` by repeated squaring; exponents <= 0 give 1."""
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def binpow_mod(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent % modulus``; exponents <= 0 give 1."""
    base %= modulus
    result = 1
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


class Binomial:
    """Binomial coefficients modulo a prime, from precomputed factorials."""

    def __init__(self, limit: int = 300010, modulus: int = MOD) -> None:
        if limit < 2:
            raise ValueError("limit must be at least 2")
        self.limit = limit
        self.modulus = modulus
        fact = [1] * limit
        for i in range(2, limit):
            fact[i] = fact[i - 1] * i % modulus
        inv = [1] * limit
        inv[-1] = binpow_mod(fact[-1], modulus - 2, modulus)
        for i in range(limit - 1, 1, -1):
            inv[i - 1] = inv[i] * i % modulus
        self._fact = fact
        self._inv = inv

    def ncr(self, n: int, r: int) -> int:
        """Return C(n, r) modulo the modulus; 0 when n < r."""
        if n < 0 or r < 0:
            raise ValueError("n and r must be non-negative")
        if n < r:
            return 0
        if n == 0 or r == 0:
            return 1
        if n >= self.limit:
            raise ValueError(f"n must be below {self.limit}")
        m = self.modulus
        return self._fact[n] * self._inv[r] % m * self._inv[n - r] % m


def _count_with_budget(low: str, high: str, budget: int) -> int:
    @lru_cache(maxsize=None)
    def walk(idx: int, tight_low: bool, tight_high: bool, remaining: int) -> int:
        if remaining < 0:
            return 0
        if idx >= len(high):
            return 1
        lo = int(low[idx]) if tight_low else 0
        hi = int(high[idx]) if tight_high else 9
        total = 0
        for digit in range(lo, hi + 1):
            total += walk(
                idx + 1,
                tight_low and digit == lo,
                tight_high and digit == hi,
                remaining - digit,
            )
        return total % MOD

    return walk(0, True, True, budget)


def count_digit_sum_range(num1: str, num2: str, min_sum: int, max_sum: int) -> int:
    """Count integers in [num1, num2] whose digit sum lies in [min_sum, max_sum], mod 1e9+7."""
    if not (num1.isdigit() and num2.isdigit()):
        raise ValueError("bounds must be strings of decimal digits")
    if len(num1) > len(num2):
        raise ValueError("num1 must not have more digits than num2")
    low = num1.rjust(len(num2), "0")
    upper = _count_with_budget(low, num2, max_sum)
    lower = _count_with_budget(low, num2, min_sum - 1)
    return (upper - lower) % MOD


def splitmix64(x: int) -> int:
    """The splitmix64 mixing function on 64-bit unsigned integers."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK64
    return x ^ (x >> 31)


class CustomHash:
    """A seeded splitmix64 hash, hard to attack with crafted keys."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = time.monotonic_ns() if seed is None else seed

    def __call__(self, x: int) -> int:
        return splitmix64((x + self.seed) & _MASK64)