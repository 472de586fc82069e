"""Primality tests, factorisation, gcd/lcm and a segmented prime counter."""

import math
import threading
from concurrent.futures import ThreadPoolExecutor
from itertools import compress

from primeutils import cpu


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative: {value}")


def is_prime(num: int) -> bool:
    """Return True if ``num`` is a prime number."""
    _require_non_negative(num=num)
    if num == 2:
        return True
    if num < 2 or num % 2 == 0:
        return False
    return all(num % divisor for divisor in range(3, math.isqrt(num) + 1, 2))


def split_into_factors(num: int) -> list[int]:
    """Return the prime factors of ``num`` in ascending order, with repeats."""
    _require_non_negative(num=num)
    factors: list[int] = []
    if num <= 1:
        return factors

    while num % 2 == 0:
        factors.append(2)
        num //= 2

    divisor = 3
    while divisor * divisor <= num:
        while num % divisor == 0:
            factors.append(divisor)
            num //= divisor
        divisor += 2

    if num > 1:
        factors.append(num)
    return factors


def gcd(x: int, y: int) -> int:
    """Return the greatest common divisor of ``x`` and ``y``."""
    _require_non_negative(x=x, y=y)
    return math.gcd(x, y)


def lcm(x: int, y: int) -> int:
    """Return the least common multiple of ``x`` and ``y`` (0 if either is 0)."""
    _require_non_negative(x=x, y=y)
    return math.lcm(x, y)


def simple_sieve(size: int) -> list[int]:
    """Return every prime less than or equal to ``size``."""
    if size < 2:
        return []
    # Index j stands for the odd number 2*j + 3.
    odd = bytearray([1]) * ((size - 1) // 2)
    length = len(odd)
    j = 0
    while (2 * j + 3) ** 2 <= size:
        if odd[j]:
            prime = 2 * j + 3
            first = (prime * prime - 3) // 2
            odd[first::prime] = bytes(len(range(first, length, prime)))
        j += 1
    return [2, *compress(range(3, size + 1, 2), odd)]


def segment_sieve(sieve: bytearray, primes: list[int], low: int, high: int) -> int:
    """Count the primes in ``[low, high]`` that are not in ``primes``.

    ``primes`` must hold, in ascending order, every prime up to the square
    root of ``high``. ``sieve`` is a work area with one byte for each odd
    number of the segment; it is overwritten.
    """
    if low > high:
        return 0

    count = 1 if low <= 2 <= high and 2 not in primes[:1] else 0

    first = max(low, 3) | 1
    last = high if high % 2 else high - 1
    if first > last:
        return count

    length = (last - first) // 2 + 1
    if length > len(sieve):
        raise ValueError(
            f"sieve holds {len(sieve)} entries, segment needs {length}"
        )
    sieve[:length] = b"\x01" * length

    for prime in primes:
        if prime == 2:
            continue
        multiple = -(-first // prime) * prime
        if multiple % 2 == 0:
            multiple += prime
        if multiple > last:
            continue
        index = (multiple - first) // 2
        sieve[index:length:prime] = bytes(len(range(index, length, prime)))

    return count + sieve.count(1, 0, length)


def count_primes(
    limit: int,
    start: int | None = None,
    threads: int | None = None,
    cache: int | None = None,
) -> int:
    """Count the primes between ``start`` (default 2) and ``limit``, inclusive.

    The range is split into segments sized after ``cache`` bytes and sieved
    by ``threads`` workers; both default to what the processor reports.
    """
    if limit < 2:
        return 0

    threads = cpu.get_cores() if threads is None else threads
    cache = cpu.get_cache_size() if cache is None else cache
    if threads < 1:
        raise ValueError(f"threads must be at least 1: {threads}")
    if cache < 0:
        raise ValueError(f"cache must not be negative: {cache}")
    start = max(2 if start is None else start, 2)
    if start > limit:
        return 0

    root = math.isqrt(limit)
    span = min(max(root, cache * 16), limit - max(root, start - 1))
    segment_size = -(-span // 16) * 16

    small_primes = simple_sieve(root)
    total = sum(1 for prime in small_primes if prime >= start)

    lows = iter(range(start, limit + 1, segment_size))
    lock = threading.Lock()

    def worker() -> int:
        buffer = bytearray(segment_size // 2 + 1)
        found = 0
        while True:
            with lock:
                low = next(lows, None)
            if low is None:
                return found
            high = min(low + segment_size - 1, limit)
            found += segment_sieve(buffer, small_primes, low, high)

    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = [pool.submit(worker) for _ in range(threads)]
        total += sum(future.result() for future in futures)

    return total