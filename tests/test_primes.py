import pytest

from primeutils.primes import (
    count_primes,
    gcd,
    is_prime,
    lcm,
    segment_sieve,
    simple_sieve,
    split_into_factors,
)

PRIMES_TO_1000 = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
    101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151, 157, 163, 167, 173, 179, 181, 191, 193, 197, 199,
    211, 223, 227, 229, 233, 239, 241, 251, 257, 263, 269, 271, 277, 281, 283, 293, 307, 311, 313, 317,
    331, 337, 347, 349, 353, 359, 367, 373, 379, 383, 389, 397, 401, 409, 419, 421, 431, 433, 439, 443,
    449, 457, 461, 463, 467, 479, 487, 491, 499, 503, 509, 521, 523, 541, 547, 557, 563, 569, 571, 577,
    587, 593, 599, 601, 607, 613, 617, 619, 631, 641, 643, 647, 653, 659, 661, 673, 677, 683, 691, 701,
    709, 719, 727, 733, 739, 743, 751, 757, 761, 769, 773, 787, 797, 809, 811, 821, 823, 827, 829, 839,
    853, 857, 859, 863, 877, 881, 883, 887, 907, 911, 919, 929, 937, 941, 947, 953, 967, 971, 977, 983, 991, 997,
]


@pytest.mark.parametrize("num, expected", [
    (0, False), (1, False), (2, True), (3, True), (4, False), (5, True),
    (6, False), (7, True), (99, False), (100, False), (101, True),
    (102, False), (103, True),
    (4_294_967_290, False), (4_294_967_291, True), (4_294_967_292, False),
    (4_294_967_295, False), (4_294_967_296, False),
    (18_446_744_073_709_551_614, False), (18_446_744_073_709_551_615, False),
])
def test_is_prime(num, expected):
    assert is_prime(num) is expected


def test_is_prime_agrees_with_sieve():
    primes = set(simple_sieve(1000))
    assert {n for n in range(1001) if is_prime(n)} == primes


@pytest.mark.parametrize("num, expected", [
    (0, []), (1, []), (2, [2]), (3, [3]), (4, [2, 2]), (5, [5]), (6, [2, 3]),
    (7, [7]), (99, [3, 3, 11]), (100, [2, 2, 5, 5]), (101, [101]),
    (102, [2, 3, 17]), (103, [103]),
    (4_294_967_290, [2, 5, 19, 22_605_091]),
    (4_294_967_291, [4_294_967_291]),
    (4_294_967_292, [2, 2, 3, 3, 7, 11, 31, 151, 331]),
    (4_294_967_295, [3, 5, 17, 257, 65_537]),
    (4_294_967_296, [2] * 32),
    (18_446_744_073_709_551_614, [2, 7, 7, 73, 127, 337, 92_737, 649_657]),
    (18_446_744_073_709_551_615, [3, 5, 17, 257, 641, 65_537, 6_700_417]),
])
def test_split_into_factors(num, expected):
    assert split_into_factors(num) == expected


@pytest.mark.parametrize("x, y, expected", [
    (0, 0, 0), (0, 1, 1), (1, 0, 1), (1, 1, 1), (2, 4, 2), (4, 2, 2),
    (3, 9, 3), (9, 3, 3), (6, 8, 2), (7, 13, 1), (99, 121, 11),
    (100, 80, 20), (101, 103, 1), (102, 170, 34), (103, 206, 103),
    (1_234_567_890, 987_654_321, 9),
    (4_294_967_295, 65_536, 1),
    (4_294_967_296, 65_536, 65_536),
    (4_294_967_290, 4_294_967_295, 5),
    (4_294_967_291, 4_294_967_292, 1),
    (4_294_967_292, 4_294_967_296, 4),
    (18_446_744_073_709_551_614, 18_446_744_073_709_551_615, 1),
    (18_446_744_073_709_551_615, 18_446_744_073_709_551_615, 18_446_744_073_709_551_615),
])
def test_gcd(x, y, expected):
    assert gcd(x, y) == expected


@pytest.mark.parametrize("x, y, expected", [
    (0, 0, 0), (0, 1, 0), (1, 0, 0), (1, 1, 1), (2, 4, 4), (4, 2, 4),
    (3, 9, 9), (6, 8, 24), (7, 13, 91), (99, 121, 1089), (100, 80, 400),
    (101, 103, 10403), (102, 170, 510), (103, 206, 206),
    (4_294_967_295, 65_536, 281_474_976_645_120),
    (4_294_967_296, 65_536, 4_294_967_296),
    (1_234_567_890, 987_654_321, 135_480_701_236_261_410),
    (4_294_967_290, 4_294_967_295, 3_689_348_808_728_956_110),
    (4_294_967_291, 4_294_967_292, 18_446_744_035_054_845_972),
    (4_294_967_292, 4_294_967_296, 4_611_686_014_132_420_608),
    (18_446_744_073_709_551_614, 18_446_744_073_709_551_615,
     340_282_366_920_938_463_408_034_375_210_639_556_610),
])
def test_lcm(x, y, expected):
    assert lcm(x, y) == expected


@pytest.mark.parametrize("call", [
    lambda: is_prime(-7),
    lambda: split_into_factors(-4),
    lambda: gcd(-2, 4),
    lambda: lcm(3, -9),
])
def test_negative_numbers_raise(call):
    with pytest.raises(ValueError):
        call()


@pytest.mark.parametrize("size, expected", [
    (0, []), (1, []), (2, [2]), (3, [2, 3]), (4, [2, 3]),
    (10, [2, 3, 5, 7]),
    (20, [2, 3, 5, 7, 11, 13, 17, 19]),
    (30, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]),
    (50, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]),
    (100, PRIMES_TO_1000[:25]),
    (101, PRIMES_TO_1000[:26]),
    (102, PRIMES_TO_1000[:26]),
    (199, PRIMES_TO_1000[:46]),
    (1_000, PRIMES_TO_1000),
])
def test_simple_sieve(size, expected):
    assert simple_sieve(size) == expected


def test_simple_sieve_prefix_values():
    assert PRIMES_TO_1000[25] == 101
    assert simple_sieve(199)[-1] == 199


@pytest.mark.parametrize("size, expected", [
    (10_000, 1229), (100_000, 9592), (1_000_000, 78498), (10_000_000, 664579),
])
def test_simple_sieve_lengths(size, expected):
    assert len(simple_sieve(size)) == expected


def test_segment_sieve_counts_range():
    buffer = bytearray(64)
    assert segment_sieve(buffer, [2, 3, 5, 7], 50, 100) == 10


def test_segment_sieve_excludes_sieving_primes():
    buffer = bytearray(64)
    primes = [2, 3, 5, 7]
    assert segment_sieve(buffer, primes, 2, 100) == 25 - len(primes)


def test_segment_sieve_special_cases():
    buffer = bytearray(8)
    assert segment_sieve(buffer, [], 2, 2) == 1
    assert segment_sieve(buffer, [2], 10, 5) == 0
    assert segment_sieve(buffer, [2], 4, 4) == 0
    assert segment_sieve(buffer, [2], 97, 97) == 1


def test_segment_sieve_rejects_small_buffer():
    with pytest.raises(ValueError):
        segment_sieve(bytearray(2), [2, 3, 5, 7], 50, 100)


def test_segment_sieve_reuses_buffer():
    buffer = bytearray(64)
    first = segment_sieve(buffer, [2, 3, 5, 7], 50, 100)
    second = segment_sieve(buffer, [2, 3, 5, 7], 50, 100)
    assert first == second == 10


@pytest.mark.parametrize("limit, start, expected", [
    (10, None, 4), (10, 2, 4), (10, 3, 3), (10, 5, 2), (10, 11, 0),
    (100, None, 25), (1000, None, 168), (10_000, None, 1229),
    (100_000, None, 9592), (1_000_000, None, 78498),
    (10_000_000, None, 664579),
    (100, 50, 10), (100, 97, 1), (100, 98, 0),
    (2, None, 1), (1, None, 0), (0, None, 0),
])
def test_count_primes(limit, start, expected):
    assert count_primes(limit, start) == expected


def test_count_primes_explicit_threads_and_cache():
    assert count_primes(100, None, 1, 1) == 25
    assert count_primes(100, None, 4, 2) == 25


def test_count_primes_matches_sieve_for_small_limits():
    for limit in range(0, 60):
        assert count_primes(limit, None, 2, 1) == len(simple_sieve(limit))


def test_count_primes_many_segments():
    assert count_primes(100_000, 2, 3, 1) == 9592


@pytest.mark.parametrize("threads, cache", [(0, 1), (-1, 1), (1, -1)])
def test_count_primes_rejects_bad_settings(threads, cache):
    with pytest.raises(ValueError):
        count_primes(100, None, threads, cache)