# primeutils

Tools for working with prime numbers. The package can check whether a number is prime and can split a number into its prime factors. It can compute the greatest common divisor and the least common multiple of two numbers. It also counts the primes in a range with a segmented sieve that runs on several threads.

## Installation

```
pip install .
```

## Command line

```
primeutils help
primeutils count [START..]LIMIT [-t NUM] [-s NUM]
primeutils is_prime NUM
primeutils factors NUM
primeutils gcd X Y
primeutils lcm X Y
```

Running `primeutils` with no arguments, or with `help`, `--help` or `-h`, prints the usage text.

- `count LIMIT` counts the primes from 2 up to `LIMIT`, with `LIMIT` included.
- `count START..LIMIT` counts the primes between `START` and `LIMIT`, with both ends included. `START` must not be higher than `LIMIT`.
- `-t NUM` sets how many threads do the sieving. By default this is the number of logical processors.
- `-s NUM` sets the cache size in bytes that the sieve segments are sized after. By default this is the L1 data-cache size.
- `is_prime` tells whether a number is prime.
- `factors` lists the prime factors of a number in ascending order, with repeated factors shown each time.
- `gcd` computes the greatest common divisor of two numbers.
- `lcm` computes the least common multiple of two numbers.

All numbers must be unsigned integers no larger than 2**64 - 1.

Examples:

```
$ primeutils count 100
There are 25 prime numbers less than or equal to 100
$ primeutils count 50..100
There are 10 prime numbers between 50 and 100
$ primeutils is_prime 101
The number 101 is prime
$ primeutils factors 100
The number 100 can be split into [2, 2, 5, 5]
$ primeutils gcd 100 80
The greatest common divisor of 100 and 80 is 20
$ primeutils lcm 6 8
The least common multiple of 6 and 8 is 24
```

Some arguments cannot be used, such as an unknown command, a missing number, a number that is not valid, or an option given twice. In those cases the command prints `Problem parsing arguments:` to standard error, followed by the reason, and exits with status 1. A value the sieve rejects also makes it exit with status 1; one example is `-t 0`.

## Library

`primeutils.primes` holds the arithmetic:

```python
from primeutils.primes import count_primes, gcd, is_prime, lcm, split_into_factors

is_prime(101)                              # True
split_into_factors(4_294_967_295)          # [3, 5, 17, 257, 65537]
gcd(1_234_567_890, 987_654_321)            # 9
lcm(6, 8)                                  # 24
count_primes(1_000_000, None, None, None)  # 78498
count_primes(100, 50, None, None)          # 10
```

- `simple_sieve(size)` returns every prime up to and including `size`.
- `segment_sieve(sieve, primes, low, high)` counts the primes in `[low, high]` that are not already in `primes`. It uses `sieve` as a work area.
- `count_primes(limit, start, threads, cache)` builds on those two functions.
  - If `threads` is `None`, it uses `primeutils.cpu.get_cores()`.
  - If `cache` is `None`, it uses `primeutils.cpu.get_cache_size()`.
  - It raises `ValueError` if `threads` is less than 1 or `cache` is negative.
- Negative inputs to `is_prime`, `split_into_factors`, `gcd` and `lcm` raise `ValueError`.

`primeutils.cpu`:

- `get_cores()` returns the number of logical processors, and at least 1.
- `get_cache_size()` returns the L1 data-cache size in bytes. It reads the size from the operating system when it can and otherwise returns 32768.

`primeutils.bits` has small helpers for single bytes, which are ints in the range 0 to 255:

- `is_bit_set` and `is_bit_unset` test one bit.
- `set_bit`, `unset_bit` and `unset_last_bits` return a changed byte.
- `count_set_bits` and `count_unset_bits` count the 1 and 0 bits.

`primeutils.cli` contains the command-line parser:

- `parse_arguments` turns the arguments into one of the command dataclasses: `HelpCommand`, `CountCommand`, `IsPrimeCommand`, `FactorsCommand`, `GcdCommand` or `LcmCommand`. It raises `ArgumentError` for bad input.
- `run(command)` returns the text to print.
- `main(argv=None)` is the entry point for the command line.

## Tests

```
pip install .[test]
pytest
```