"""Command-line front end: parse the arguments, run the command, print."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Union

from primeutils import primes

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")
_OPTIONS = {"-t": "threads", "-s": "cache"}

_HELP = """\
Usage: primeutils COMMAND REQUIRED_OPTIONS [OPTIONAL_OPTIONS]
Commands and its options:
  help               Display this help.
  count              Count how many prime numbers there are between start and limit.
    [START]..LIMIT     Set the start and limit of the sieve (separated by "..").
    [-t NUM]           How many threads should be used to sieve.
    [-s NUM]           How much cache should be used to sieve.
  is_prime           Check if num is prime.
    NUM                 The num to check.
  factors            Split num into its prime factors.
    NUM                 The num to split.
  gcd                Get the greatest common divisor of two numbers.
    X                   One number.
    Y                   The other number.
  lcm                Get the least common multiple of two numbers.
    X                   One number.
    Y                   The first number."""


class ArgumentError(ValueError):
    """The command-line arguments could not be understood."""


@dataclass(frozen=True)
class HelpCommand:
    """Show the usage text."""


@dataclass(frozen=True)
class CountCommand:
    """Count the primes up to ``limit``, optionally from ``start``."""

    limit: int
    start: int | None = None
    threads: int | None = None
    cache: int | None = None


@dataclass(frozen=True)
class IsPrimeCommand:
    """Check whether ``num`` is prime."""

    num: int


@dataclass(frozen=True)
class FactorsCommand:
    """Split ``num`` into its prime factors."""

    num: int


@dataclass(frozen=True)
class GcdCommand:
    """Compute the greatest common divisor of ``x`` and ``y``."""

    x: int
    y: int


@dataclass(frozen=True)
class LcmCommand:
    """Compute the least common multiple of ``x`` and ``y``."""

    x: int
    y: int


Command = Union[
    HelpCommand, CountCommand, IsPrimeCommand, FactorsCommand, GcdCommand, LcmCommand
]


def _parse_unsigned(text: str, error: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ArgumentError(error)
    value = int(text)
    if value > _U64_MAX:
        raise ArgumentError(error)
    return value


def parse_count(args: list[str]) -> CountCommand:
    """Parse the arguments of the ``count`` command."""
    limit: int | None = None
    start: int | None = None
    options: dict[str, int] = {}

    remaining = iter(args)
    for arg in remaining:
        if arg in _OPTIONS:
            name = _OPTIONS[arg]
            if name in options:
                raise ArgumentError(f'Value already set for the parameter "{arg}"')
            value = next(remaining, None)
            if value is None:
                raise ArgumentError(f'Missing value for option "{arg}"')
            options[name] = _parse_unsigned(value, f'Invalid value for option "{arg}"')
        elif arg.startswith("-"):
            raise ArgumentError(f'Invalid option: "{arg}"')
        else:
            if limit is not None:
                raise ArgumentError("Count limit already set!")
            if ".." in arg:
                parts = arg.split("..")
                if len(parts) > 2:
                    raise ArgumentError(
                        "Error while parsing count start and limit: "
                        'more than one delimiter ".." found'
                    )
                if len(parts) < 2:
                    raise ArgumentError(
                        "Error while parsing count start and limit: limit missing"
                    )
                start = _parse_unsigned(
                    parts[0], "Error while parsing count start: invalid number"
                )
                limit = _parse_unsigned(
                    parts[1], "Error while parsing count limit: invalid number"
                )
                if start > limit:
                    raise ArgumentError(
                        "Error while parsing count start and limit: "
                        "start is higher than limit"
                    )
            else:
                limit = _parse_unsigned(
                    arg, "Error while parsing count limit: invalid number"
                )

    if limit is None:
        raise ArgumentError("The count limit should be specified!")
    return CountCommand(limit=limit, start=start, **options)


def _parse_single(args: list[str], what: str) -> int:
    num: int | None = None
    for arg in args:
        if num is not None:
            raise ArgumentError(f"Number to {what} already set!")
        num = _parse_unsigned(
            arg, f"Error while parsing number to {what}: invalid number"
        )
    if num is None:
        raise ArgumentError(f"The number to {what} should be specified!")
    return num


def _parse_pair(args: list[str]) -> tuple[int, int]:
    numbers: list[int] = []
    for arg in args:
        if len(numbers) == 2:
            raise ArgumentError("Numbers to compute already set!")
        numbers.append(
            _parse_unsigned(arg, "Error while parsing number to compute: invalid number")
        )
    if not numbers:
        raise ArgumentError("The numbers to compute should be specified!")
    if len(numbers) < 2:
        raise ArgumentError("Two numbers to compute should be specified!")
    x, y = numbers
    return x, y


def parse_is_prime(args: list[str]) -> IsPrimeCommand:
    """Parse the arguments of the ``is_prime`` command."""
    return IsPrimeCommand(_parse_single(args, "check"))


def parse_factors(args: list[str]) -> FactorsCommand:
    """Parse the arguments of the ``factors`` command."""
    return FactorsCommand(_parse_single(args, "split"))


def parse_gcd(args: list[str]) -> GcdCommand:
    """Parse the arguments of the ``gcd`` command."""
    return GcdCommand(*_parse_pair(args))


def parse_lcm(args: list[str]) -> LcmCommand:
    """Parse the arguments of the ``lcm`` command."""
    return LcmCommand(*_parse_pair(args))


_PARSERS = {
    "count": parse_count,
    "is_prime": parse_is_prime,
    "factors": parse_factors,
    "gcd": parse_gcd,
    "lcm": parse_lcm,
}


def parse_arguments(args: list[str]) -> Command:
    """Turn a command line (without the program name) into a command."""
    if not args:
        return HelpCommand()
    name, *rest = args
    if name in ("help", "--help", "-h"):
        return HelpCommand()
    parser = _PARSERS.get(name)
    if parser is None:
        raise ArgumentError(f'Command not found: "{name}"')
    try:
        return parser(rest)
    except ArgumentError as error:
        raise ArgumentError(f'Command "{name}" arguments: {error}') from error


def help_text() -> str:
    """Return the usage text."""
    return _HELP


def run(command: Command) -> str:
    """Carry out ``command`` and return the text to print."""
    match command:
        case HelpCommand():
            return help_text()
        case CountCommand(limit=limit, start=start, threads=threads, cache=cache):
            found = primes.count_primes(limit, start, threads, cache)
            if start is None:
                return f"There are {found} prime numbers less than or equal to {limit}"
            return f"There are {found} prime numbers between {start} and {limit}"
        case IsPrimeCommand(num=num):
            if primes.is_prime(num):
                return f"The number {num} is prime"
            return f"The number {num} is not prime"
        case FactorsCommand(num=num):
            return f"The number {num} can be split into {primes.split_into_factors(num)}"
        case GcdCommand(x=x, y=y):
            return f"The greatest common divisor of {x} and {y} is {primes.gcd(x, y)}"
        case LcmCommand(x=x, y=y):
            return f"The least common multiple of {x} and {y} is {primes.lcm(x, y)}"
    raise TypeError(f"unknown command: {command!r}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        command = parse_arguments(args)
    except ArgumentError as error:
        print(f"Problem parsing arguments:\n{error}", file=sys.stderr)
        return 1
    try:
        output = run(command)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())