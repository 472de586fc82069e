"""Prime-number tools: primality, factorisation, gcd/lcm and prime counting."""

__version__ = "0.1.0"
__all__ = ["bits", "cpu", "primes", "cli"]