"""Helpers for working with the individual bits of a single byte.

A byte is a plain ``int`` in ``range(256)``. Bit indices start at 0, the
least significant bit. Functions that change a byte return the new value.
"""

_BYTE_MASK = 0xFF


def _check_byte(byte: int) -> None:
    if not 0 <= byte <= _BYTE_MASK:
        raise ValueError(f"byte out of range 0..255: {byte}")


def _check_bit(bit: int) -> None:
    if not 0 <= bit <= 7:
        raise ValueError(f"bit index out of range 0..7: {bit}")


def is_bit_set(byte: int, bit: int) -> bool:
    """Return True if the given bit of ``byte`` is 1."""
    _check_byte(byte)
    _check_bit(bit)
    return byte & (1 << bit) != 0


def is_bit_unset(byte: int, bit: int) -> bool:
    """Return True if the given bit of ``byte`` is 0."""
    _check_byte(byte)
    _check_bit(bit)
    return byte & (1 << bit) == 0


def set_bit(byte: int, bit: int) -> int:
    """Return ``byte`` with the given bit set to 1."""
    _check_byte(byte)
    _check_bit(bit)
    return byte | (1 << bit)


def unset_bit(byte: int, bit: int) -> int:
    """Return ``byte`` with the given bit set to 0."""
    _check_byte(byte)
    _check_bit(bit)
    return byte & ~(1 << bit) & _BYTE_MASK


def count_set_bits(byte: int) -> int:
    """Return how many bits of ``byte`` are 1."""
    _check_byte(byte)
    return bin(byte).count("1")


def count_unset_bits(byte: int) -> int:
    """Return how many bits of ``byte`` are 0."""
    _check_byte(byte)
    return 8 - count_set_bits(byte)


def unset_last_bits(byte: int, bit: int) -> int:
    """Return ``byte`` with its ``bit`` most significant bits cleared."""
    _check_byte(byte)
    _check_bit(bit)
    return byte & (_BYTE_MASK >> bit)