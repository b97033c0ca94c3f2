"""
Bit manipulation helpers.

Neighbourhood configurations are encoded as ints: bit i is set when
the i-th neighbour of a point satisfies some predicate (belongs to the
object, lies in the domain...).
"""

from collections.abc import Iterator


def bit_string(value: int, nb_bits: int = 0) -> str:
    """
    Returns a string containing value's bits, most significant first.
    Mainly designed for debugging purposes.

    If nb_bits is 0, the bit length of the value is used.
    """
    if nb_bits == 0:
        nb_bits = max(value.bit_length(), 1)
    return "".join("1" if value & (1 << i) else "0" for i in reversed(range(nb_bits)))


def mask(nth_bit: int) -> int:
    """Value whose bits are of the form 0..010..0 with the nth bit equal to 1."""
    return 1 << nth_bit


def first_set_bit(value: int) -> int:
    """
    Isolates the least significant set bit, e.g. 0b10100 -> 0b100.

    Returns 0 if no bit is set.
    """
    return value & -value


def index_of_first_set_bit(value: int) -> int:
    """Index of the least significant set bit, -1 if no bit is set."""
    return first_set_bit(value).bit_length() - 1


def nb_set_bits(value: int) -> int:
    return value.bit_count()


def set_bit_indices(value: int) -> Iterator[int]:
    """Indices of the set bits, in increasing order."""
    if value < 0:
        raise ValueError(f"Expected a non negative value, got {value}")
    while value:
        lowest = first_set_bit(value)
        yield lowest.bit_length() - 1
        value ^= lowest
