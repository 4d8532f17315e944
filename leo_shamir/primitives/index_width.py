"""Loop counter width selection.

Leo loop counters and array indices are fixed-width unsigned integers; the
generator picks the narrowest type that can enumerate 0..bound-1.
"""

from typing import Sequence

from leo_shamir.config import LEO_UINT_WIDTHS
from leo_shamir.errors import ConfigurationError, RangeError


def bits_needed(bound: int) -> int:
    """Return ceil(log2(bound)), the bits needed to enumerate 0..bound-1.

    Integer-only: (bound - 1).bit_length() is exact where float log2 is not.
    """
    if bound < 1:
        raise ConfigurationError(f"Index bound must be positive, got {bound}")
    return (bound - 1).bit_length()


def select_index_width(bound: int, ladder: Sequence[int] = LEO_UINT_WIDTHS) -> int:
    """Pick the smallest width in ``ladder`` covering ceil(log2(bound)) bits.

    A bound of 1 needs zero bits and still selects the first rung.

    Args:
        bound: Exclusive upper bound of the indices (here k)
        ladder: Available widths in ascending order

    Returns:
        The selected bit width

    Raises:
        ConfigurationError: If bound < 1
        RangeError: If no width in the ladder is wide enough
    """
    bits = bits_needed(bound)
    for width in ladder:
        if bits <= width:
            return width
    raise RangeError(f"Index bound {bound} needs {bits} bits, more than the widest type u{ladder[-1]}")
