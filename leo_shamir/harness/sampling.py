"""Random choice of which k split points are handed to ``recover``."""

import random
from typing import List, Optional

from leo_shamir.errors import ConfigurationError


def random_indices(k: int, n: int, rng: Optional[random.Random] = None) -> List[int]:
    """Draw k distinct indices from [0, n) by rejection sampling.

    Indices come back in draw order, not sorted.

    Args:
        k: Number of indices to draw
        n: Exclusive upper bound
        rng: Random source, the module-level generator when omitted

    Returns:
        k unique indices

    Raises:
        ConfigurationError: If k is negative or larger than n (sampling would never end)
    """
    if k < 0 or k > n:
        raise ConfigurationError(f"Cannot draw {k} distinct indices from [0, {n})")
    randrange = (rng or random).randrange

    seen: dict[int, None] = {}
    while len(seen) < k:
        seen.setdefault(randrange(n))
    return list(seen)
