"""Threshold parameters (k, n) of a Shamir sharing."""

from dataclasses import dataclass

from leo_shamir.config import DEFAULT_CONFIG, GeneratorConfig
from leo_shamir.errors import ConfigurationError


@dataclass(frozen=True)
class ThresholdParams:
    """Threshold k and point count n.

    Attributes:
        k: Number of points needed to recover (polynomial degree + 1)
        n: Number of points produced by split
    """
    k: int
    n: int

    def validate(self, config: GeneratorConfig = DEFAULT_CONFIG) -> 'ThresholdParams':
        """Check the parameters against each other and against the target limits.

        Both the coefficient array and the recover input are single Leo arrays
        of length k, so k is bounded by the chunk capacity as well.

        Returns:
            self, for chaining

        Raises:
            ConfigurationError: If any bound is violated
        """
        if self.n < 2:
            raise ConfigurationError(f"You must split your secret to at least n=2 pieces, got n={self.n}")
        if self.k < 2:
            raise ConfigurationError(f"Threshold must be at least k=2, got k={self.k}")
        if self.k > self.n:
            raise ConfigurationError(f"k cannot be > n, but got n={self.n} and k={self.k}")
        if self.k > config.chunk_capacity:
            raise ConfigurationError(
                f"k={self.k} exceeds the array capacity {config.chunk_capacity} of the target"
            )
        return self
