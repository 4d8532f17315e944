"""
Leo Shamir Secret Sharing generator.

Emits the source of a Leo program that splits a secret into n evaluation
points of a degree-(k-1) polynomial and recovers it from any k of them.
Leo forbids data-dependent loop bounds, reverse loops and arrays longer than
32 elements, so the generator unrolls Horner evaluation and coefficient
derivation and returns the points as padded chunks of 32.

Usage:
    from leo_shamir import generate_circuit

    code = generate_circuit(k=3, n=8)
"""

from leo_shamir.circuit.program import generate_circuit
from leo_shamir.config import DEFAULT_CONFIG, GeneratorConfig
from leo_shamir.errors import (
    ConfigurationError,
    ParseError,
    RangeError,
    ShamirGeneratorError,
)
from leo_shamir.primitives.chunking import ChunkPlan, plan_chunks
from leo_shamir.primitives.index_width import select_index_width
from leo_shamir.primitives.params import ThresholdParams

__version__ = "0.1.0"
__all__ = [
    # Generation
    "generate_circuit",
    "GeneratorConfig",
    "DEFAULT_CONFIG",
    # Bookkeeping
    "ThresholdParams",
    "ChunkPlan",
    "plan_chunks",
    "select_index_width",
    # Errors
    "ShamirGeneratorError",
    "ConfigurationError",
    "RangeError",
    "ParseError",
]
