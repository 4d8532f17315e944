"""Primitives - integer bookkeeping shared by the emitters."""

from leo_shamir.primitives.chunking import ChunkPlan, Slot, plan_chunks
from leo_shamir.primitives.index_width import bits_needed, select_index_width
from leo_shamir.primitives.params import ThresholdParams

__all__ = [
    # Parameters
    "ThresholdParams",
    # Index width
    "bits_needed",
    "select_index_width",
    # Chunking
    "ChunkPlan",
    "Slot",
    "plan_chunks",
]
