"""Chunk/slot planning for the split output.

Leo arrays hold at most 32 elements, so n evaluation points are returned as
ceil(n / 32) chunks of exactly 32 pairs. The last chunk is topped up with
(0, 0) sentinels; real points use indices 1..n so the sentinel never collides.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from leo_shamir.config import LEO_ARRAY_CAPACITY
from leo_shamir.errors import ConfigurationError


@dataclass(frozen=True)
class Slot:
    """One position of the chunked output.

    Attributes:
        chunk: Chunk number (outer array index)
        slot: Position inside the chunk (inner array index)
        index: 1-based evaluation point index, None for padding
    """
    chunk: int
    slot: int
    index: Optional[int]

    @property
    def is_padding(self) -> bool:
        return self.index is None


@dataclass(frozen=True)
class ChunkPlan:
    """Layout of n points over fixed-capacity chunks."""
    capacity: int
    point_count: int
    chunk_count: int

    @property
    def total_slots(self) -> int:
        return self.chunk_count * self.capacity

    @property
    def padding_count(self) -> int:
        return self.total_slots - self.point_count

    def locate(self, index: int) -> tuple[int, int]:
        """Map a 1-based point index to its (chunk, slot) position."""
        if not 1 <= index <= self.point_count:
            raise ConfigurationError(f"Point index {index} outside 1..{self.point_count}")
        return divmod(index - 1, self.capacity)

    def slots(self) -> Iterator[Slot]:
        """Yield every slot in chunk/slot order, padding last."""
        for position in range(self.total_slots):
            chunk, slot = divmod(position, self.capacity)
            index = position + 1 if position < self.point_count else None
            yield Slot(chunk, slot, index)

    def chunks(self) -> List[List[Slot]]:
        """Group slots per chunk; every group has exactly ``capacity`` entries."""
        grouped: List[List[Slot]] = [[] for _ in range(self.chunk_count)]
        for s in self.slots():
            grouped[s.chunk].append(s)
        return grouped


def plan_chunks(n: int, capacity: int = LEO_ARRAY_CAPACITY) -> ChunkPlan:
    """Compute the chunk layout for n points.

    Ceiling division means an exact multiple of capacity gets no extra chunk,
    so padding_count stays in [0, capacity - 1].

    Args:
        n: Number of real evaluation points
        capacity: Slots per chunk

    Returns:
        ChunkPlan for the split output
    """
    if n < 1:
        raise ConfigurationError(f"Point count must be positive, got {n}")
    if capacity < 1:
        raise ConfigurationError(f"Chunk capacity must be positive, got {capacity}")
    return ChunkPlan(capacity=capacity, point_count=n, chunk_count=-(-n // capacity))
