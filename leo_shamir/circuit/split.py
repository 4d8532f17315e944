"""``split`` transition: coefficients, then the chunked evaluation array."""

from leo_shamir.circuit.coefficients import emit_coefficients
from leo_shamir.circuit.literals import Lines, block, field_literal, indent_lines
from leo_shamir.config import DEFAULT_CONFIG, GeneratorConfig
from leo_shamir.errors import ConfigurationError
from leo_shamir.primitives.chunking import ChunkPlan, Slot
from leo_shamir.primitives.params import ThresholdParams

ZERO_PAIR = f"[{field_literal(0)}, {field_literal(0)}]"


def split_return_type(plan: ChunkPlan) -> str:
    return f"[[[field; 2]; {plan.capacity}]; {plan.chunk_count}]"


def split_pair(slot: Slot) -> str:
    """Pair literal for one slot: (x, horner(coeffs, x)) or the zero sentinel."""
    if slot.is_padding:
        return ZERO_PAIR
    x = field_literal(slot.index)
    return f"[{x}, horner(coeffs, {x})]"


def emit_split_array(plan: ChunkPlan, config: GeneratorConfig = DEFAULT_CONFIG) -> Lines:
    """Emit ``return [...];`` with every one of plan.total_slots slots filled."""
    lines = ["return ["]
    chunks = plan.chunks()
    for c, chunk in enumerate(chunks):
        pairs = [split_pair(s) + ("," if s.slot < plan.capacity - 1 else "") for s in chunk]
        closing = "]," if c < len(chunks) - 1 else "]"
        lines.extend(indent_lines(("[",) + indent_lines(pairs, config.indent) + (closing,), config.indent))
    lines.append("];")
    return tuple(lines)


def emit_split_transition(
    params: ThresholdParams,
    plan: ChunkPlan,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> Lines:
    """Emit ``transition split(secret: field) -> [[[field; 2]; C]; N]``.

    Raises:
        ConfigurationError: If the plan was made for a different point count
    """
    if plan.point_count != params.n:
        raise ConfigurationError(f"Chunk plan covers {plan.point_count} points, expected n={params.n}")

    body = (
        ("// compute coefficients via consecutive hashing",)
        + emit_coefficients(params.k, config)
        + ("",)
        + emit_split_array(plan, config)
    )
    return block(f"transition split(secret: field) -> {split_return_type(plan)}", body, config.indent)
