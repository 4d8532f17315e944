"""Program assembly.

Entry point of the generator: validates (k, n), derives the loop counter width
and the chunk plan once, and joins the emitted parts under the fixed program
skeleton. Pure and deterministic; the same arguments always give the same text.
"""

from typing import Optional

from leo_shamir.circuit.horner import emit_horner_function
from leo_shamir.circuit.literals import Lines, block
from leo_shamir.circuit.recovery import emit_recover_transition
from leo_shamir.circuit.split import emit_split_transition
from leo_shamir.config import DEFAULT_CONFIG, GeneratorConfig
from leo_shamir.primitives.chunking import plan_chunks
from leo_shamir.primitives.index_width import select_index_width
from leo_shamir.primitives.params import ThresholdParams


def emit_program(params: ThresholdParams, config: GeneratorConfig = DEFAULT_CONFIG) -> Lines:
    """Emit the program as lines. Parameters must already be validated."""
    width = select_index_width(params.k, config.width_ladder)
    plan = plan_chunks(params.n, config.chunk_capacity)

    body = (
        (f"// horner's method to evaluate a polynomial of degree {params.k - 1}",)
        + emit_horner_function(params.k, width, config)
        + ("", f"// recover the secret from {params.k} evaluations")
        + emit_recover_transition(params.k, width, config)
        + ("", f"// split a secret to {params.n} points, using {params.k} coefficients")
        + emit_split_transition(params, plan, config)
    )
    return block(f"program {config.program_name}.aleo", body, config.indent)


def generate_circuit(k: int, n: int, config: Optional[GeneratorConfig] = None) -> str:
    """Generate the Leo program for (k, n)-threshold Shamir Secret Sharing.

    Example:
        code = generate_circuit(3, 8)
        Path("src/main.leo").write_text(code)

    Args:
        k: Threshold, number of points needed to recover
        n: Number of points produced by split
        config: Generator configuration, DEFAULT_CONFIG when omitted

    Returns:
        Program source text, newline terminated

    Raises:
        ConfigurationError: If (k, n) violate the threshold invariants
        RangeError: If k does not fit any configured counter width
    """
    config = config or DEFAULT_CONFIG
    params = ThresholdParams(k=k, n=n).validate(config)
    return "\n".join(emit_program(params, config)) + "\n"
