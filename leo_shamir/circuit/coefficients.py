"""Polynomial coefficient derivation for ``split``.

The constant term is the secret. Every further coefficient is the hash of the
previous one, starting from a seed that mixes the caller address into the
secret so that two callers sharing the same value get different polynomials.
Leo has no loops with data-dependent bounds here, so the chain is unrolled.
"""

from leo_shamir.circuit.literals import Lines
from leo_shamir.config import DEFAULT_CONFIG, GeneratorConfig


def coeff_name(i: int) -> str:
    return f"coeff_{i}"


def emit_coefficients(k: int, config: GeneratorConfig = DEFAULT_CONFIG, secret: str = "secret") -> Lines:
    """Emit the statements binding ``coeff_0`` .. ``coeff_{k-1}`` and ``coeffs``.

    Output, in order:
        - ``coeff_0`` bound to the secret
        - the caller-entropy seed (when enabled)
        - k-1 hashing statements, one per higher coefficient
        - the ``coeffs`` array literal consumed by ``horner``

    Args:
        k: Number of coefficients (threshold)
        config: Generator configuration (hash function, caller entropy)
        secret: Name of the secret in the emitted program

    Returns:
        Tuple of Leo statements
    """
    h = config.hash_function
    lines = [f"let {coeff_name(0)}: field = {secret};"]

    prev = coeff_name(0)
    if config.caller_entropy:
        lines.append(f"let seed: field = {h}({secret} + {h}(self.caller));")
        prev = "seed"

    for i in range(1, k):
        lines.append(f"let {coeff_name(i)}: field = {h}({prev});")
        prev = coeff_name(i)

    names = ", ".join(coeff_name(i) for i in range(k))
    lines.append(f"let coeffs: [field; {k}] = [{names}];")
    return tuple(lines)
