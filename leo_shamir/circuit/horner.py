"""Unrolled Horner evaluation.

Leo loops only count upwards, so instead of iterating the coefficients in
reverse the steps index them as coeff[k-1-i].
"""

from leo_shamir.circuit.literals import Lines, block, field_literal, uint_literal
from leo_shamir.config import DEFAULT_CONFIG, GeneratorConfig


def emit_horner_steps(k: int, width: int, coeff: str = "coeff", at: str = "at", acc: str = "eval") -> Lines:
    """Emit ``acc = acc * at + coeff[k-1-i]`` for i = 0..k-1.

    After the last step ``acc`` holds coeff[0] + coeff[1]*at + ... + coeff[k-1]*at^(k-1),
    given that it started at zero.
    """
    return tuple(
        f"{acc} = {acc} * {at} + {coeff}[{uint_literal(k - 1 - i, width)}];"
        for i in range(k)
    )


def emit_horner_function(k: int, width: int, config: GeneratorConfig = DEFAULT_CONFIG) -> Lines:
    """Emit the ``inline horner(coeff, at)`` helper used by ``split``."""
    body = (
        (f"let eval: field = {field_literal(0)};", "")
        + emit_horner_steps(k, width)
        + ("", "return eval;")
    )
    return block(f"inline horner(coeff: [field; {k}], at: field) -> field", body, config.indent)
