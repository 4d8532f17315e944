"""Lagrange interpolation at zero for ``recover``.

For samples (x_i, y_i), the secret is sum_i y_i * prod_{j != i} x_j / (x_j - x_i).
The emitted double loop runs over every (i, j) pair without a skip: when
i == j the divisor is x_j itself, so that factor is x_j / x_j = 1 and no
divisor is ever zero.
"""

from leo_shamir.circuit.literals import Lines, block, field_literal, uint_literal
from leo_shamir.config import DEFAULT_CONFIG, GeneratorConfig

X = uint_literal(0, 8)
Y = uint_literal(1, 8)


def divisor_expression(evals: str = "evals", i: str = "i", j: str = "j") -> str:
    """Divisor of the (i, j) basis factor: x_j - x_i off the diagonal, x_j on it."""
    xi = f"{evals}[{i}][{X}]"
    xj = f"{evals}[{j}][{X}]"
    return f"({i} != {j} ? ({xj} - {xi}) : {xj})"


def emit_recover_transition(k: int, width: int, config: GeneratorConfig = DEFAULT_CONFIG) -> Lines:
    """Emit ``transition recover(evals: [[field; 2]; k]) -> field``.

    Args:
        k: Number of samples (threshold)
        width: Bit width of the loop counters
        config: Generator configuration (indentation)

    Returns:
        Tuple of Leo lines for the whole transition
    """
    unit = config.indent
    lo, hi = uint_literal(0, width), uint_literal(k, width)

    inner = block(
        f"for j: u{width} in {lo}..{hi}",
        (f"evaly *= evals[j][{X}] * {divisor_expression()}.inv();",),
        unit,
    )
    outer = block(
        f"for i: u{width} in {lo}..{hi}",
        (f"let evaly: field = evals[i][{Y}];",) + inner + ("secret += evaly;",),
        unit,
    )
    body = (f"let secret: field = {field_literal(0)};",) + outer + ("return secret;",)
    return block(f"transition recover(evals: [[field; 2]; {k}]) -> field", body, unit)
