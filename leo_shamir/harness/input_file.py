"""Leo input files for the ``recover`` transition."""

from typing import Sequence, Tuple

from leo_shamir.circuit.literals import field_literal


def input_header(count: int) -> str:
    return f"[recover]\nevals: [[field; 2]; {count}] = ["


def input_template(k: int) -> str:
    """Empty input file written next to a freshly generated program."""
    return f"{input_header(k)}\n\n];\n"


def create_input(evals: Sequence[Tuple[int, int]]) -> str:
    """Render evaluation pairs as the input of ``recover``.

    The array length in the type annotation is len(evals), so the caller
    must pass exactly k pairs for the program to accept the file.
    """
    pairs = [
        f"[\n    {field_literal(x)},\n    {field_literal(y)}\n  ]"
        for x, y in evals
    ]
    return f"{input_header(len(evals))}\n  " + ",\n  ".join(pairs) + "\n];\n"
