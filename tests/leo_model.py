"""Reads emitted Leo text back and evaluates it over the Aleo scalar field.

Only the statement shapes the generator emits are understood; anything else
fails the match, which is itself a useful assertion in the tests.
"""

import re
from typing import List, Sequence, Tuple

import galois

# BLS12-377 scalar field, Leo's ``field`` type.
ALEO_FIELD_MODULUS = 8444461749428370424248824938781546531375899335154063827935233455917409239041

# verify=False skips primality and primitivity checks on the 253-bit prime.
FF = galois.GF(ALEO_FIELD_MODULUS, primitive_element=22, verify=False)

HORNER_STEP = re.compile(r"^eval = eval \* at \+ coeff\[(\d+)u(\d+)\];$")
LOOP_HEADER = re.compile(r"^for (\w+): u(\d+) in (\d+)u\2\.\.(\d+)u\2 \{$")
RECOVER_STEP = re.compile(r"^evaly \*= (.+);$")
TERNARY_INV = re.compile(r"\((\w+ != \w+) \? (\([^()]*\)) : ([^()]*)\)\.inv\(\)")
SPLIT_PAIR = re.compile(r"^\[(\d+)field, (?:horner\(coeffs, (\d+)field\)|(0)field)\],?$")


def stripped(code: str) -> List[str]:
    return [line.strip() for line in code.splitlines()]


def run_horner(code: str, coeffs: Sequence[int], at: int) -> FF:
    """Execute the unrolled Horner steps found in ``code``."""
    steps = [HORNER_STEP.match(line) for line in stripped(code)]
    steps = [m for m in steps if m]
    assert steps, "no Horner steps in code"
    acc = FF(0)
    for m in steps:
        acc = acc * FF(at) + FF(coeffs[int(m.group(1))])
    return acc


def recover_loops(code: str) -> List[Tuple[str, int, int, int]]:
    """(counter, width, start, stop) of every for-loop in ``code``."""
    loops = []
    for line in stripped(code):
        m = LOOP_HEADER.match(line)
        if m:
            loops.append((m.group(1), int(m.group(2)), int(m.group(3)), int(m.group(4))))
    return loops


def recover_expression(code: str) -> str:
    """The right-hand side of the ``evaly *=`` statement, as a Python expression."""
    matches = [RECOVER_STEP.match(line) for line in stripped(code)]
    matches = [m for m in matches if m]
    assert len(matches) == 1, "expected exactly one evaly update"
    expr = re.sub(r"(\d+)u8\]", r"\1]", matches[0].group(1))
    expr, count = TERNARY_INV.subn(r"((\2) if \1 else \3) ** -1", expr)
    assert count == 1, f"unexpected divisor shape: {matches[0].group(1)}"
    return expr


def run_recover(code: str, evals: Sequence[Tuple[int, int]]) -> FF:
    """Execute the emitted recover double loop over ``evals``."""
    (_, _, i0, i1), (_, _, j0, j1) = recover_loops(code)
    expr = compile(recover_expression(code), "<recover>", "eval")
    points = [[FF(x), FF(y)] for x, y in evals]

    secret = FF(0)
    for i in range(i0, i1):
        evaly = points[i][1]
        for j in range(j0, j1):
            evaly = evaly * eval(expr, {"evals": points, "i": i, "j": j})
        secret = secret + evaly
    return secret


def split_chunks(code: str) -> List[List[Tuple[int, int]]]:
    """Chunks of the split return literal as (index, horner_at) pairs, 0 for padding."""
    lines = stripped(code)
    start = lines.index("return [")
    chunks: List[List[Tuple[int, int]]] = []
    for line in lines[start + 1:]:
        if line == "];":
            break
        if line == "[":
            chunks.append([])
            continue
        m = SPLIT_PAIR.match(line)
        if m:
            at = int(m.group(2)) if m.group(2) is not None else 0
            chunks[-1].append((int(m.group(1)), at))
    return chunks
