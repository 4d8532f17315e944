"""Tests for whole-program generation."""

import random

import pytest

from leo_shamir import generate_circuit
from leo_shamir.config import GeneratorConfig
from leo_shamir.errors import ConfigurationError
from leo_shamir.harness.sampling import random_indices
from tests.leo_model import (
    HORNER_STEP,
    FF,
    recover_loops,
    run_horner,
    run_recover,
    split_chunks,
    stripped,
)


def section(code: str, header: str) -> str:
    """Lines of the block opened by ``header``, up to its closing brace."""
    lines = code.splitlines()
    start = next(i for i, line in enumerate(lines) if line.strip().startswith(header))
    indent = len(lines[start]) - len(lines[start].lstrip())
    end = next(i for i in range(start + 1, len(lines)) if lines[i] == " " * indent + "}")
    return "\n".join(lines[start:end + 1])


class TestGenerateCircuit:

    def test_skeleton(self) -> None:
        code = generate_circuit(3, 8)
        lines = code.splitlines()
        assert lines[0] == "program shamir.aleo {"
        assert lines[-1] == "}"
        assert code.endswith("}\n")
        assert "    inline horner(coeff: [field; 3], at: field) -> field {" in lines
        assert "    transition recover(evals: [[field; 2]; 3]) -> field {" in lines
        assert "    transition split(secret: field) -> [[[field; 2]; 32]; 1] {" in lines

    def test_idempotent(self) -> None:
        assert generate_circuit(5, 40) == generate_circuit(5, 40)

    def test_k3_n8_example(self) -> None:
        code = generate_circuit(3, 8)
        assert sum(1 for line in stripped(code) if HORNER_STEP.match(line)) == 3
        assert recover_loops(code) == [("i", 8, 0, 3), ("j", 8, 0, 3)]
        chain = [line for line in stripped(code) if line.startswith("let coeff_") and "hash_to_field" in line]
        assert len(chain) == 2
        chunks = split_chunks(code)
        assert len(chunks) == 1
        assert sum(pair == (0, 0) for pair in chunks[0]) == 24

    def test_k13_n45_example(self) -> None:
        code = generate_circuit(13, 45)
        chunks = split_chunks(code)
        assert len(chunks) == 2
        assert sum(pair == (0, 0) for pair in chunks[1]) == 19
        assert "coeff[12u8]" in code
        assert "-> [[[field; 2]; 32]; 2] {" in code

    def test_n_multiple_of_capacity(self) -> None:
        chunks = split_chunks(generate_circuit(4, 32))
        assert len(chunks) == 1
        assert (0, 0) not in chunks[0]

    def test_k_equals_n(self) -> None:
        code = generate_circuit(6, 6)
        assert recover_loops(code)[0] == ("i", 8, 0, 6)
        assert [pair for pair in split_chunks(code)[0] if pair != (0, 0)] == [(i, i) for i in range(1, 7)]

    def test_custom_program_name(self) -> None:
        code = generate_circuit(2, 3, GeneratorConfig(program_name="vault"))
        assert code.startswith("program vault.aleo {")

    @pytest.mark.parametrize("k,n", [(1, 5), (6, 5), (2, 1), (33, 64)])
    def test_invalid_params_fail_before_emitting(self, k: int, n: int) -> None:
        with pytest.raises(ConfigurationError):
            generate_circuit(k, n)

    def test_braces_balance(self) -> None:
        code = generate_circuit(7, 70)
        assert code.count("{") == code.count("}")
        assert code.count("[") == code.count("]")


class TestRoundTripModel:
    """split then recover, with the emitted arithmetic evaluated over the field.

    Hashes are not evaluated; coefficients are drawn at random instead, which
    exercises the same Horner and interpolation text.
    """

    @pytest.mark.parametrize("k,n", [(2, 2), (3, 8), (5, 33), (13, 45), (8, 8)])
    def test_any_k_points_recover_secret(self, k: int, n: int) -> None:
        rng = random.Random(1000 * k + n)
        secret = 42
        coeffs = [secret] + [rng.randrange(2**250) for _ in range(k - 1)]

        code = generate_circuit(k, n)
        horner = section(code, "inline horner")
        recover = section(code, "transition recover")

        points = [(x, int(run_horner(horner, coeffs, at))) for chunk in split_chunks(code)
                  for x, at in chunk if x != 0]
        assert len(points) == n

        for _ in range(5):
            chosen = [points[i] for i in random_indices(k, n, rng)]
            assert run_recover(recover, chosen) == FF(secret)

    def test_fewer_than_k_points_do_not_recover(self) -> None:
        """Three points of a degree-3 polynomial do not determine its constant term."""
        rng = random.Random(7)
        coeffs = [42] + [rng.randrange(2**250) for _ in range(3)]
        horner = section(generate_circuit(4, 8), "inline horner")
        recover = section(generate_circuit(3, 8), "transition recover")
        points = [(x, int(run_horner(horner, coeffs, x))) for x in range(1, 9)]
        assert run_recover(recover, points[:3]) != FF(42)
