"""Circuit - emitters producing the Leo program text."""

from leo_shamir.circuit.coefficients import emit_coefficients
from leo_shamir.circuit.horner import emit_horner_function, emit_horner_steps
from leo_shamir.circuit.program import emit_program, generate_circuit
from leo_shamir.circuit.recovery import divisor_expression, emit_recover_transition
from leo_shamir.circuit.split import emit_split_array, emit_split_transition

__all__ = [
    "emit_coefficients",
    "emit_horner_steps",
    "emit_horner_function",
    "divisor_expression",
    "emit_recover_transition",
    "emit_split_array",
    "emit_split_transition",
    "emit_program",
    "generate_circuit",
]
