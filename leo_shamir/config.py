"""Generator configuration.

Every constant that shapes the emitted program (array capacity, integer width
ladder, hash function, file locations) lives on GeneratorConfig and is passed
into generation explicitly.
"""

from dataclasses import dataclass

from leo_shamir.errors import ConfigurationError

# Leo caps a single array at 32 elements.
LEO_ARRAY_CAPACITY = 32

# Unsigned integer types available in Leo.
LEO_UINT_WIDTHS = (8, 16, 32, 64, 128)


@dataclass(frozen=True)
class GeneratorConfig:
    """Parameters of the emitted Leo program and of the files around it.

    Attributes:
        chunk_capacity: Maximum length of a single Leo array
        width_ladder: Candidate bit widths for loop counters, ascending
        program_name: Program identifier, emitted as ``program <name>.aleo``
        hash_function: Leo hash used to derive polynomial coefficients
        caller_entropy: Mix ``self.caller`` into the coefficient seed
        indent: One level of indentation in the emitted program
        default_n: Evaluation point count used by the CLI when none is given
        default_k: Threshold used by the CLI when none is given
        code_target: Program path, relative to the Leo project directory
        input_target: Input file path, relative to the Leo project directory
        leo_binary: Executable used to run the generated program
    """
    chunk_capacity: int = LEO_ARRAY_CAPACITY
    width_ladder: tuple[int, ...] = LEO_UINT_WIDTHS
    program_name: str = "shamir"
    hash_function: str = "Poseidon2::hash_to_field"
    caller_entropy: bool = True
    indent: str = "    "
    default_n: int = 10
    default_k: int = 3
    code_target: str = "src/main.leo"
    input_target: str = "inputs/shamir.in"
    leo_binary: str = "leo"

    def __post_init__(self) -> None:
        if self.chunk_capacity < 1:
            raise ConfigurationError(f"chunk_capacity must be positive, got {self.chunk_capacity}")
        if not self.width_ladder:
            raise ConfigurationError("width_ladder must not be empty")
        if any(a >= b for a, b in zip(self.width_ladder, self.width_ladder[1:])):
            raise ConfigurationError(f"width_ladder must be strictly increasing, got {self.width_ladder}")
        if not self.program_name.isidentifier():
            raise ConfigurationError(f"Invalid program name: {self.program_name!r}")


DEFAULT_CONFIG = GeneratorConfig()
