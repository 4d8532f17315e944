"""Exception types raised by the generator and its toolchain harness.

All of them derive from ValueError so callers that already guard generation
with ``except ValueError`` keep working.
"""


class ShamirGeneratorError(ValueError):
    """Base class for every error raised by leo_shamir."""


class ConfigurationError(ShamirGeneratorError):
    """Invalid caller input: threshold parameters or generator configuration."""


class RangeError(ShamirGeneratorError):
    """An index bound does not fit the widest supported integer type."""


class ParseError(ShamirGeneratorError):
    """Toolchain output did not have the expected structure.

    Attributes:
        output: The raw text that failed to parse
    """

    def __init__(self, message: str, output: str):
        super().__init__(message)
        self.output = output

    def __str__(self) -> str:
        return f"{self.args[0]}\n--- raw output ---\n{self.output}"
