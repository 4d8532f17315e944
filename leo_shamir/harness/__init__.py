"""Harness - closes the split/recover round trip through the Leo toolchain."""

from leo_shamir.harness.input_file import create_input, input_template
from leo_shamir.harness.leo import LeoRunner
from leo_shamir.harness.output_parser import parse_recover_output, parse_split_output
from leo_shamir.harness.sampling import random_indices

__all__ = [
    "random_indices",
    "parse_split_output",
    "parse_recover_output",
    "create_input",
    "input_template",
    "LeoRunner",
]
