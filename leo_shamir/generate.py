#!/usr/bin/env python3
"""
Generate a Leo program doing (k, n)-threshold Shamir Secret Sharing.

Writes the program where ``leo run`` looks for it (src/main.leo) and an empty
input file for ``recover`` (inputs/shamir.in).

Usage:
    leo-shamir-generate [N] [K] [--out DIR]

If only N is given, K defaults to N.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from leo_shamir.circuit.program import generate_circuit
from leo_shamir.config import DEFAULT_CONFIG
from leo_shamir.errors import ShamirGeneratorError
from leo_shamir.harness.input_file import input_template
from leo_shamir.harness.leo import write_text


def resolve_params(n: Optional[int], k: Optional[int]) -> tuple[int, int]:
    """Apply the CLI defaults: (10, 3) without arguments, K = N when only N is given."""
    if n is None:
        return DEFAULT_CONFIG.default_n, DEFAULT_CONFIG.default_k
    return n, n if k is None else k


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Generate a Leo program for (k, n)-threshold Shamir Secret Sharing'
    )
    parser.add_argument(
        'n',
        type=int,
        nargs='?',
        help=f'Number of evaluation points (default {DEFAULT_CONFIG.default_n})'
    )
    parser.add_argument(
        'k',
        type=int,
        nargs='?',
        help='Threshold, points needed to recover (default N, or '
             f'{DEFAULT_CONFIG.default_k} when N is omitted too)'
    )
    parser.add_argument(
        '--out',
        type=Path,
        default=Path('.'),
        help='Leo project directory to write into'
    )

    args = parser.parse_args(argv)
    n, k = resolve_params(args.n, args.k)

    print(f"Generating (k: {k}, n: {n}) Shamir Secret Share for Aleo.")
    try:
        code = generate_circuit(k, n, DEFAULT_CONFIG)
    except ShamirGeneratorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    code_path = write_text(args.out / DEFAULT_CONFIG.code_target, code)
    input_path = write_text(args.out / DEFAULT_CONFIG.input_target, input_template(k))

    print(f"Created code at: {code_path}")
    print(f"Created input template at: {input_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
