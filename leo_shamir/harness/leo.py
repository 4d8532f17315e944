"""Runs the generated program through the Leo toolchain.

The round trip is strictly sequential: the program is written, ``split`` runs
and its output is parsed, k points are sampled into the input file, then
``recover`` runs. Nothing here retries; a crashed or hung ``leo`` is the
caller's problem and a bad exit surfaces as a ParseError on its output.
"""

import random
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from leo_shamir.circuit.literals import field_literal
from leo_shamir.circuit.program import generate_circuit
from leo_shamir.config import DEFAULT_CONFIG, GeneratorConfig
from leo_shamir.harness.input_file import create_input, input_template
from leo_shamir.harness.output_parser import parse_recover_output, parse_split_output
from leo_shamir.harness.sampling import random_indices


def write_text(path: Path, text: str) -> Path:
    """Overwrite ``path`` with ``text``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class LeoRunner:
    """A Leo project directory holding one generated program.

    Attributes:
        project_dir: Directory ``leo run`` is executed in
        config: Generator configuration (file locations, binary name)
    """

    def __init__(self, project_dir: Path, config: GeneratorConfig = DEFAULT_CONFIG):
        self.project_dir = Path(project_dir)
        self.config = config

    @property
    def code_path(self) -> Path:
        return self.project_dir / self.config.code_target

    @property
    def input_path(self) -> Path:
        return self.project_dir / self.config.input_target

    def write_program(self, k: int, n: int) -> Path:
        """Generate the (k, n) program and an empty recover input next to it."""
        code = generate_circuit(k, n, self.config)
        write_text(self.code_path, code)
        write_text(self.input_path, input_template(k))
        return self.code_path

    def run(self, *args: str) -> str:
        """Run ``leo run <args>`` in the project directory and return stdout+stderr."""
        result = subprocess.run(
            [self.config.leo_binary, "run", *args],
            cwd=self.project_dir,
            capture_output=True,
            text=True,
        )
        return result.stdout + result.stderr

    def split(self, secret: int, n: int) -> List[Tuple[int, int]]:
        """Run ``split`` on ``secret`` and return the n real evaluation points."""
        return parse_split_output(n, self.run("split", field_literal(secret)))

    def recover(self, evals: Sequence[Tuple[int, int]]) -> int:
        """Write ``evals`` as the recover input, run ``recover`` and return the secret."""
        write_text(self.input_path, create_input(evals))
        return parse_recover_output(self.run("recover"))

    def round_trip(self, k: int, n: int, secret: int, rng: Optional[random.Random] = None) -> int:
        """Generate, split ``secret``, recover from k random points; return the recovered value."""
        self.write_program(k, n)
        print(f"Splitting secret into {n} points...")
        evals = self.split(secret, n)
        chosen = [evals[i] for i in random_indices(k, n, rng)]
        print(f"Recovering from points {[x for x, _ in chosen]}...")
        return self.recover(chosen)
