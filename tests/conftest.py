"""Pytest configuration for the generator tests."""

import shutil
import sys
from pathlib import Path

# Add the repository root so ``leo_shamir`` imports without an install
repo_dir = Path(__file__).parent.parent
if str(repo_dir) not in sys.path:
    sys.path.insert(0, str(repo_dir))

# Path to the Leo CLI, None when the toolchain is not installed.
LEO_BINARY = shutil.which("leo")
