import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def matrix_file(tmp_path):
    """Write matrix text to a file and return its path."""
    def _write(text: str, name: str = "walsh.txt") -> str:
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


# Natural-ordered Hadamard matrix of order 4; sequencies 0, 3, 1, 2
HADAMARD_4 = "1 1 1 1\n1 -1 1 -1\n1 1 -1 -1\n1 -1 -1 1\n"
