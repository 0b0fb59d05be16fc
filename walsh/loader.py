"""
Walsh Matrix Loader

Reads a text grid of signed integers into a WalshMatrix. Each line becomes one
row in file order; tokens are separated by whitespace.

Loading is best-effort: a token that is not an integer leaves a zero at its
position and is reported as a ParseFailure. The loader neither logs nor exits;
callers inspect the LoadResult and decide what to do.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .codes import SpreadingCode, WalshMatrix

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")

# Field separators: Unicode White_Space plus NEL. Excludes the \x1c-\x1f
# separators that str.split() also breaks on.
_FIELD_SEP = re.compile("[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+")

# Chips are 64-bit signed integers
CHIP_MIN = -(2 ** 63)
CHIP_MAX = 2 ** 63 - 1


class LoadStatus(Enum):
    """Outcome of a matrix load."""
    SUCCESS = "success"
    UNREADABLE = "unreadable"


class UnreadableMatrixError(OSError):
    """The matrix resource could not be opened or read."""


@dataclass(frozen=True)
class ParseFailure:
    """A token that could not be converted to an integer."""
    row: int
    position: int
    token: str

    def __str__(self) -> str:
        return f"Couldn't convert {self.token} to int (row {self.row}, position {self.position})"


@dataclass
class LoadResult:
    """
    Result of loading a Walsh matrix.

    Attributes:
        status: SUCCESS or UNREADABLE
        matrix: Best-effort matrix, None when unreadable
        failures: Tokens that failed to parse, in file order
        error: Description of the open/read failure
        source: Path or label of the input
    """
    status: LoadStatus
    matrix: Optional[WalshMatrix] = None
    failures: List[ParseFailure] = field(default_factory=list)
    error: Optional[str] = None
    source: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == LoadStatus.SUCCESS

    def unwrap(self) -> WalshMatrix:
        """Return the matrix, raising UnreadableMatrixError if there is none."""
        if not self.ok:
            raise UnreadableMatrixError(self.error or f"Couldn't open matrix file: {self.source}")
        return self.matrix


def parse_chip(token: str) -> Optional[int]:
    """Parse a signed decimal 64-bit integer token, or return None."""
    if _INT_TOKEN.fullmatch(token) is None:
        return None
    value = int(token)
    if not CHIP_MIN <= value <= CHIP_MAX:
        return None
    return value


def split_fields(line: str) -> List[str]:
    """Split a line into whitespace-separated tokens."""
    return [token for token in _FIELD_SEP.split(line) if token]


def _split_lines(text: str) -> List[str]:
    # Newline-terminated lines; a trailing newline does not open a new line.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_row(line: str, row_index: int) -> Tuple[SpreadingCode, List[ParseFailure]]:
    """Parse one line into a SpreadingCode and its parse failures."""
    tokens = split_fields(line)
    chips = [0] * len(tokens)
    failures = []
    for position, token in enumerate(tokens):
        value = parse_chip(token)
        if value is None:
            failures.append(ParseFailure(row=row_index, position=position, token=token))
        else:
            chips[position] = value
    return SpreadingCode(tuple(chips)), failures


def parse_walsh_matrix(text: str, source: Optional[str] = None) -> LoadResult:
    """
    Parse matrix text.

    Args:
        text: Matrix text, one row per line
        source: Optional label stored on the result

    Returns:
        LoadResult with status SUCCESS
    """
    matrix = WalshMatrix()
    failures: List[ParseFailure] = []

    for row_index, line in enumerate(_split_lines(text)):
        code, row_failures = parse_row(line, row_index)
        matrix.rows.append(code)
        failures.extend(row_failures)

    return LoadResult(
        status=LoadStatus.SUCCESS,
        matrix=matrix,
        failures=failures,
        source=source,
    )


def load_walsh_matrix(path: str) -> LoadResult:
    """
    Load a Walsh matrix file.

    Args:
        path: Path to the matrix text file

    Returns:
        LoadResult. If the file cannot be opened the status is UNREADABLE and
        no matrix is produced.
    """
    try:
        with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
            text = f.read()
    except OSError as e:
        return LoadResult(
            status=LoadStatus.UNREADABLE,
            error=f"Couldn't open matrix file {path}: {e.strerror or e}",
            source=str(path),
        )

    return parse_walsh_matrix(text, source=str(path))
