"""
Spreading Codes and Walsh Matrices

A Walsh matrix is a set of orthogonal spreading codes. Each code is a row of
chips, conventionally +1 or -1. Ordering the rows by sequency (number of
value changes along a row) turns a natural-ordered Hadamard matrix into a
sequency-ordered Walsh matrix, from low to high frequency content.
"""

import functools
import numpy as np
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple, Union
from scipy.linalg import hadamard


def sequency(chips: Sequence[int]) -> int:
    """
    Count the value changes between adjacent chips.

    Any differing pair counts, not only a zero-crossing, so malformed rows
    holding values other than +1/-1 are still scored.

    Args:
        chips: Sequence of chip values

    Returns:
        Number of positions i >= 1 with chips[i] != chips[i - 1]
    """
    count = 0
    for i in range(1, len(chips)):
        if chips[i] != chips[i - 1]:
            count += 1
    return count


@dataclass(frozen=True)
class SpreadingCode:
    """One row of a Walsh matrix."""
    chips: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "chips", tuple(self.chips))

    def __len__(self) -> int:
        return len(self.chips)

    def __iter__(self) -> Iterator[int]:
        return iter(self.chips)

    def __getitem__(self, index: int) -> int:
        return self.chips[index]

    def sequency(self) -> int:
        return sequency(self.chips)


def compare_sequency(a: SpreadingCode, b: SpreadingCode) -> int:
    """Order two codes by sequency: negative, zero or positive."""
    sa, sb = a.sequency(), b.sequency()
    return (sa > sb) - (sa < sb)


@dataclass
class WalshMatrix:
    """
    Ordered rows of spreading codes.

    Rows are expected to share one length but this is not enforced; a
    best-effort load of malformed input can produce ragged rows.

    Attributes:
        rows: SpreadingCode rows in matrix order
    """
    rows: List[SpreadingCode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[SpreadingCode]:
        return iter(self.rows)

    def sequencies(self) -> List[int]:
        """Sequency of each row, in row order."""
        return [row.sequency() for row in self.rows]

    def sort_by_sequency(self) -> "WalshMatrix":
        """Sort rows in place by ascending sequency. Returns self."""
        sort_by_sequency(self)
        return self

    def is_square(self) -> bool:
        return all(len(row) == len(self.rows) for row in self.rows)

    def to_array(self) -> np.ndarray:
        """
        Convert to a 2-D integer array.

        Raises:
            ValueError: If rows have different lengths
        """
        lengths = {len(row) for row in self.rows}
        if len(lengths) > 1:
            raise ValueError(f"Ragged matrix: row lengths {sorted(lengths)}")
        if not self.rows:
            return np.zeros((0, 0), dtype=np.int64)
        return np.array([row.chips for row in self.rows], dtype=np.int64)


def sort_by_sequency(matrix: WalshMatrix) -> None:
    """
    Reorder matrix rows in place by ascending sequency.

    list.sort is stable, so rows with equal sequency keep their relative
    order.
    """
    matrix.rows.sort(key=functools.cmp_to_key(compare_sequency))


def walsh_matrix_from_array(codes: Union[np.ndarray, Iterable[Iterable[int]]]) -> WalshMatrix:
    """Build a WalshMatrix from a 2-D array or nested iterable of chips."""
    return WalshMatrix(rows=[SpreadingCode(tuple(int(c) for c in row)) for row in codes])


def generate_walsh_hadamard_codes(order: int) -> np.ndarray:
    """
    Generate a natural-ordered Hadamard matrix.

    Args:
        order: Matrix order. Must be a power of 2 and <= 4096.

    Returns:
        codes: np.ndarray of shape (order, order) with values in {-1, +1}

    Raises:
        ValueError: If order is not a power of 2 or exceeds 4096
    """
    if order < 1 or order & (order - 1) != 0:
        raise ValueError(f"order={order} is not a power of 2")

    if order > 4096:
        raise ValueError(f"order={order} exceeds practical limit of 4096")

    return hadamard(order).astype(np.int64)


def format_walsh_matrix(matrix: Union[WalshMatrix, np.ndarray]) -> str:
    """Render a matrix in the whitespace-separated text format."""
    if isinstance(matrix, WalshMatrix):
        rows = [row.chips for row in matrix.rows]
    else:
        rows = np.asarray(matrix).tolist()
    return "".join(" ".join(str(int(c)) for c in row) + "\n" for row in rows)


def write_walsh_matrix(path: str, matrix: Union[WalshMatrix, np.ndarray]):
    """Write a matrix file readable by load_walsh_matrix."""
    with open(path, 'w') as f:
        f.write(format_walsh_matrix(matrix))


def get_code_properties(matrix: Union[WalshMatrix, np.ndarray]) -> dict:
    """
    Compute properties of a code set for analysis.

    Args:
        matrix: WalshMatrix or np.ndarray of shape (num_codes, code_length)

    Returns:
        dict with:
            - num_codes: Number of codes
            - code_length: Length of codes
            - auto_correlation_mean: Mean auto-correlation (code_length for +-1 chips)
            - max_cross_correlation: Maximum |c_i @ c_j| for i != j
            - mean_cross_correlation: Mean |c_i @ c_j| for i != j
            - orthogonality_score: 1 - (max_cross / code_length), higher is better
            - min_sequency / max_sequency: Sequency range over the rows

    Raises:
        ValueError: If the matrix is ragged
    """
    if isinstance(matrix, WalshMatrix):
        seqs = matrix.sequencies()
        codes = matrix.to_array()
    else:
        codes = np.asarray(matrix)
        seqs = [sequency(row.tolist()) for row in codes]

    num_codes, code_length = codes.shape

    auto_corr = np.sum(codes * codes, axis=1)

    gram = codes @ codes.T
    mask = ~np.eye(num_codes, dtype=bool)
    cross_corr = np.abs(gram[mask])

    has_cross = len(cross_corr) > 0 and code_length > 0
    return {
        "num_codes": num_codes,
        "code_length": code_length,
        "auto_correlation_mean": float(np.mean(auto_corr)) if num_codes > 0 else 0.0,
        "max_cross_correlation": float(np.max(cross_corr)) if has_cross else 0.0,
        "mean_cross_correlation": float(np.mean(cross_corr)) if has_cross else 0.0,
        "orthogonality_score": float(1 - np.max(cross_corr) / code_length) if has_cross else 1.0,
        "min_sequency": min(seqs) if seqs else 0,
        "max_sequency": max(seqs) if seqs else 0,
    }
