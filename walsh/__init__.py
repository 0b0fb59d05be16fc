"""
Walsh Spreading-Code Matrices

Load a text matrix of +1/-1 chips, order its rows by sequency, and compute
code-set properties.
"""

from .codes import (
    SpreadingCode,
    WalshMatrix,
    sequency,
    compare_sequency,
    sort_by_sequency,
    walsh_matrix_from_array,
    generate_walsh_hadamard_codes,
    format_walsh_matrix,
    write_walsh_matrix,
    get_code_properties,
)
from .loader import (
    LoadStatus,
    LoadResult,
    ParseFailure,
    UnreadableMatrixError,
    parse_walsh_matrix,
    load_walsh_matrix,
)

__version__ = "0.1.0"
__all__ = [
    "SpreadingCode",
    "WalshMatrix",
    "sequency",
    "compare_sequency",
    "sort_by_sequency",
    "walsh_matrix_from_array",
    "generate_walsh_hadamard_codes",
    "format_walsh_matrix",
    "write_walsh_matrix",
    "get_code_properties",
    "LoadStatus",
    "LoadResult",
    "ParseFailure",
    "UnreadableMatrixError",
    "parse_walsh_matrix",
    "load_walsh_matrix",
]
