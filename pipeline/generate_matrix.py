"""
Generate Matrix

Writes a natural-ordered Hadamard matrix in the text format read by the logo
pipeline. Sorting its rows by sequency gives the Walsh matrix.
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from walsh.codes import generate_walsh_hadamard_codes, write_walsh_matrix
from walsh.utils import ensure_parent_dir


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write a Hadamard matrix file")
    parser.add_argument("order", type=int, help="Matrix order, a power of 2")
    parser.add_argument("--output", type=str, default="walsh.txt")
    args = parser.parse_args(argv)

    try:
        codes = generate_walsh_hadamard_codes(args.order)
    except ValueError as e:
        parser.error(str(e))

    ensure_parent_dir(args.output)
    write_walsh_matrix(args.output, codes)
    print(f"Wrote {args.order}x{args.order} matrix to: {args.output}")


if __name__ == "__main__":
    main()
