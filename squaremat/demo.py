"""Command that prints a walk-through of the matrix operators."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence, TextIO

from squaremat.matrix import SquareMat


def _filled(rows: Iterable[Sequence[float]]) -> SquareMat:
    rows = [list(r) for r in rows]
    matrix = SquareMat(len(rows))
    for i, values in enumerate(rows):
        for j, value in enumerate(values):
            matrix[i][j] = value
    return matrix


def demo_arithmetic(a: SquareMat, b: SquareMat, out: TextIO) -> None:
    """Write the results of the basic arithmetic operators."""
    out.write("\n--- Arithmetic actions ---\n")
    for label, value in (
        ("A + B", a + b),
        ("A - B", a - b),
        ("A * B", a * b),
        ("A * 2", a * 2),
        ("A % 3", a % 3),
    ):
        out.write(f"{label}:\n{value}")


def demo_advanced_ops(a: SquareMat, out: TextIO) -> None:
    """Write power, transpose, increment, determinant and minor results.

    Works on a copy, so ``a`` is left unchanged.
    """
    a = a.copy()
    out.write("\n---  Advanced operation ---\n")
    out.write(f"A ^ 2:\n{a ** 2}")
    out.write(f"Transpose of A:\n{a.transpose()}")
    a.increment()
    out.write(f"++A:\n{a}")
    a.post_decrement()
    out.write(f"A--:\n{a}")
    out.write(f"Determinant of A: {a.determinant():g}\n")
    out.write(f"Minor of A (0,1):\n{a.minor(0, 1)}")


def demo_comparisons(a: SquareMat, b: SquareMat, out: TextIO) -> None:
    """Write the results of equality and ordering comparisons."""
    out.write("\n--- Comparisons ---\n")
    out.write(f"A == B? {'Yes' if a == b else 'No'}\n")
    out.write(f"A < B?  {'Yes' if a < b else 'No'}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="squaremat", description="Show the square matrix operators on two 2x2 matrices."
    )
    parser.parse_args(argv)
    out = sys.stdout
    try:
        a = _filled([[1, 2], [3, 4]])
        b = _filled([[5, 6], [7, 8]])
        out.write(f"matrix A:\n{a}")
        out.write(f"matrix B:\n{b}")
        demo_arithmetic(a, b, out)
        demo_advanced_ops(a, out)
        demo_comparisons(a, b, out)
    except (ValueError, IndexError, ZeroDivisionError, TypeError) as exc:
        sys.stderr.write(f"\nError: {exc}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())