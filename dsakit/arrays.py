"""Positional insertion and deletion on arrays, and sparse-matrix triplets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Triplet:
    """A non-zero entry of a matrix: its row, its column and its value."""

    row: int
    col: int
    value: int


def insert_at(items: Sequence[T], pos: int, value: T) -> list[T]:
    """Return a copy of ``items`` with ``value`` placed at index ``pos``.

    Elements from ``pos`` onwards move one place to the right.
    """
    result = list(items)
    if not 0 <= pos <= len(result):
        raise IndexError(f"insert position {pos} out of range 0..{len(result)}")
    result[pos:pos] = [value]
    return result


def delete_at(items: Sequence[T], pos: int) -> list[T]:
    """Return a copy of ``items`` without the element at index ``pos``.

    Elements after ``pos`` move one place to the left.
    """
    result = list(items)
    if not 0 <= pos < len(result):
        raise IndexError(f"delete position {pos} out of range 0..{len(result) - 1}")
    del result[pos]
    return result


def sparse_triplets(matrix: Iterable[Iterable[int]]) -> list[Triplet]:
    """Collect the non-zero entries of ``matrix`` in row-major order."""
    return [
        Triplet(row, col, value)
        for row, cells in enumerate(matrix)
        for col, value in enumerate(cells)
        if value != 0
    ]


def format_triplets(triplets: Iterable[Triplet]) -> str:
    """Render triplets as a table with a header, one entry per line."""
    lines = ["Sparse Matrix Representation (Triplet form):", "Row Col Value"]
    lines.extend(f"{t.row:3d} {t.col:3d} {t.value:5d}" for t in triplets)
    return "\n".join(lines) + "\n"