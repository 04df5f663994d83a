"""Copying and releasing row-based matrices.

A matrix is a sequence of rows. A row of ``None`` ends the matrix early, so a
sequence with a trailing ``None`` and one without it hold the same rows.
Copies are plain lists without the trailing ``None``.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Callable, List, Optional, Sequence

Matrix = Sequence[Any]
CopyRow = Callable[[Any], Any]
ReleaseRow = Callable[[Any], Any]


def count_rows(matrix: Optional[Matrix]) -> int:
    """Return the number of rows before the first ``None`` row or the end.

    A matrix of ``None`` has no rows.
    """
    if matrix is None:
        return 0
    count = 0
    for row in matrix:
        if row is None:
            break
        count += 1
    return count


def _check_count(matrix: Matrix, count: int) -> None:
    if count < 0:
        raise ValueError(f"row count must not be negative, got {count}")
    if count > len(matrix):
        raise ValueError(
            f"row count {count} exceeds matrix length {len(matrix)}"
        )


def release_n(
    matrix: Optional[Matrix],
    count: int,
    release_row: Optional[ReleaseRow],
) -> int:
    """Pass each of the first ``count`` rows to ``release_row``.

    Stops early at a ``None`` row. Afterwards a mutable matrix is emptied.
    Nothing happens when ``matrix`` or ``release_row`` is ``None``. Returns
    the number of rows released.
    """
    if matrix is None or release_row is None:
        return 0
    _check_count(matrix, count)
    released = 0
    for row in matrix[:count]:
        if row is None:
            break
        release_row(row)
        released += 1
    if isinstance(matrix, MutableSequence):
        matrix.clear()
    return released


def release(matrix: Optional[Matrix], release_row: Optional[ReleaseRow]) -> int:
    """Release every row up to the first ``None`` row; see :func:`release_n`."""
    if matrix is None:
        return 0
    return release_n(matrix, count_rows(matrix), release_row)


def duplicate_n(
    matrix: Optional[Matrix],
    count: int,
    copy: Optional[CopyRow],
    release: Optional[ReleaseRow],
) -> Optional[List[Any]]:
    """Return a list holding ``copy`` applied to each of the first ``count`` rows.

    Gives ``None`` when ``matrix`` or ``copy`` is ``None``. If ``copy``
    returns ``None`` for a row, the copies already made are passed to
    ``release`` and the result is ``None``; if ``copy`` raises, they are
    released the same way and the exception propagates.
    """
    if matrix is None or copy is None:
        return None
    _check_count(matrix, count)
    copies: List[Any] = []
    try:
        for row in matrix[:count]:
            duplicate_row = copy(row)
            if duplicate_row is None:
                release_n(copies, len(copies), release)
                return None
            copies.append(duplicate_row)
    except BaseException:
        release_n(copies, len(copies), release)
        raise
    return copies


def duplicate(
    matrix: Optional[Matrix],
    copy: Optional[CopyRow],
    release: Optional[ReleaseRow],
) -> Optional[List[Any]]:
    """Copy every row up to the first ``None`` row; see :func:`duplicate_n`."""
    if matrix is None:
        return None
    return duplicate_n(matrix, count_rows(matrix), copy, release)


def _copy_string(row: str) -> str:
    if not isinstance(row, str):
        raise TypeError(f"expected a string row, not {type(row).__name__}")
    return str(row)


def duplicate_strings(matrix: Optional[Sequence[Optional[str]]]) -> Optional[List[str]]:
    """Return a copy of a matrix of strings, up to the first ``None`` row."""
    # Strings hold no resources, so partial copies need no releasing.
    return duplicate(matrix, _copy_string, None)


def release_strings(matrix: Optional[Sequence[Optional[str]]]) -> int:
    """Release a matrix of strings; returns the number of rows released.

    A mutable matrix is emptied afterwards.
    """
    if matrix is None:
        return 0
    count = count_rows(matrix)
    if isinstance(matrix, MutableSequence):
        matrix.clear()
    return count