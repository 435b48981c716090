"""
Stride, backstride and rank-alignment computations.

Strides here are counted in elements of a flat buffer, not in bytes. A
dimension of extent 1 is given stride 0: stepping along it never moves the
cursor, which is what lets a size-1 dimension be broadcast against a larger
iteration extent without any special casing in the steppers.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from ...domain._errors import RankMismatchError
from ._shape_holder import as_shape


class Layout(Enum):
    """
    Linear storage order of a strided container.

    Attributes
    ----------
    ROW_MAJOR : Layout
        Last dimension is contiguous (C order).
    COLUMN_MAJOR : Layout
        First dimension is contiguous (Fortran order).
    """

    ROW_MAJOR = "row_major"
    COLUMN_MAJOR = "column_major"


def compute_strides(
    shape: Iterable[int], layout: Layout = Layout.ROW_MAJOR
) -> Tuple[Tuple[int, ...], Tuple[int, ...], int]:
    """
    Compute element strides and backstrides for a dense buffer.

    Parameters
    ----------
    shape : Iterable[int]
        Extents of the container.
    layout : Layout, optional
        Storage order. Defaults to `Layout.ROW_MAJOR`.

    Returns
    -------
    tuple
        `(strides, backstrides, size)` where `backstrides[i]` equals
        `strides[i] * (shape[i] - 1)` and `size` is the number of elements
        (1 for a rank-0 shape).

    Raises
    ------
    InvalidShapeError
        If `shape` has a negative or non-integer extent.

    Examples
    --------
    >>> compute_strides((3, 3))
    ((3, 1), (6, 2), 9)
    >>> compute_strides((1, 4))
    ((0, 1), (0, 3), 4)
    """
    extents = as_shape(shape)
    rank = len(extents)
    strides = [0] * rank
    backstrides = [0] * rank

    if layout is Layout.ROW_MAJOR:
        order = range(rank - 1, -1, -1)
    else:
        order = range(rank)

    size = 1
    for i in order:
        strides[i] = 0 if extents[i] == 1 else size
        backstrides[i] = strides[i] * (extents[i] - 1) if extents[i] else 0
        size *= extents[i]

    return tuple(strides), tuple(backstrides), size


def broadcast_offset(iteration_rank: int, container_rank: int) -> int:
    """
    Return the number of leading iteration dimensions a container lacks.

    Parameters
    ----------
    iteration_rank : int
        Rank of the iteration shape.
    container_rank : int
        Rank of the container or expression being walked.

    Returns
    -------
    int
        `iteration_rank - container_rank`.

    Raises
    ------
    RankMismatchError
        If the container has more dimensions than the iteration shape.
        Broadcasting may prepend dimensions but never drop them.
    """
    offset = iteration_rank - container_rank
    if offset < 0:
        raise RankMismatchError(
            container_rank, iteration_rank, what="minimum iteration rank"
        )
    return offset
