"""
Virtual expression computed from its coordinates.
"""

from __future__ import annotations

from math import prod
from typing import Any, Callable, Iterable, Sequence

from ..shape._shape_holder import ShapeHandle
from ..shape._strides import broadcast_offset
from ..stepper._indexed_stepper import IndexedStepper
from ._traversable import TraversableMixin


class FunctionExpression(TraversableMixin):
    """
    Read-only expression whose elements are `fn(*index)`.

    The expression has no storage and no strides; it is walked with
    `IndexedStepper`, which re-evaluates `fn` on every dereference.

    Parameters
    ----------
    shape : Iterable[int]
        Extents of the expression.
    fn : Callable[..., Any]
        Called with one coordinate per dimension.

    Examples
    --------
    >>> e = FunctionExpression((2, 3), lambda i, j: 10 * i + j)
    >>> list(e)
    [0, 1, 2, 10, 11, 12]
    """

    def __init__(self, shape: Iterable[int], fn: Callable[..., Any]) -> None:
        self._handle = ShapeHandle(shape)
        self._fn = fn

    @property
    def shape(self) -> tuple[int, ...]:
        return self._handle.shape

    @property
    def shape_handle(self) -> ShapeHandle:
        return self._handle

    @property
    def size(self) -> int:
        return prod(self.shape)

    def dimension(self) -> int:
        return len(self.shape)

    def element(self, index: Sequence[int]) -> Any:
        """
        Return `fn` evaluated at `index`.

        Coordinates along extent-1 dimensions are read as 0, so the single
        slice of such a dimension is repeated when it is broadcast.
        """
        return self._fn(*(0 if e == 1 else i for i, e in zip(index, self.shape)))

    def stepper_begin(self, shape: Iterable[int]) -> IndexedStepper:
        """
        Return an indexed stepper on the first element.

        An empty iteration shape has no first element, so its begin stepper
        is already in the end state.
        """
        extents = tuple(shape)
        offset = broadcast_offset(len(extents), self.dimension())
        return IndexedStepper(self, offset, end=0 in extents)

    def stepper_end(self, shape: Iterable[int]) -> IndexedStepper:
        offset = broadcast_offset(len(tuple(shape)), self.dimension())
        return IndexedStepper(self, offset, end=True)

    def __repr__(self) -> str:
        return f"FunctionExpression(shape={self.shape})"
