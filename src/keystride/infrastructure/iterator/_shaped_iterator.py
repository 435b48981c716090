"""
Shape-driven forward iterator.

`ShapedIterator` composes three things:

- a *subiterator* (any stepper: `StridedStepper`, `IndexedStepper`, ...),
- a *shape holder* (`ShapeValue` or `ShapeReference`) giving the iteration
  shape, which may have more dimensions than the walked entity,
- an index vector, sized to the iteration rank once and zeroed at
  construction.

Each increment runs the odometer rule (`increment_stepper`) on the index and
the subiterator; dereferencing delegates to the subiterator.

Equality
--------
Two iterators are equal iff their subiterators are equal *and* their shapes
are equal. The index vector does not take part: an end-constructed iterator
(subiterator sent `to_end()`, index still zero) equals an iterator that has
walked off the end. Iterators over different shapes are never equal.

Value semantics
---------------
`post_increment()` and `copy()` return independent positions; advancing a
copy never affects the original.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Union

from typing_extensions import Self

from ...domain._errors import RankMismatchError
from ...domain._shape import IShapeHolder, Shape
from ...domain._stepper import IStepper
from .._config import debug_checks_enabled
from .._odometer import increment_stepper
from ..shape._shape_holder import ShapeValue


class ShapedIterator:
    """
    Single-pass forward iterator driven by an iteration shape.

    Parameters
    ----------
    subiterator : IStepper
        Stepper positioned at the first element (or at its end state, for an
        end iterator). The iterator takes ownership of it.
    shape : IShapeHolder or Iterable[int]
        Iteration shape. A plain extent sequence is copied into a
        `ShapeValue`.

    Raises
    ------
    RankMismatchError
        If debug checks are enabled and the subiterator's offset exceeds the
        iteration rank.

    Notes
    -----
    Dereferencing an iterator that equals its end iterator is a caller
    error; its result is unspecified.
    """

    __slots__ = ("_it", "_shape_holder", "_index")

    def __init__(
        self, subiterator: IStepper, shape: Union[IShapeHolder, Iterable[int]]
    ) -> None:
        if not callable(getattr(shape, "shape", None)):
            shape = ShapeValue(shape)
        self._shape_holder: IShapeHolder = shape
        self._it = subiterator
        rank = len(shape.shape())
        if debug_checks_enabled():
            offset = getattr(subiterator, "offset", 0)
            if offset > rank:
                raise RankMismatchError(rank, offset, what="broadcast offset")
        self._index: List[int] = [0] * rank

    @property
    def subiterator(self) -> IStepper:
        return self._it

    @property
    def shape_holder(self) -> IShapeHolder:
        return self._shape_holder

    @property
    def shape(self) -> Shape:
        return self._shape_holder.shape()

    @property
    def index(self) -> tuple[int, ...]:
        """Snapshot of the current coordinates in the iteration shape."""
        return tuple(self._index)

    def dereference(self) -> Any:
        """Return the element at the current position."""
        return self._it.dereference()

    def assign(self, value: Any) -> None:
        """
        Write `value` at the current position.

        Only available when the subiterator is mutable (provides `assign`).

        Raises
        ------
        TypeError
            If the subiterator is read-only.
        """
        assign = getattr(self._it, "assign", None)
        if assign is None:
            raise TypeError(f"{type(self._it).__name__} does not support assignment")
        assign(value)

    def increment(self) -> Self:
        """Advance by one position (pre-increment) and return self."""
        increment_stepper(self._it, self._index, self._shape_holder.shape())
        return self

    def post_increment(self) -> Self:
        """Advance by one position and return a copy of the previous position."""
        previous = self.copy()
        self.increment()
        return previous

    def equal(self, other: "ShapedIterator") -> bool:
        return self._it == other._it and self.shape == other.shape

    def copy(self) -> Self:
        clone = type(self).__new__(type(self))
        clone._it = self._it.copy()
        clone._shape_holder = self._shape_holder
        clone._index = list(self._index)
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShapedIterator):
            return NotImplemented
        return self.equal(other)

    def __repr__(self) -> str:
        return (
            f"ShapedIterator(index={self._index!r}, shape={self.shape!r}, "
            f"subiterator={self._it!r})"
        )
