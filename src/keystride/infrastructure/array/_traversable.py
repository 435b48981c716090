"""
Traversal factories shared by KeyStride containers and expressions.

`TraversableMixin` turns a pair of stepper factories into shaped iterators:

- `xbegin()` / `xend()` without a shape walk the entity's own shape, held by
  reference (`ShapeReference` on the entity's `ShapeHandle`), so iterators
  stay small and always read the owner's shape.
- `xbegin(shape)` / `xend(shape)` walk a broadcast shape, held by value
  (`ShapeValue`), since the caller's shape may not outlive the iterator.

Host classes provide `shape_handle`, `stepper_begin(shape)` and
`stepper_end(shape)`.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Iterable, Iterator, Optional

from ...domain._shape import IShapeHolder
from ...domain._stepper import IStepper
from ..iterator._shaped_iterator import ShapedIterator
from ..iterator._traversal import traverse
from ..shape._shape_holder import ShapeHandle, ShapeReference, ShapeValue


class TraversableMixin:
    """
    Shaped-iterator factories on top of `stepper_begin` / `stepper_end`.
    """

    @property
    @abstractmethod
    def shape_handle(self) -> ShapeHandle:
        """Handle owning this entity's own shape."""
        ...

    @abstractmethod
    def stepper_begin(self, shape: Iterable[int]) -> IStepper:
        """Return a stepper at the first element for iteration shape `shape`."""
        ...

    @abstractmethod
    def stepper_end(self, shape: Iterable[int]) -> IStepper:
        """Return a stepper in the end state for iteration shape `shape`."""
        ...

    def _shape_holder(self, shape: Optional[Iterable[int]]) -> IShapeHolder:
        if shape is None:
            return ShapeReference(self.shape_handle)
        return ShapeValue(shape)

    def xbegin(self, shape: Optional[Iterable[int]] = None) -> ShapedIterator:
        """
        Return an iterator on the first element.

        Parameters
        ----------
        shape : Iterable[int], optional
            Iteration shape. Must have at least as many dimensions as this
            entity; extra leading dimensions are broadcast. Defaults to the
            entity's own shape.

        Returns
        -------
        ShapedIterator
            Begin iterator.

        Raises
        ------
        RankMismatchError
            If `shape` has fewer dimensions than this entity.
        """
        holder = self._shape_holder(shape)
        return ShapedIterator(self.stepper_begin(holder.shape()), holder)

    def xend(self, shape: Optional[Iterable[int]] = None) -> ShapedIterator:
        """
        Return the end iterator matching `xbegin(shape)`.
        """
        holder = self._shape_holder(shape)
        return ShapedIterator(self.stepper_end(holder.shape()), holder)

    def traverse(self, shape: Optional[Iterable[int]] = None) -> Iterator[Any]:
        """Yield all elements in row-major order of `shape` (default: own shape)."""
        return traverse(self.xbegin(shape), self.xend(shape))

    def __iter__(self) -> Iterator[Any]:
        return self.traverse()
