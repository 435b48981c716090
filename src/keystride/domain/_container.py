"""
Container and expression contracts consumed by the traversal engine.

The traversal engine never owns what it walks. It borrows one of two kinds
of collaborator:

- a *strided container* (`IStridedContainer`), which exposes linear storage
  through cursors plus per-dimension strides and backstrides, and is walked
  by `StridedStepper`;
- an *indexed expression* (`IIndexedExpression`), which has no storage
  layout at all and only answers `element(index)`, and is walked by
  `IndexedStepper` / `MutableIndexedStepper`.

All contracts are structural (`typing.Protocol`), so any object providing
the members participates, regardless of its class.

Design notes
------------
- This module sits in the domain layer and does not import NumPy.
- Strides are expressed in *elements*, not bytes.
- Broadcasting *policy* (whether a shape is compatible with a container) is
  decided upstream; these contracts only describe what a traversal needs.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from ._shape import Shape


@runtime_checkable
class ICursor(Protocol):
    """
    Value-semantic position in a container's linear storage.

    A cursor replaces a raw pointer: it is an integer position into a
    borrowed one-dimensional buffer. Copies are independent positions.
    """

    __slots__ = ()

    @property
    def position(self) -> int: ...

    def get(self) -> Any: ...
    def set(self, value: Any) -> None: ...
    def advance(self, n: int) -> None: ...
    def retreat(self, n: int) -> None: ...
    def copy(self) -> "ICursor": ...
    def __eq__(self, other: object) -> bool: ...


@runtime_checkable
class IStridedContainer(Protocol):
    """
    Container exposing strided linear storage.

    Notes
    -----
    - `strides[i]` is the linear step that advances coordinate `i` by one.
    - `backstrides[i]` is the linear step that brings coordinate `i` from its
      last valid value back to 0, i.e. `strides[i] * (shape[i] - 1)`.
    - `begin()` is the cursor of the element at coordinate (0, ..., 0);
      `end()` is the canonical end cursor used as the terminal state of a
      forward traversal.
    """

    @property
    def shape(self) -> Shape:
        """
        Return the container's own shape.

        Returns
        -------
        Shape
            Extents of the container's own dimensions.
        """
        ...

    @property
    def strides(self) -> tuple[int, ...]:
        """
        Return per-dimension linear strides (in elements).

        Returns
        -------
        tuple[int, ...]
            One stride per dimension of `shape`.
        """
        ...

    @property
    def backstrides(self) -> tuple[int, ...]:
        """
        Return per-dimension backstrides (in elements).

        Returns
        -------
        tuple[int, ...]
            One backstride per dimension of `shape`.
        """
        ...

    def dimension(self) -> int:
        """Return the container's rank."""
        ...

    def begin(self) -> ICursor:
        """Return a cursor positioned on the first element."""
        ...

    def end(self) -> ICursor:
        """Return the canonical end cursor."""
        ...


@runtime_checkable
class IIndexedExpression(Protocol):
    """
    Read-only expression addressed by explicit coordinates.

    `element(index)` is the Python rendering of an `element(first, last)`
    accessor over a coordinate range: `index` is any integer sequence whose
    length equals the expression's rank.
    """

    @property
    def shape(self) -> Shape: ...

    def element(self, index: Sequence[int]) -> Any: ...


@runtime_checkable
class IMutableIndexedExpression(IIndexedExpression, Protocol):
    """
    Indexed expression that also accepts writes at a coordinate.
    """

    def set_element(self, index: Sequence[int], value: Any) -> None: ...
