"""
Shape holders: owning and referencing.

Iterators read their iteration shape through a shape holder so that the same
iterator code works whether the shape is small and local (copied in) or
shared and long-lived (referenced). Two concrete holders satisfy the domain
`IShapeHolder` protocol:

- `ShapeValue` copies the shape in at construction and returns the copy.
- `ShapeReference` reads the shape through a `ShapeHandle` owned by someone
  else (typically the container whose own shape is being iterated).

The referencing holder cannot be default-constructed: it always takes an
explicit handle. The handle is the lifetime-bound object; releasing it makes
every reference to it unusable instead of silently reading stale data.
"""

from __future__ import annotations

from numbers import Integral
from typing import Iterable, Optional

from ...domain._errors import InvalidShapeError, UnboundShapeError
from ...domain._shape import IShapeHolder, Shape


def as_shape(extents: Iterable[int]) -> Shape:
    """
    Normalize an extent sequence into a canonical `Shape` tuple.

    Parameters
    ----------
    extents : Iterable[int]
        Extents, one per dimension. NumPy integer scalars are accepted.

    Returns
    -------
    Shape
        Tuple of Python ints.

    Raises
    ------
    InvalidShapeError
        If an extent is negative or not an integer.
    """
    raw = tuple(extents)
    for e in raw:
        if isinstance(e, bool) or not isinstance(e, Integral) or e < 0:
            raise InvalidShapeError(raw)
    return tuple(int(e) for e in raw)


class ShapeValue(IShapeHolder):
    """
    Shape holder that owns a copy of its shape.

    Parameters
    ----------
    shape : Iterable[int]
        Extents to copy in.
    """

    __slots__ = ("_shape",)

    def __init__(self, shape: Iterable[int]) -> None:
        self._shape: Shape = as_shape(shape)

    def shape(self) -> Shape:
        return self._shape

    def __repr__(self) -> str:
        return f"ShapeValue({self._shape!r})"


class ShapeHandle:
    """
    Owner-side handle for a shape that other objects reference.

    A container creates one handle for its own shape and hands it to every
    `ShapeReference` it creates. Calling `release()` ends the handle's
    lifetime; references read after that raise `UnboundShapeError`.

    Parameters
    ----------
    shape : Iterable[int]
        Extents owned by this handle.
    """

    __slots__ = ("_shape",)

    def __init__(self, shape: Iterable[int]) -> None:
        self._shape: Optional[Shape] = as_shape(shape)

    @property
    def shape(self) -> Shape:
        """
        Return the owned shape.

        Raises
        ------
        UnboundShapeError
            If the handle has been released.
        """
        if self._shape is None:
            raise UnboundShapeError()
        return self._shape

    @property
    def released(self) -> bool:
        return self._shape is None

    def release(self) -> None:
        """End the handle's lifetime."""
        self._shape = None

    def __repr__(self) -> str:
        state = "released" if self._shape is None else repr(self._shape)
        return f"ShapeHandle({state})"


class ShapeReference(IShapeHolder):
    """
    Shape holder that references a shape owned elsewhere.

    Every `shape()` call reads through the handle, so the holder stays small
    no matter how large the referenced shape is.

    Parameters
    ----------
    handle : ShapeHandle
        Lifetime-bound handle of the referenced shape. Required.
    """

    __slots__ = ("_handle",)

    def __init__(self, handle: ShapeHandle) -> None:
        if not isinstance(handle, ShapeHandle):
            raise TypeError(
                f"ShapeReference requires a ShapeHandle, got {type(handle).__name__}"
            )
        self._handle = handle

    def shape(self) -> Shape:
        return self._handle.shape

    @property
    def handle(self) -> ShapeHandle:
        return self._handle

    def __repr__(self) -> str:
        return f"ShapeReference({self._handle!r})"
