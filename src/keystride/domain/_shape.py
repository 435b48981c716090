"""
Shape contracts.

A shape is an ordered tuple of non-negative extents, one per dimension, in
row-major order: dimension 0 is the outermost (slowest-varying) and the last
dimension is the innermost (fastest-varying).

Traversal objects never store a shape directly. They go through an
`IShapeHolder`, which hides whether the shape is owned by value or read
through a reference to a longer-lived owner.
"""

from __future__ import annotations

from typing import List, Protocol, Tuple, runtime_checkable

Shape = Tuple[int, ...]
"""Ordered extents, one per dimension."""

Index = List[int]
"""Mutable coordinate vector, same length as the shape it counts against."""


@runtime_checkable
class IShapeHolder(Protocol):
    """
    Uniform read access to an iteration shape.

    Implementations either own a copy of the shape or reference a shape owned
    elsewhere. Callers cannot tell the two apart: both expose `shape()`.

    Notes
    -----
    The shape bound to a holder is immutable for the holder's lifetime.
    """

    __slots__ = ()

    def shape(self) -> Shape:
        """
        Return the bound shape.

        Returns
        -------
        Shape
            The iteration shape.
        """
        ...
