"""
KeyStride: shape-aware traversal engine for n-dimensional arrays.

KeyStride walks any array-like entity element by element according to an
iteration shape, including shapes with more dimensions than the entity
itself (broadcasting). Strided containers are walked with a single cursor
moved by strides and backstrides; stride-less expressions are walked with an
explicit coordinate vector.

Quick start
-----------
>>> from keystride import StridedArray
>>> a = StridedArray([1, 2, 3])
>>> [int(v) for v in a.traverse((2, 3))]
[1, 2, 3, 1, 2, 3]
"""

from .domain import (
    CursorOutOfBoundsError,
    ICursor,
    IIndexedExpression,
    IMutableIndexedExpression,
    InvalidShapeError,
    IShapeHolder,
    IStepper,
    IStridedContainer,
    RankMismatchError,
    UnboundShapeError,
)
from .infrastructure import (
    BufferCursor,
    FunctionExpression,
    IndexedStepper,
    Layout,
    MutableIndexedStepper,
    ShapedIterator,
    ShapeHandle,
    ShapeReference,
    ShapeValue,
    StridedArray,
    StridedStepper,
    broadcast_offset,
    compute_strides,
    debug_checks,
    debug_checks_enabled,
    increment_stepper,
    set_debug_checks,
    traverse,
)

__version__ = "0.1.0"

__all__ = [
    CursorOutOfBoundsError.__name__,
    ICursor.__name__,
    IIndexedExpression.__name__,
    IMutableIndexedExpression.__name__,
    InvalidShapeError.__name__,
    IShapeHolder.__name__,
    IStepper.__name__,
    IStridedContainer.__name__,
    RankMismatchError.__name__,
    UnboundShapeError.__name__,
    BufferCursor.__name__,
    FunctionExpression.__name__,
    IndexedStepper.__name__,
    Layout.__name__,
    MutableIndexedStepper.__name__,
    ShapedIterator.__name__,
    ShapeHandle.__name__,
    ShapeReference.__name__,
    ShapeValue.__name__,
    StridedArray.__name__,
    StridedStepper.__name__,
    broadcast_offset.__name__,
    compute_strides.__name__,
    debug_checks.__name__,
    debug_checks_enabled.__name__,
    increment_stepper.__name__,
    set_debug_checks.__name__,
    traverse.__name__,
]
