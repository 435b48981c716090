"""
Infrastructure layer of KeyStride: concrete NumPy-backed implementations of
the traversal contracts declared in `keystride.domain`.
"""

from ._config import debug_checks, debug_checks_enabled, set_debug_checks
from ._odometer import increment_stepper
from .shape import (
    Layout,
    ShapeHandle,
    ShapeReference,
    ShapeValue,
    as_shape,
    broadcast_offset,
    compute_strides,
)
from .cursor import BufferCursor
from .stepper import IndexedStepper, MutableIndexedStepper, StridedStepper
from .iterator import ShapedIterator, traverse
from .array import FunctionExpression, StridedArray

__all__ = [
    debug_checks.__name__,
    debug_checks_enabled.__name__,
    set_debug_checks.__name__,
    increment_stepper.__name__,
    Layout.__name__,
    ShapeHandle.__name__,
    ShapeReference.__name__,
    ShapeValue.__name__,
    as_shape.__name__,
    broadcast_offset.__name__,
    compute_strides.__name__,
    BufferCursor.__name__,
    IndexedStepper.__name__,
    MutableIndexedStepper.__name__,
    StridedStepper.__name__,
    ShapedIterator.__name__,
    traverse.__name__,
    FunctionExpression.__name__,
    StridedArray.__name__,
]
