"""
Domain layer of KeyStride: traversal contracts and error types.

Nothing in this package depends on NumPy; concrete implementations live in
`keystride.infrastructure`.
"""

from ._errors import (
    CursorOutOfBoundsError,
    InvalidShapeError,
    RankMismatchError,
    UnboundShapeError,
)
from ._shape import Index, IShapeHolder, Shape
from ._container import (
    ICursor,
    IIndexedExpression,
    IMutableIndexedExpression,
    IStridedContainer,
)
from ._stepper import IStepper

__all__ = [
    CursorOutOfBoundsError.__name__,
    InvalidShapeError.__name__,
    RankMismatchError.__name__,
    UnboundShapeError.__name__,
    IShapeHolder.__name__,
    ICursor.__name__,
    IIndexedExpression.__name__,
    IMutableIndexedExpression.__name__,
    IStridedContainer.__name__,
    IStepper.__name__,
    "Index",
    "Shape",
]
