"""
Reference containers and expressions walked by the traversal engine.

- `StridedArray`: dense NumPy-backed container with element strides.
- `FunctionExpression`: stride-less virtual expression.
"""

from ._strided_array import StridedArray
from ._function_expression import FunctionExpression
from ._traversable import TraversableMixin

__all__ = [
    StridedArray.__name__,
    FunctionExpression.__name__,
    TraversableMixin.__name__,
]
