from ._shape_holder import ShapeHandle, ShapeReference, ShapeValue, as_shape
from ._strides import Layout, broadcast_offset, compute_strides

__all__ = [
    ShapeHandle.__name__,
    ShapeReference.__name__,
    ShapeValue.__name__,
    Layout.__name__,
    as_shape.__name__,
    broadcast_offset.__name__,
    compute_strides.__name__,
]
