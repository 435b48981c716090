from ._shaped_iterator import ShapedIterator
from ._traversal import traverse

__all__ = [
    ShapedIterator.__name__,
    traverse.__name__,
]
