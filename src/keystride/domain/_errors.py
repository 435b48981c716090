"""
Traversal-related exceptions for KeyStride.

The traversal engine itself has no recoverable-error taxonomy: reaching the
end of a traversal is a normal terminal state detected by comparing against
an end iterator. The exceptions defined here signal *precondition
violations* that are cheap enough to check once per traversal (e.g. when a
stepper is built for a given iteration shape), or that are only checked when
debug checks are enabled (see `keystride.infrastructure._config`).

These errors are intentionally explicit so that misuse fails fast with the
offending values attached, instead of silently producing a wrong element
sequence.
"""

from typing import Sequence


class RankMismatchError(ValueError):
    """
    Raised when two ranks that must agree do not.

    Typical causes:
    - an iteration shape with fewer dimensions than the container it walks
      (broadcasting can only prepend dimensions, never drop them),
    - an index vector whose length differs from the shape it counts against.

    Attributes
    ----------
    expected : int
        The rank required by the operation.
    actual : int
        The rank that was supplied.
    """

    def __init__(self, expected: int, actual: int, what: str = "rank") -> None:
        """
        Initialize the RankMismatchError.

        Parameters
        ----------
        expected : int
            The rank required by the operation.
        actual : int
            The rank that was supplied.
        what : str, optional
            Short description of the mismatching quantity, used in the
            message. Defaults to "rank".
        """
        super().__init__(f"{what} mismatch: expected {expected}, got {actual}.")
        self.expected = expected
        self.actual = actual


class InvalidShapeError(ValueError):
    """
    Raised when a shape contains a negative or non-integer extent.

    Attributes
    ----------
    shape : tuple
        The rejected shape, as given.
    """

    def __init__(self, shape: Sequence[object]) -> None:
        super().__init__(
            f"Invalid shape {tuple(shape)!r}: extents must be non-negative integers."
        )
        self.shape = tuple(shape)


class UnboundShapeError(RuntimeError):
    """
    Raised when a referencing shape holder is read after its handle was released.

    A `ShapeReference` never owns its shape; it reads it through a
    `ShapeHandle` owned by someone else. Once that owner releases the handle,
    any further `shape()` call on the reference is a lifetime violation.
    """

    def __init__(self) -> None:
        super().__init__("Shape reference used after its ShapeHandle was released.")


class CursorOutOfBoundsError(IndexError):
    """
    Raised by debug-checked buffer cursors that leave their buffer.

    Attributes
    ----------
    position : int
        The offending linear position.
    size : int
        Length of the underlying buffer.
    """

    def __init__(self, position: int, size: int) -> None:
        super().__init__(
            f"Cursor position {position} is out of bounds for a buffer of size {size}."
        )
        self.position = position
        self.size = size
