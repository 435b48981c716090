"""
Bounds-aware cursor over a flat NumPy buffer.

`BufferCursor` is the strided stepper's replacement for a raw pointer: an
integer position into a borrowed one-dimensional buffer. Moving the cursor is
plain integer arithmetic, so stepping and resetting stay O(1).

Positions in `[0, len(buffer))` address elements; `len(buffer)` is the end
position. When debug checks are enabled at construction, leaving
`[0, len(buffer)]` or dereferencing the end position raises
`CursorOutOfBoundsError`.

Constness is decided by the buffer, not by the cursor: a cursor over a
read-only view (``flags.writeable == False``) lets NumPy reject `set`.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._container import ICursor
from ...domain._errors import CursorOutOfBoundsError
from .._config import debug_checks_enabled


class BufferCursor(ICursor):
    """
    Position in a one-dimensional NumPy buffer.

    Parameters
    ----------
    buffer : np.ndarray
        One-dimensional buffer. Borrowed; it must outlive the cursor.
    position : int, optional
        Initial position. Defaults to 0.
    checked : bool, optional
        Whether to bounds-check moves and dereferences. Defaults to the
        current debug-check switch.

    Notes
    -----
    Two cursors are equal only if they walk the *same* buffer object and
    sit at the same position.
    """

    __slots__ = ("_buffer", "_position", "_checked")

    def __init__(
        self,
        buffer: np.ndarray,
        position: int = 0,
        checked: Optional[bool] = None,
    ) -> None:
        self._buffer = buffer
        self._position = int(position)
        self._checked = debug_checks_enabled() if checked is None else bool(checked)
        if self._checked:
            if buffer.ndim != 1:
                raise ValueError(
                    f"BufferCursor requires a 1-D buffer, got ndim={buffer.ndim}"
                )
            self._check_move()

    @property
    def buffer(self) -> np.ndarray:
        return self._buffer

    @property
    def position(self) -> int:
        return self._position

    @property
    def checked(self) -> bool:
        return self._checked

    def _check_move(self) -> None:
        size = self._buffer.shape[0]
        if not 0 <= self._position <= size:
            raise CursorOutOfBoundsError(self._position, size)

    def _check_access(self) -> None:
        size = self._buffer.shape[0]
        if not 0 <= self._position < size:
            raise CursorOutOfBoundsError(self._position, size)

    def get(self) -> Any:
        """Return the element at the current position."""
        if self._checked:
            self._check_access()
        return self._buffer[self._position]

    def set(self, value: Any) -> None:
        """
        Write `value` at the current position.

        Raises
        ------
        ValueError
            If the buffer is a read-only view.
        """
        if self._checked:
            self._check_access()
        self._buffer[self._position] = value

    def advance(self, n: int) -> None:
        self._position += n
        if self._checked:
            self._check_move()

    def retreat(self, n: int) -> None:
        self._position -= n
        if self._checked:
            self._check_move()

    def copy(self) -> "BufferCursor":
        return BufferCursor(self._buffer, self._position, self._checked)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BufferCursor):
            return NotImplemented
        return self._buffer is other._buffer and self._position == other._position

    def __repr__(self) -> str:
        return f"BufferCursor(position={self._position}, size={self._buffer.shape[0]})"
