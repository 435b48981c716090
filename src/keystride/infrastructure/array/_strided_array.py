"""
NumPy-backed strided container.

`StridedArray` owns a dense, flat NumPy buffer and describes it with element
strides and backstrides computed by `compute_strides`. It satisfies both
collaborator contracts of the traversal engine:

- `IStridedContainer` (cursors + strides), walked by `StridedStepper`,
- `IMutableIndexedExpression` (`element` / `set_element`), walked by the
  indexed steppers.

Design notes
------------
- Data is copied in at construction; the array never aliases caller memory.
- Dimensions of extent 1 get stride 0, so an array of shape (1, n) can be
  walked with an iteration shape (m, n) and repeats its single row.
- `readonly()` returns a sibling sharing the same storage through a
  non-writeable view. Cursors, steppers and iterators created from it can
  only read; constness is decided by which object the caller traverses.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

import numpy as np

from ...domain._errors import RankMismatchError
from ..cursor._buffer_cursor import BufferCursor
from .._config import debug_checks_enabled
from ..shape._shape_holder import ShapeHandle
from ..shape._strides import Layout, broadcast_offset, compute_strides
from ..stepper._strided_stepper import StridedStepper
from ._traversable import TraversableMixin


class StridedArray(TraversableMixin):
    """
    Dense n-dimensional array with element strides.

    Parameters
    ----------
    data : array_like
        Initial contents. Scalars produce a rank-0 array.
    layout : Layout, optional
        Storage order of the flat buffer. Defaults to `Layout.ROW_MAJOR`.
    dtype : data-type, optional
        Element type. Defaults to the type NumPy infers for `data`.

    Examples
    --------
    >>> a = StridedArray([[1, 2, 3], [4, 5, 6]])
    >>> a.strides, a.backstrides
    ((3, 1), (3, 2))
    >>> [int(v) for v in a]
    [1, 2, 3, 4, 5, 6]
    """

    def __init__(
        self,
        data: Any,
        layout: Layout = Layout.ROW_MAJOR,
        dtype: Optional[Any] = None,
    ) -> None:
        arr = np.asarray(data, dtype=dtype)
        order = "C" if layout is Layout.ROW_MAJOR else "F"
        buffer = np.array(arr.reshape(-1, order=order), copy=True)
        self._init_from_buffer(buffer, arr.shape, layout)

    def _init_from_buffer(
        self, buffer: np.ndarray, shape: Iterable[int], layout: Layout
    ) -> None:
        self._handle = ShapeHandle(shape)
        self._layout = layout
        self._strides, self._backstrides, self._size = compute_strides(
            self._handle.shape, layout
        )
        self._buffer = buffer
        self._checked = debug_checks_enabled()
        self._readonly: Optional[StridedArray] = None

    @classmethod
    def _from_buffer(
        cls, buffer: np.ndarray, shape: Iterable[int], layout: Layout
    ) -> "StridedArray":
        obj = cls.__new__(cls)
        obj._init_from_buffer(buffer, shape, layout)
        return obj

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._handle.shape

    @property
    def shape_handle(self) -> ShapeHandle:
        return self._handle

    @property
    def strides(self) -> tuple[int, ...]:
        return self._strides

    @property
    def backstrides(self) -> tuple[int, ...]:
        return self._backstrides

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def size(self) -> int:
        return self._size

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    @property
    def writeable(self) -> bool:
        return bool(self._buffer.flags.writeable)

    def dimension(self) -> int:
        return len(self._strides)

    # ------------------------------------------------------------------
    # Linear storage
    # ------------------------------------------------------------------
    def begin(self) -> BufferCursor:
        return BufferCursor(self._buffer, 0)

    def end(self) -> BufferCursor:
        return BufferCursor(self._buffer, self._size)

    def cbegin(self) -> BufferCursor:
        """Read-only cursor on the first element."""
        return self.readonly().begin()

    def cend(self) -> BufferCursor:
        """Read-only end cursor."""
        return self.readonly().end()

    def readonly(self) -> "StridedArray":
        """
        Return a read-only sibling sharing this array's storage.

        The sibling is created once and cached, so cursors taken from it at
        different times walk the same buffer object and compare equal.
        """
        if not self.writeable:
            return self
        if self._readonly is None:
            view = self._buffer.view()
            view.flags.writeable = False
            self._readonly = StridedArray._from_buffer(view, self.shape, self._layout)
        return self._readonly

    # ------------------------------------------------------------------
    # Indexed access
    # ------------------------------------------------------------------
    def _position(self, index: Sequence[int]) -> int:
        if self._checked and len(index) != len(self._strides):
            raise RankMismatchError(len(self._strides), len(index), what="index rank")
        pos = 0
        for i, s in zip(index, self._strides):
            pos += i * s
        return pos

    def element(self, index: Sequence[int]) -> Any:
        """
        Return the element at coordinates `index`.

        Parameters
        ----------
        index : Sequence[int]
            One coordinate per dimension.

        Returns
        -------
        Any
            The addressed element (a NumPy scalar).
        """
        return self._buffer[self._position(index)]

    def set_element(self, index: Sequence[int], value: Any) -> None:
        """Write `value` at coordinates `index`."""
        self._buffer[self._position(index)] = value

    # ------------------------------------------------------------------
    # Steppers
    # ------------------------------------------------------------------
    def stepper_begin(self, shape: Iterable[int]) -> StridedStepper:
        """
        Return a strided stepper on the first element.

        Parameters
        ----------
        shape : Iterable[int]
            Iteration shape. Its rank fixes the stepper's broadcast offset.

        Raises
        ------
        RankMismatchError
            If `shape` has fewer dimensions than this array.

        Notes
        -----
        An iteration shape with a zero extent has no elements, so the
        returned stepper is already in the end state.
        """
        extents = tuple(shape)
        offset = broadcast_offset(len(extents), self.dimension())
        stepper = StridedStepper(self, self.begin(), offset)
        if 0 in extents:
            stepper.to_end()
        return stepper

    def stepper_end(self, shape: Iterable[int]) -> StridedStepper:
        stepper = self.stepper_begin(shape)
        stepper.to_end()
        return stepper

    # ------------------------------------------------------------------
    # Interop
    # ------------------------------------------------------------------
    def to_numpy(self) -> np.ndarray:
        """Return a NumPy copy with this array's shape and values."""
        order = "C" if self._layout is Layout.ROW_MAJOR else "F"
        return self._buffer.reshape(self.shape, order=order).copy()

    def __repr__(self) -> str:
        return (
            f"StridedArray(shape={self.shape}, layout={self._layout.value}, "
            f"dtype={self.dtype})"
        )
