"""
Strided stepper.

`StridedStepper` walks a container that exposes per-dimension strides and
backstrides by moving a single cursor. Every move is O(1):

- `step(dim, n)` advances the cursor by `n * strides[dim - offset]`,
- `step_back(dim, n)` moves it back by the same amount,
- `reset(dim)` moves it back by `backstrides[dim - offset]`, returning that
  dimension from its last coordinate to coordinate 0 in one move,
- `to_end()` replaces the cursor by the container's canonical end cursor.

Broadcasting
------------
The stepper is built with a rank-alignment `offset`: the number of leading
iteration dimensions the container lacks. Any move along a dimension
`dim < offset` is a no-op, so the container's elements are reused across
those outer positions.

Notes
-----
Strides and backstrides are read from the container once, at construction.
Containers are borrowed and must outlive the stepper.
"""

from __future__ import annotations

import logging
from typing import Any

from ...domain._container import ICursor, IStridedContainer
from ...domain._stepper import IStepper
from .._config import debug_checks_enabled

logger = logging.getLogger(__name__)


class StridedStepper(IStepper):
    """
    Stepper over strided linear storage.

    Parameters
    ----------
    container : IStridedContainer
        Borrowed container providing `strides`, `backstrides` and `end()`.
    cursor : ICursor
        Starting cursor, already positioned per the container's own order
        (usually `container.begin()`). The stepper takes ownership of it.
    offset : int
        Number of leading iteration dimensions the container does not have.

    Raises
    ------
    ValueError
        If debug checks are enabled and `offset` is negative or the
        container is missing.
    """

    __slots__ = ("_container", "_cursor", "_offset", "_strides", "_backstrides")

    def __init__(
        self, container: IStridedContainer, cursor: ICursor, offset: int
    ) -> None:
        if debug_checks_enabled():
            if container is None:
                raise ValueError("StridedStepper requires a container")
            if offset < 0:
                raise ValueError(f"offset must be non-negative, got {offset}")
        self._container = container
        self._cursor = cursor
        self._offset = offset
        self._strides = container.strides
        self._backstrides = container.backstrides
        if offset:
            logger.debug(
                "strided stepper broadcasting over %d leading dimension(s)", offset
            )

    @property
    def container(self) -> IStridedContainer:
        return self._container

    @property
    def cursor(self) -> ICursor:
        return self._cursor

    @property
    def offset(self) -> int:
        return self._offset

    def dereference(self) -> Any:
        return self._cursor.get()

    def assign(self, value: Any) -> None:
        """Write `value` at the addressed element (mutable containers only)."""
        self._cursor.set(value)

    def step(self, dim: int, n: int = 1) -> None:
        if dim >= self._offset:
            self._cursor.advance(n * self._strides[dim - self._offset])

    def step_back(self, dim: int, n: int = 1) -> None:
        if dim >= self._offset:
            self._cursor.retreat(n * self._strides[dim - self._offset])

    def reset(self, dim: int) -> None:
        if dim >= self._offset:
            self._cursor.retreat(self._backstrides[dim - self._offset])

    def to_end(self) -> None:
        self._cursor = self._container.end()

    def equal(self, other: "StridedStepper") -> bool:
        """
        Compare positions.

        Two strided steppers are equal iff they walk the same container
        object, with equal cursors and the same offset. Steppers over
        different containers are never equal.
        """
        return (
            self._container is other._container
            and self._cursor == other._cursor
            and self._offset == other._offset
        )

    def copy(self) -> "StridedStepper":
        clone = StridedStepper.__new__(StridedStepper)
        clone._container = self._container
        clone._cursor = self._cursor.copy()
        clone._offset = self._offset
        clone._strides = self._strides
        clone._backstrides = self._backstrides
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StridedStepper):
            return NotImplemented
        return self.equal(other)

    def __repr__(self) -> str:
        return f"StridedStepper(cursor={self._cursor!r}, offset={self._offset})"
