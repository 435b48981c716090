"""
Indexed steppers for expressions without strides.

Computed or broadcast expressions have no linear storage to walk. They are
traversed by keeping an explicit coordinate vector and asking the expression
for `element(index)` on every dereference; nothing is cached.

Two variants share one implementation and differ only in which accessor
they are allowed to reach:

- `IndexedStepper` is read-only and only ever calls `element(index)`.
- `MutableIndexedStepper` additionally writes through
  `set_element(index, value)` via `assign(value)`.

The variant is chosen by the caller at construction; there is no runtime
constness flag.

End state
---------
`to_end()` copies the expression's shape into the index vector. Every valid
coordinate is strictly below its extent, so an index equal to the shape is
an unambiguous out-of-range sentinel, and begin/end steppers compare with
plain index equality. A rank-0 expression has an empty index, which cannot
tell begin from end, so its end state is the one-slot index `[1]`.

Unit dimensions
---------------
Stepping along a dimension of extent 1 leaves its coordinate at 0, the
indexed counterpart of a zero stride. A size-1 dimension broadcast over a
longer iteration extent therefore repeats its single slice, and no
mid-traversal index can collide with the end sentinel.
"""

from __future__ import annotations

import logging
from typing import Any, List

from ...domain._container import IIndexedExpression, IMutableIndexedExpression
from ...domain._stepper import IStepper
from .._config import debug_checks_enabled

logger = logging.getLogger(__name__)

_SCALAR_END = (1,)
"""End-state index of a rank-0 expression: one element, then one past it."""


class _IndexedStepperBase(IStepper):
    """
    Shared step/reset/end logic for indexed steppers.

    Parameters
    ----------
    expression : IIndexedExpression
        Borrowed expression. Must outlive the stepper.
    offset : int
        Number of leading iteration dimensions the expression lacks.
    end : bool, optional
        If True, the stepper starts in the end state. Defaults to False.

    Notes
    -----
    The expression's shape is read once, at construction.
    The index vector is sized to the expression's own rank (not the
    iteration rank) once, at construction, and mutated in place afterwards.
    The one exception is a rank-0 expression: `to_end()` grows its empty
    index to the one-slot end state `[1]`.
    """

    __slots__ = ("_expression", "_shape", "_index", "_offset")

    def __init__(
        self, expression: IIndexedExpression, offset: int, end: bool = False
    ) -> None:
        if debug_checks_enabled():
            if expression is None:
                raise ValueError(f"{type(self).__name__} requires an expression")
            if offset < 0:
                raise ValueError(f"offset must be non-negative, got {offset}")
        self._expression = expression
        self._shape = tuple(expression.shape)
        self._index: List[int] = [0] * len(self._shape)
        self._offset = offset
        if offset:
            logger.debug(
                "indexed stepper broadcasting over %d leading dimension(s)", offset
            )
        if end:
            self.to_end()

    @property
    def expression(self) -> IIndexedExpression:
        return self._expression

    @property
    def index(self) -> tuple[int, ...]:
        """Snapshot of the current coordinates in the expression's own rank."""
        return tuple(self._index)

    @property
    def offset(self) -> int:
        return self._offset

    def dereference(self) -> Any:
        return self._expression.element(self._index)

    def step(self, dim: int, n: int = 1) -> None:
        if dim >= self._offset and self._shape[dim - self._offset] != 1:
            self._index[dim - self._offset] += n

    def step_back(self, dim: int, n: int = 1) -> None:
        if dim >= self._offset and self._shape[dim - self._offset] != 1:
            self._index[dim - self._offset] -= n

    def reset(self, dim: int) -> None:
        if dim >= self._offset:
            self._index[dim - self._offset] = 0

    def to_end(self) -> None:
        if self._shape:
            self._index[:] = self._shape
        else:
            # rank 0: an empty index cannot differ from the begin state
            self._index[:] = _SCALAR_END

    def equal(self, other: "_IndexedStepperBase") -> bool:
        """
        Return True for the same expression object, index and offset.
        """
        return (
            self._expression is other._expression
            and self._index == other._index
            and self._offset == other._offset
        )

    def copy(self):
        clone = type(self).__new__(type(self))
        clone._expression = self._expression
        clone._shape = self._shape
        clone._index = list(self._index)
        clone._offset = self._offset
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.equal(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index!r}, offset={self._offset})"


class IndexedStepper(_IndexedStepperBase):
    """
    Read-only stepper over an indexed expression.

    Dereferencing calls `expression.element(index)` with the current
    coordinates; the expression is never written to.
    """

    __slots__ = ()


class MutableIndexedStepper(_IndexedStepperBase):
    """
    Stepper over an indexed expression that can also write elements.

    Parameters
    ----------
    expression : IMutableIndexedExpression
        Borrowed expression providing `element` and `set_element`.
    offset : int
        Number of leading iteration dimensions the expression lacks.
    end : bool, optional
        If True, the stepper starts in the end state.
    """

    __slots__ = ()

    def __init__(
        self, expression: IMutableIndexedExpression, offset: int, end: bool = False
    ) -> None:
        super().__init__(expression, offset, end)

    def assign(self, value: Any) -> None:
        """Write `value` at the current coordinates."""
        self._expression.set_element(self._index, value)
