"""
Stepper contract.

A stepper is a cursor abstraction decoupled from the iterator that drives it.
It knows how to move along one dimension at a time (`step`, `step_back`),
how to return a dimension to its start in one move (`reset`), how to jump to
the terminal state (`to_end`), and how to read the element it currently
addresses (`dereference`).

The odometer increment algorithm only needs `step`, `reset` and `to_end`;
the iterator adaptor additionally needs `dereference`, `equal` and `copy`.

Broadcasting
------------
Every stepper carries a fixed rank-alignment *offset*: the number of leading
iteration dimensions the walked entity does not have. Moving along a
dimension `dim < offset` is a no-op, so the same element is reused across
those outer positions.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from typing_extensions import Self


@runtime_checkable
class IStepper(Protocol):
    """
    Shape-agnostic multidimensional cursor.

    Notes
    -----
    - Steppers have value semantics: `copy()` produces an independent
      position, and mutating the copy never affects the original.
    - Preconditions (e.g. not dereferencing at the end state) are the
      caller's responsibility and are not checked on the hot path.
    """

    __slots__ = ()

    @property
    def offset(self) -> int:
        """Number of leading iteration dimensions the walked entity lacks."""
        ...

    def dereference(self) -> Any:
        """
        Return the element currently addressed.

        Returns
        -------
        Any
            The addressed element. Calling this has no side effects.
        """
        ...

    def step(self, dim: int, n: int = 1) -> None:
        """
        Move `n` positions forward along iteration dimension `dim`.

        Parameters
        ----------
        dim : int
            Iteration dimension (in the coordinates of the iteration shape).
        n : int, optional
            Number of positions. Defaults to 1.
        """
        ...

    def step_back(self, dim: int, n: int = 1) -> None:
        """Move `n` positions backward along iteration dimension `dim`."""
        ...

    def reset(self, dim: int) -> None:
        """Return iteration dimension `dim` from its last coordinate to 0."""
        ...

    def to_end(self) -> None:
        """Jump to the terminal state used for end-of-traversal comparison."""
        ...

    def equal(self, other: Self) -> bool:
        """Return True if both steppers address the same position of the same entity."""
        ...

    def copy(self) -> Self:
        """Return an independent stepper at the same position."""
        ...
