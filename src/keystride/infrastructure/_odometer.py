"""
Odometer increment: the shared multidimensional traversal rule.

`increment_stepper` advances a coordinate vector by one position in row-major
order (last dimension fastest) and tells a stepper how to follow:

- the innermost dimension that did not overflow is `step`-ped,
- every dimension that overflowed (other than dimension 0) is set back to 0
  and `reset` on the stepper, and the carry moves one dimension outward,
- a carry out of dimension 0 means the traversal is over, and the stepper is
  sent `to_end()`.

This is a multi-digit odometer whose digit `i` has base `shape[i]`. A
dimension is returned to its start with `reset` rather than by stepping back
`shape[i] - 1` times, because strided containers can do that in one move
using their backstrides.

A rank-0 shape never enters the loop, so the first increment goes straight
to the end state: a scalar is a one-element traversal.
"""

from __future__ import annotations

from typing import MutableSequence, Sequence

from ..domain._stepper import IStepper


def increment_stepper(
    stepper: IStepper, index: MutableSequence[int], shape: Sequence[int]
) -> None:
    """
    Advance `index` by one row-major position and move `stepper` accordingly.

    Parameters
    ----------
    stepper : IStepper
        Any object providing `step(dim)`, `reset(dim)` and `to_end()`.
    index : MutableSequence[int]
        Current coordinates, mutated in place. Must have the same length as
        `shape`.
    shape : Sequence[int]
        Iteration extents.

    Notes
    -----
    - Preconditions (equal ranks, `index` not already past the end) are not
      checked here; callers validate them once, outside the hot path.
    - After a carry out of dimension 0, `index[0] == shape[0]` and all inner
      coordinates are 0.
    """
    i = len(index)
    while i != 0:
        i -= 1
        index[i] += 1
        if index[i] != shape[i]:
            stepper.step(i)
            return
        if i != 0:
            index[i] = 0
            stepper.reset(i)
    stepper.to_end()
