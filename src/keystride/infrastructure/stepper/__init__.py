"""
Steppers: cursor abstractions driven one dimension at a time.

- `StridedStepper` walks strided storage with a single cursor.
- `IndexedStepper` / `MutableIndexedStepper` walk stride-less expressions
  through an explicit coordinate vector.
"""

from ._strided_stepper import StridedStepper
from ._indexed_stepper import IndexedStepper, MutableIndexedStepper

__all__ = [
    StridedStepper.__name__,
    IndexedStepper.__name__,
    MutableIndexedStepper.__name__,
]
