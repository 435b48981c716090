import unittest
from unittest import TestCase

from src.keystride.infrastructure._config import debug_checks
from src.keystride.infrastructure.array._function_expression import (
    FunctionExpression,
)
from src.keystride.infrastructure.array._strided_array import StridedArray
from src.keystride.infrastructure.stepper._indexed_stepper import (
    IndexedStepper,
    MutableIndexedStepper,
)


class _Recorder:
    """Expression that records every coordinate it is asked for."""

    def __init__(self, shape):
        self.shape = tuple(shape)
        self.calls = []

    def element(self, index):
        self.calls.append(tuple(index))
        return sum(index)


class TestIndexedStepperMoves(TestCase):
    def setUp(self) -> None:
        self.expr = FunctionExpression((3, 4), lambda i, j: (i, j))

    def test_starts_at_origin(self):
        """A begin stepper should address coordinate (0, ..., 0)."""
        s = IndexedStepper(self.expr, 0)
        self.assertEqual(s.index, (0, 0))
        self.assertEqual(s.dereference(), (0, 0))

    def test_step_and_step_back(self):
        """step()/step_back() should move one coordinate by n."""
        s = IndexedStepper(self.expr, 0)
        s.step(1, 3)
        s.step(0)
        self.assertEqual(s.dereference(), (1, 3))
        s.step_back(1, 2)
        self.assertEqual(s.dereference(), (1, 1))

    def test_reset_zeroes_one_coordinate(self):
        """reset() should zero only the given dimension."""
        s = IndexedStepper(self.expr, 0)
        s.step(0, 2)
        s.step(1, 3)
        s.reset(1)
        self.assertEqual(s.index, (2, 0))

    def test_to_end_copies_shape(self):
        """to_end() should set the index to the expression's shape."""
        s = IndexedStepper(self.expr, 0)
        s.to_end()
        self.assertEqual(s.index, (3, 4))

    def test_end_flag(self):
        """end=True should construct the stepper in the end state."""
        self.assertEqual(IndexedStepper(self.expr, 0, end=True).index, (3, 4))

    def test_dereference_is_not_cached(self):
        """Each dereference should call element() again."""
        rec = _Recorder((2,))
        s = IndexedStepper(rec, 0)
        s.dereference()
        s.dereference()
        self.assertEqual(rec.calls, [(0,), (0,)])


class TestIndexedStepperBroadcasting(TestCase):
    def test_leading_dimensions_are_no_ops(self):
        """Moves along dimensions below the offset should not change the index."""
        expr = FunctionExpression((2,), lambda i: i)
        s = IndexedStepper(expr, 1)
        s.step(0, 5)
        s.reset(0)
        self.assertEqual(s.index, (0,))
        s.step(1)
        self.assertEqual(s.dereference(), 1)

    def test_index_sized_to_expression_rank(self):
        """The index should have the expression's rank, not the iteration rank."""
        expr = FunctionExpression((2,), lambda i: i)
        self.assertEqual(len(IndexedStepper(expr, 3).index), 1)

    def test_unit_dimension_does_not_move(self):
        """Stepping an extent-1 dimension should leave its coordinate at 0."""
        rec = _Recorder((1, 3))
        s = IndexedStepper(rec, 0)
        s.step(0)
        s.step(1)
        self.assertEqual(s.index, (0, 1))
        s.step_back(0)
        self.assertEqual(s.index, (0, 1))

    def test_unit_dimensions_never_reach_end_early(self):
        """A (1, 1) expression broadcast over (2, 2) should yield four elements."""
        e = FunctionExpression((1, 1), lambda i, j: (i, j))
        self.assertEqual(list(e.traverse((2, 2))), [(0, 0)] * 4)


class TestIndexedStepperRankZero(TestCase):
    def setUp(self) -> None:
        self.expr = FunctionExpression((), lambda: 42)

    def test_begin_and_end_differ(self):
        """Rank-0 begin and end steppers should not compare equal."""
        begin = IndexedStepper(self.expr, 0)
        end = IndexedStepper(self.expr, 0, end=True)
        self.assertEqual(begin.dereference(), 42)
        self.assertNotEqual(begin, end)

    def test_to_end_reaches_end(self):
        """to_end() on a rank-0 stepper should match an end-constructed one."""
        s = IndexedStepper(self.expr, 0)
        s.to_end()
        self.assertEqual(s, IndexedStepper(self.expr, 0, end=True))

    def test_end_state_index(self):
        """The rank-0 end state should be the one-slot index (1,)."""
        s = IndexedStepper(self.expr, 0)
        self.assertEqual(s.index, ())
        s.to_end()
        self.assertEqual(s.index, (1,))


class TestIndexedStepperEquality(TestCase):
    def setUp(self) -> None:
        self.expr = FunctionExpression((2, 2), lambda i, j: i * 2 + j)

    def test_same_index(self):
        """Steppers at the same index should be equal until one moves."""
        s = IndexedStepper(self.expr, 0)
        t = IndexedStepper(self.expr, 0)
        self.assertEqual(s, t)
        s.step(0)
        self.assertNotEqual(s, t)

    def test_different_expression(self):
        """Steppers over different expression objects should never be equal."""
        other = FunctionExpression((2, 2), lambda i, j: i * 2 + j)
        self.assertFalse(IndexedStepper(self.expr, 0).equal(IndexedStepper(other, 0)))

    def test_different_variant(self):
        """Read-only and mutable steppers should not compare equal."""
        a = StridedArray([[1, 2], [3, 4]])
        self.assertNotEqual(IndexedStepper(a, 0), MutableIndexedStepper(a, 0))

    def test_copy_is_independent(self):
        """Moving a copy should not move the original."""
        s = IndexedStepper(self.expr, 0)
        c = s.copy()
        c.step(1)
        self.assertEqual(s.index, (0, 0))
        self.assertEqual(c.index, (0, 1))
        self.assertIsInstance(c, IndexedStepper)

    def test_no_instance_dict(self):
        """Indexed steppers should store their state in slots only."""
        self.assertFalse(hasattr(IndexedStepper(self.expr, 0), "__dict__"))


class TestMutableIndexedStepper(TestCase):
    def test_assign_writes_through_set_element(self):
        """assign() should write the addressed element via set_element()."""
        a = StridedArray([[1, 2], [3, 4]])
        s = MutableIndexedStepper(a, 0)
        s.step(0)
        s.step(1)
        s.assign(40)
        self.assertEqual(a.element((1, 1)), 40)
        self.assertEqual(s.dereference(), 40)

    def test_read_only_variant_has_no_assign(self):
        """IndexedStepper should not expose assign()."""
        a = StridedArray([1, 2])
        self.assertFalse(hasattr(IndexedStepper(a, 0), "assign"))

    def test_copy_keeps_variant(self):
        """copy() should preserve the mutable variant."""
        a = StridedArray([1, 2])
        self.assertIsInstance(MutableIndexedStepper(a, 0).copy(), MutableIndexedStepper)


class TestIndexedStepperDebugChecks(TestCase):
    def test_negative_offset_rejected(self):
        """A negative offset should raise ValueError under debug checks."""
        expr = FunctionExpression((2,), lambda i: i)
        with debug_checks():
            with self.assertRaises(ValueError):
                IndexedStepper(expr, -2)


if __name__ == "__main__":
    unittest.main()
