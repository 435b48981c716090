import unittest
from unittest import TestCase

from src.keystride.infrastructure.array._function_expression import (
    FunctionExpression,
)
from src.keystride.infrastructure.array._strided_array import StridedArray
from src.keystride.infrastructure.iterator import _traversal
from src.keystride.infrastructure.iterator._traversal import traverse


class TestTraverse(TestCase):
    def test_yields_row_major(self):
        """traverse() should produce elements in row-major order."""
        e = FunctionExpression((2, 2), lambda i, j: (i, j))
        self.assertEqual(
            list(traverse(e.xbegin(), e.xend())),
            [(0, 0), (0, 1), (1, 0), (1, 1)],
        )

    def test_begin_is_not_advanced(self):
        """The caller's begin iterator should stay where it was."""
        a = StridedArray([4, 5, 6])
        begin = a.xbegin()
        list(traverse(begin, a.xend()))
        self.assertEqual(begin.index, (0,))
        self.assertEqual(int(begin.dereference()), 4)

    def test_mismatched_shapes_raise(self):
        """Mismatched shapes should raise when traverse() is called."""
        a = StridedArray([1, 2, 3])
        with self.assertRaises(ValueError):
            traverse(a.xbegin((2, 3)), a.xend())

    def test_mismatched_expression_shapes_raise(self):
        """The shape check should not wait for the first element."""
        e = FunctionExpression((3,), lambda i: i)
        with self.assertRaises(ValueError):
            traverse(e.xbegin(), e.xend((1, 2, 3)))

    def test_empty_range(self):
        """A range starting at end should yield nothing."""
        a = StridedArray([1, 2, 3])
        self.assertEqual(list(traverse(a.xend(), a.xend())), [])

    def test_logs_element_count(self):
        """Finishing a traversal should log how many elements were produced."""
        a = StridedArray([1, 2, 3])
        with self.assertLogs(_traversal.logger, level="DEBUG") as logs:
            list(a.traverse((2, 3)))
        self.assertIn("after 6 element(s)", logs.output[-1])


if __name__ == "__main__":
    unittest.main()
