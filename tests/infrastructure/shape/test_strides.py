import unittest
from unittest import TestCase

from src.keystride.domain._errors import InvalidShapeError, RankMismatchError
from src.keystride.infrastructure.shape._strides import (
    Layout,
    broadcast_offset,
    compute_strides,
)


class TestComputeStrides(TestCase):
    def test_row_major_square(self):
        """A (3, 3) row-major shape has strides (3, 1) and backstrides (6, 2)."""
        strides, backstrides, size = compute_strides((3, 3))
        self.assertEqual(strides, (3, 1))
        self.assertEqual(backstrides, (6, 2))
        self.assertEqual(size, 9)

    def test_row_major_three_dims(self):
        """The last dimension should vary fastest in row-major order."""
        strides, backstrides, size = compute_strides((2, 3, 4))
        self.assertEqual(strides, (12, 4, 1))
        self.assertEqual(backstrides, (12, 8, 3))
        self.assertEqual(size, 24)

    def test_column_major(self):
        """The first dimension should vary fastest in column-major order."""
        strides, backstrides, size = compute_strides((2, 3, 4), Layout.COLUMN_MAJOR)
        self.assertEqual(strides, (1, 2, 6))
        self.assertEqual(backstrides, (1, 4, 18))
        self.assertEqual(size, 24)

    def test_unit_extent_has_zero_stride(self):
        """Extent-1 dimensions should get stride and backstride 0."""
        strides, backstrides, size = compute_strides((1, 4))
        self.assertEqual(strides, (0, 1))
        self.assertEqual(backstrides, (0, 3))
        self.assertEqual(size, 4)

    def test_rank_zero(self):
        """A rank-0 shape has no strides and one element."""
        self.assertEqual(compute_strides(()), ((), (), 1))

    def test_zero_extent(self):
        """A zero extent gives size 0 and backstride 0."""
        strides, backstrides, size = compute_strides((2, 0, 3))
        self.assertEqual(size, 0)
        self.assertEqual(backstrides[1], 0)

    def test_backstride_is_stride_times_last_coordinate(self):
        """backstrides[i] should equal strides[i] * (shape[i] - 1)."""
        shape = (5, 2, 7)
        strides, backstrides, _ = compute_strides(shape)
        for s, b, e in zip(strides, backstrides, shape):
            self.assertEqual(b, s * (e - 1))

    def test_rejects_negative_extent(self):
        """Negative extents should raise InvalidShapeError."""
        with self.assertRaises(InvalidShapeError):
            compute_strides((3, -2))


class TestBroadcastOffset(TestCase):
    def test_same_rank(self):
        """Equal ranks need no offset."""
        self.assertEqual(broadcast_offset(2, 2), 0)

    def test_missing_leading_dimensions(self):
        """The offset is the number of missing leading dimensions."""
        self.assertEqual(broadcast_offset(4, 1), 3)

    def test_scalar_container(self):
        """A rank-0 container lacks every iteration dimension."""
        self.assertEqual(broadcast_offset(3, 0), 3)

    def test_container_with_more_dimensions_raises(self):
        """Broadcasting never drops dimensions."""
        with self.assertRaises(RankMismatchError):
            broadcast_offset(1, 2)


if __name__ == "__main__":
    unittest.main()
