"""Tests for non-indexed mesh helpers."""

import numpy as np
import numpy.testing as npt
import pytest

from voxelmc import as_triangles, bounds, face_normals, triangle_count, vertex_count


def _tri(*pts) -> np.ndarray:
    return np.array(pts, dtype=np.float32).reshape(-1)


class TestAsTriangles:
    def test_shape(self):
        v = np.arange(18, dtype=np.float32)
        t = as_triangles(v)
        assert t.shape == (2, 3, 3)
        npt.assert_array_equal(t[1, 0], [9, 10, 11])

    def test_empty(self):
        assert as_triangles(np.empty(0, dtype=np.float32)).shape == (0, 3, 3)

    @pytest.mark.parametrize("n", [3, 8, 10])
    def test_bad_length(self, n):
        with pytest.raises(ValueError):
            as_triangles(np.zeros(n))

    def test_counts(self):
        v = np.zeros(27)
        assert vertex_count(v) == 9
        assert triangle_count(v) == 3


class TestFaceNormals:
    def test_counter_clockwise_points_up(self):
        v = _tri((0, 0, 0), (1, 0, 0), (0, 1, 0))
        npt.assert_allclose(face_normals(v), [[0, 0, 1]])

    def test_unit_length(self):
        v = _tri((0, 0, 0), (3, 0, 0), (0, 0, 2), (1, 1, 1), (2, 3, 1), (1, 1, 5))
        npt.assert_allclose(np.linalg.norm(face_normals(v), axis=1), 1.0)

    def test_degenerate_is_zero(self):
        v = _tri((0, 0, 0), (1, 1, 1), (2, 2, 2))
        npt.assert_array_equal(face_normals(v), [[0, 0, 0]])


class TestBounds:
    def test_empty_is_none(self):
        assert bounds(np.empty(0)) is None

    def test_min_max(self):
        v = _tri((0, 1, 2), (-1, 5, 0), (3, 0, 1))
        lo, hi = bounds(v)
        npt.assert_array_equal(lo, [-1, 0, 0])
        npt.assert_array_equal(hi, [3, 5, 2])
