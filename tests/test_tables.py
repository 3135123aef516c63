"""Tests for the static marching-cubes tables."""

import pytest

from voxelmc.tables import (
    CUBE_CORNERS,
    CUBE_EDGES,
    MAX_TRIANGLES_PER_CELL,
    TRIANGLE_TABLE,
    triangulation,
)


def _inside(config: int, corner: int) -> bool:
    return bool(config >> corner & 1)


class TestCubeGeometry:
    def test_eight_unit_corners(self):
        assert len(CUBE_CORNERS) == 8
        assert len(set(CUBE_CORNERS)) == 8
        assert all(c in (0, 1) for corner in CUBE_CORNERS for c in corner)

    def test_edges_join_adjacent_corners(self):
        assert len(CUBE_EDGES) == 12
        for a, b in CUBE_EDGES:
            diff = [abs(p - q) for p, q in zip(CUBE_CORNERS[a], CUBE_CORNERS[b])]
            assert sum(diff) == 1

    def test_vertical_edges(self):
        for i in range(4):
            assert CUBE_EDGES[8 + i] == (i, i + 4)


class TestTriangleTable:
    def test_has_256_entries(self):
        assert len(TRIANGLE_TABLE) == 256

    @pytest.mark.parametrize("config", [0, 255])
    def test_trivial_configs_empty(self, config):
        assert TRIANGLE_TABLE[config] == ()
        assert triangulation(config) == ()

    def test_entries_are_triangles_of_edges(self):
        for config, entry in enumerate(TRIANGLE_TABLE):
            assert len(entry) % 3 == 0, config
            assert all(0 <= e < 12 for e in entry), config

    def test_non_trivial_configs_have_triangles(self):
        for config in range(1, 255):
            assert len(TRIANGLE_TABLE[config]) >= 3, config

    def test_edges_listed_exactly_where_surface_crosses(self):
        for config, entry in enumerate(TRIANGLE_TABLE):
            crossing = {
                e for e, (a, b) in enumerate(CUBE_EDGES)
                if _inside(config, a) != _inside(config, b)
            }
            assert set(entry) == crossing, config

    def test_known_entries(self):
        assert TRIANGLE_TABLE[1] == (0, 3, 8)
        assert TRIANGLE_TABLE[254] == (8, 3, 0)
        assert TRIANGLE_TABLE[51] == (7, 5, 3, 3, 5, 1)

    def test_max_triangles(self):
        assert MAX_TRIANGLES_PER_CELL == 4
        assert max(len(e) for e in TRIANGLE_TABLE) == MAX_TRIANGLES_PER_CELL * 3

    @pytest.mark.parametrize("config", [-1, 256, 1000])
    def test_out_of_range_lookup_empty(self, config):
        assert triangulation(config) == ()

    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            TRIANGLE_TABLE[1] = (0, 1, 2)
