"""Tests for the terrain host and logging setup."""

import logging

import numpy as np
import pytest

import voxelmc
from voxelmc import TerrainGenerator, TerrainSettings, VoxelGrid, generate_mesh, populate
from voxelmc.density import terrain_density
from voxelmc.utils import configure_logging


class TestTerrainSettings:
    def test_defaults(self):
        s = TerrainSettings()
        assert s.grid_size == 16
        assert s.voxel_size == 0.5
        assert s.scale == 0.1
        assert s.surface_level == 0.5

    @pytest.mark.parametrize("kwargs", [
        {"grid_size": -1},
        {"voxel_size": 0.0},
        {"voxel_size": -2.0},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            TerrainSettings(**kwargs)

    def test_non_integer_grid_size(self):
        with pytest.raises(TypeError):
            TerrainSettings(grid_size=4.5)

    def test_replace(self):
        s = TerrainSettings().replace(scale=0.3)
        assert s.scale == 0.3
        assert s.grid_size == 16
        assert s != TerrainSettings()

    def test_replace_unknown_field(self):
        with pytest.raises(TypeError):
            TerrainSettings().replace(colour="green")


class TestTerrainGenerator:
    def test_no_mesh_before_update(self):
        assert TerrainGenerator().vertices is None

    def test_update_matches_direct_extraction(self):
        s = TerrainSettings(grid_size=10, scale=0.3)
        terrain = TerrainGenerator(s)
        out = terrain.update()

        g = populate(VoxelGrid(10), terrain_density(10), 0.3)
        expected = generate_mesh(g, 0.5, 0.5)
        assert out.tobytes() == expected.tobytes()
        assert terrain.vertices is out

    def test_update_changes_settings(self):
        terrain = TerrainGenerator(TerrainSettings(grid_size=8))
        first = terrain.update()
        second = terrain.update(surface_level=0.6)
        assert terrain.settings.surface_level == 0.6
        assert terrain.vertices is second
        assert first is not second

    def test_failed_update_keeps_previous_mesh(self):
        terrain = TerrainGenerator(TerrainSettings(grid_size=6))
        previous = terrain.update()
        with pytest.raises(ValueError):
            terrain.update(voxel_size=-1.0)
        assert terrain.vertices is previous
        assert terrain.settings.voxel_size == 0.5

    def test_density_error_keeps_previous_mesh(self):
        def flaky(x, y, z, scale):
            if scale > 1.0:
                raise RuntimeError("density failed")
            return float(y < 2)

        terrain = TerrainGenerator(TerrainSettings(grid_size=4, voxel_size=1.0), density=flaky)
        previous = terrain.update()
        with pytest.raises(RuntimeError):
            terrain.update(scale=2.0)
        assert terrain.vertices is previous
        assert np.all(previous.reshape(-1, 3)[:, 1] == 1.5)

    def test_small_grid_gives_empty_mesh(self):
        terrain = TerrainGenerator(TerrainSettings(grid_size=1))
        assert terrain.update().size == 0

    def test_logs_vertex_count(self, caplog):
        terrain = TerrainGenerator(TerrainSettings(grid_size=6))
        with caplog.at_level(logging.INFO, logger=voxelmc.__name__):
            out = terrain.update()
        assert f"Generated {out.size // 3} vertices" in caplog.text


class TestConfigureLogging:
    def test_handlers_replaced_not_stacked(self, tmp_path):
        logger = logging.getLogger(voxelmc.__name__)
        saved = list(logger.handlers), logger.level
        try:
            configure_logging(logging.DEBUG)
            configure_logging(logging.DEBUG, logfile=str(tmp_path / "mc.log"))
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 2
            logger.debug("hello")
            for h in logger.handlers:
                h.flush()
            assert "hello" in (tmp_path / "mc.log").read_text()
        finally:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()
            for h in saved[0]:
                logger.addHandler(h)
            logger.setLevel(saved[1])
