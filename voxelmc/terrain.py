"""Regenerating terrain meshes from a density function.

This is the host side of extraction: it owns the parameters, builds a new
grid for every change, and exposes only finished meshes.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import numpy.typing as npt

import voxelmc
from .density import terrain_density
from .grid import DensityFunc, VoxelGrid, populate
from .marching import VOXEL_SIZE, generate_mesh

logger = logging.getLogger(voxelmc.__name__)

_Array = npt.NDArray[np.floating]

GRID_SIZE = 16
DEFAULT_SCALE = 0.1
DEFAULT_SURFACE_LEVEL = 0.5


class TerrainSettings:
    """Extraction parameters.

    Parameters
    ----------
    grid_size:
        Samples per axis (integer, ``>= 0``; fewer than 2 gives no cells).
    voxel_size:
        World-space length of one grid step, ``> 0``.
    scale:
        Frequency passed to the density function.
    surface_level:
        Extraction threshold.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        voxel_size: float = VOXEL_SIZE,
        scale: float = DEFAULT_SCALE,
        surface_level: float = DEFAULT_SURFACE_LEVEL,
    ) -> None:
        if isinstance(grid_size, bool) or not isinstance(grid_size, (int, np.integer)):
            raise TypeError(f"grid_size must be an integer, got {grid_size!r}")
        if grid_size < 0:
            raise ValueError(f"grid_size must be non-negative, got {grid_size}")
        if not voxel_size > 0:
            raise ValueError(f"voxel_size must be positive, got {voxel_size}")
        self.grid_size = int(grid_size)
        self.voxel_size = float(voxel_size)
        self.scale = float(scale)
        self.surface_level = float(surface_level)

    def replace(self, **changes) -> TerrainSettings:
        """Copy with some fields changed."""
        params = dict(
            grid_size=self.grid_size,
            voxel_size=self.voxel_size,
            scale=self.scale,
            surface_level=self.surface_level,
        )
        unknown = set(changes) - set(params)
        if unknown:
            raise TypeError(f"unknown settings: {', '.join(sorted(unknown))}")
        params.update(changes)
        return TerrainSettings(**params)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TerrainSettings):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return (
            f"TerrainSettings(grid_size={self.grid_size}, voxel_size={self.voxel_size}, "
            f"scale={self.scale}, surface_level={self.surface_level})"
        )


def build_grid(settings: TerrainSettings, density: DensityFunc) -> VoxelGrid:
    """Allocate and populate a fresh grid for *settings*."""
    grid = VoxelGrid(settings.grid_size)
    return populate(grid, density, settings.scale)


class TerrainGenerator:
    """Keeps the latest terrain mesh and rebuilds it on parameter changes.

    *vertices* only ever refers to a completely built mesh: :meth:`update`
    assembles the new array first and swaps it in as its last step.

    Parameters
    ----------
    settings:
        Initial parameters; defaults to :class:`TerrainSettings()`.
    density:
        ``f(x, y, z, scale)``; defaults to
        :func:`~voxelmc.density.terrain_density` for the grid size.
    workers:
        Passed through to :func:`~voxelmc.marching.generate_mesh`.
    """

    def __init__(
        self,
        settings: Optional[TerrainSettings] = None,
        density: Optional[DensityFunc] = None,
        workers: int = 1,
    ) -> None:
        self.settings = settings if settings is not None else TerrainSettings()
        self._density = density
        self.workers = workers
        self.vertices: Optional[_Array] = None

    def _density_for(self, settings: TerrainSettings) -> DensityFunc:
        if self._density is not None:
            return self._density
        return terrain_density(settings.grid_size)

    def update(self, **changes) -> _Array:
        """Rebuild the mesh, optionally changing settings first.

        Returns the new vertex array, which also becomes :attr:`vertices`.
        """
        settings = self.settings.replace(**changes) if changes else self.settings
        grid = build_grid(settings, self._density_for(settings))
        vertices = generate_mesh(
            grid, settings.surface_level, settings.voxel_size, workers=self.workers
        )
        self.settings = settings
        self.vertices = vertices
        logger.info(f"Generated {vertices.size // 3} vertices")
        return vertices
