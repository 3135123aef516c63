"""Marching-cubes isosurface extraction over a :class:`~voxelmc.grid.VoxelGrid`.

Pipeline per cell (origin ``(x, y, z)`` with all eight corners in range):

1. :func:`classify_cube` samples the eight corners and builds the 8-bit
   configuration; bit *i* is set when corner *i* is strictly above the
   surface level.
2. Configurations ``0`` and ``255`` are skipped; the surface does not cross
   the cell.
3. :func:`~voxelmc.tables.triangulation` gives the crossed edges, three per
   triangle.
4. :func:`interpolate_edge` places one vertex on each listed edge.

The output is a non-indexed mesh: a flat float32 array ``[x0, y0, z0, x1,
...]`` where every nine values form one triangle.  Shared vertices are
duplicated and no normals are produced.

Cells are visited with ``x`` outermost and ``z`` innermost, so identical
grids and surface levels always give byte-identical output, including when
the work is split across processes with ``workers > 1``.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import List, Tuple

import numpy as np
import numpy.typing as npt

import voxelmc
from .grid import VoxelGrid
from .tables import CUBE_CORNERS, CUBE_EDGES, MAX_TRIANGLES_PER_CELL, triangulation

logger = logging.getLogger(voxelmc.__name__)

_Array = npt.NDArray[np.floating]

#: World-space edge length of one voxel.
VOXEL_SIZE = 0.5

#: Corner densities closer than this are treated as equal (midpoint vertex).
INTERPOLATION_EPSILON = 0.001

_FLOATS_PER_CELL = MAX_TRIANGLES_PER_CELL * 9

__all__ = [
    "VOXEL_SIZE",
    "INTERPOLATION_EPSILON",
    "classify_cube",
    "edge_parameter",
    "interpolate_edge",
    "march_cube",
    "generate_mesh",
]


# ===========================================================================
# Per-cell primitives
# ===========================================================================

def classify_cube(
    grid: VoxelGrid, x: int, y: int, z: int, surface_level: float
) -> Tuple[int, Tuple[float, ...]]:
    """Return ``(configuration, corner_values)`` for the cell at ``(x, y, z)``.

    A corner exactly at *surface_level* counts as outside.
    """
    config = 0
    values = []
    for i, (dx, dy, dz) in enumerate(CUBE_CORNERS):
        value = grid.get(x + dx, y + dy, z + dz)
        values.append(value)
        if value > surface_level:
            config |= 1 << i
    return config, tuple(values)


def edge_parameter(v1: float, v2: float, surface_level: float) -> float:
    """Position of the level crossing between densities *v1* and *v2*.

    Returns ``0.5`` when the densities are within
    :data:`INTERPOLATION_EPSILON`, otherwise the linear estimate clamped to
    ``[0, 1]``.  NaN is passed through untouched.
    """
    if abs(v1 - v2) <= INTERPOLATION_EPSILON:
        return 0.5
    t = (surface_level - v1) / (v2 - v1)
    if t < 0.0:
        t = 0.0
    elif t > 1.0:
        t = 1.0
    return t


def interpolate_edge(
    grid: VoxelGrid,
    x: int,
    y: int,
    z: int,
    edge: int,
    surface_level: float,
    voxel_size: float = VOXEL_SIZE,
) -> Tuple[float, float, float]:
    """World-space vertex where the surface crosses *edge* of cell ``(x, y, z)``.

    The result always lies on the segment between the edge's two corners.
    """
    c1, c2 = CUBE_EDGES[edge]
    ax, ay, az = CUBE_CORNERS[c1]
    bx, by, bz = CUBE_CORNERS[c2]
    x1, y1, z1 = x + ax, y + ay, z + az
    x2, y2, z2 = x + bx, y + by, z + bz

    t = edge_parameter(grid.get(x1, y1, z1), grid.get(x2, y2, z2), surface_level)

    wx1, wy1, wz1 = x1 * voxel_size, y1 * voxel_size, z1 * voxel_size
    wx2, wy2, wz2 = x2 * voxel_size, y2 * voxel_size, z2 * voxel_size
    return (
        wx1 + (wx2 - wx1) * t,
        wy1 + (wy2 - wy1) * t,
        wz1 + (wz2 - wz1) * t,
    )


def march_cube(
    grid: VoxelGrid,
    x: int,
    y: int,
    z: int,
    surface_level: float,
    voxel_size: float,
    out: _Array,
    offset: int,
) -> int:
    """Write the triangles of one cell into *out* starting at *offset*.

    Returns the offset just past the last written float.  *out* must have
    room for ``MAX_TRIANGLES_PER_CELL * 9`` more values.
    """
    config, _ = classify_cube(grid, x, y, z, surface_level)
    if config == 0 or config == 255:
        return offset

    for edge in triangulation(config):
        out[offset:offset + 3] = interpolate_edge(
            grid, x, y, z, edge, surface_level, voxel_size
        )
        offset += 3
    return offset


# ===========================================================================
# Whole-grid extraction
# ===========================================================================

def _extract_slab(
    grid: VoxelGrid,
    x_start: int,
    x_stop: int,
    surface_level: float,
    voxel_size: float,
) -> _Array:
    """Extract the cells with origin ``x`` in ``[x_start, x_stop)``."""
    cells = grid.size - 1
    n_cells = max(x_stop - x_start, 0) * cells * cells
    out = np.empty(n_cells * _FLOATS_PER_CELL, dtype=np.float32)

    offset = 0
    for x in range(x_start, x_stop):
        for y in range(cells):
            for z in range(cells):
                offset = march_cube(grid, x, y, z, surface_level, voxel_size, out, offset)
    return out[:offset].copy()


def _slab_bounds(cells: int, workers: int) -> List[Tuple[int, int]]:
    """Split ``range(cells)`` into at most *workers* contiguous runs."""
    workers = min(workers, cells)
    step, extra = divmod(cells, workers)
    bounds = []
    start = 0
    for i in range(workers):
        stop = start + step + (1 if i < extra else 0)
        bounds.append((start, stop))
        start = stop
    return bounds


def generate_mesh(
    grid: VoxelGrid,
    surface_level: float,
    voxel_size: float = VOXEL_SIZE,
    workers: int = 1,
) -> _Array:
    """Extract the isosurface of *grid* at *surface_level*.

    Parameters
    ----------
    grid:
        Populated voxel grid; it is only read.
    surface_level:
        Threshold; corners strictly above it are inside.
    voxel_size:
        World-space length of one grid step.
    workers:
        Number of processes.  ``1`` runs in the calling process; larger
        values split the cells into x-slabs whose results are concatenated
        in slab order, giving the same output as the serial pass.

    Returns
    -------
    numpy.ndarray
        Flat float32 array of length ``3 * n_vertices`` (a multiple of 9).
        Empty when ``grid.size < 2`` or the surface misses every cell.

    Notes
    -----
    The output buffer is reserved for the worst case of
    ``MAX_TRIANGLES_PER_CELL`` triangles in every cell, i.e.
    ``(size - 1)**3 * 36`` float32 values (about 2.4 GB at ``size = 256``),
    and trimmed once at the end.  With ``workers > 1`` each process reserves
    the share for its own slab, and the pickled grid is copied per process.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    cells = grid.size - 1
    if cells < 1:
        logger.debug(f"Grid of size {grid.size} has no cells")
        return np.empty(0, dtype=np.float32)

    if workers == 1 or cells == 1:
        vertices = _extract_slab(grid, 0, cells, surface_level, voxel_size)
    else:
        bounds = _slab_bounds(cells, workers)
        with ProcessPoolExecutor(max_workers=len(bounds)) as pool:
            futures = [
                pool.submit(_extract_slab, grid, start, stop, surface_level, voxel_size)
                for start, stop in bounds
            ]
            vertices = np.concatenate([f.result() for f in futures])

    logger.debug(
        f"Marched {cells ** 3} cells at level {surface_level}: "
        f"{vertices.size // 3} vertices"
    )
    return vertices
