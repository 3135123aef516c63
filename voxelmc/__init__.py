"""
voxelmc — Marching-Cubes Isosurface Extraction
==============================================

Turns a dense cubic grid of scalar densities into a triangle mesh at a
chosen surface level.

Implemented features
--------------------
- Voxel storage with safe out-of-range reads: :class:`VoxelGrid`
- Population from ``f(x, y, z, scale)`` or from point-array fields:
  :func:`populate`, :func:`sample_field`
- Stock densities: :func:`noise3d`, :func:`terrain_density`,
  :func:`sphere_density`, :func:`from_sdf`
- Extraction: :func:`classify_cube`, :func:`interpolate_edge`,
  :func:`generate_mesh`
- Mesh helpers: :func:`as_triangles`, :func:`face_normals`
- Regenerate-and-swap host: :class:`TerrainGenerator`

Quick start
-----------
::

    from voxelmc import VoxelGrid, populate, terrain_density, generate_mesh

    grid = VoxelGrid(16)
    populate(grid, terrain_density(16), scale=0.1)
    vertices = generate_mesh(grid, surface_level=0.5, voxel_size=0.5)
    triangles = vertices.reshape(-1, 3, 3)
"""

from .grid import VoxelGrid, populate, sample_field
from .tables import CUBE_CORNERS, CUBE_EDGES, TRIANGLE_TABLE, triangulation
from .marching import (
    VOXEL_SIZE,
    classify_cube,
    edge_parameter,
    interpolate_edge,
    march_cube,
    generate_mesh,
)
from .density import noise3d, terrain_density, sphere_density, from_sdf
from .mesh import as_triangles, vertex_count, triangle_count, face_normals, bounds
from .terrain import TerrainSettings, TerrainGenerator

__version__ = "0.1.0"

__all__ = [
    # Storage
    "VoxelGrid",
    "populate",
    "sample_field",

    # Tables
    "CUBE_CORNERS",
    "CUBE_EDGES",
    "TRIANGLE_TABLE",
    "triangulation",

    # Extraction
    "VOXEL_SIZE",
    "classify_cube",
    "edge_parameter",
    "interpolate_edge",
    "march_cube",
    "generate_mesh",

    # Densities
    "noise3d",
    "terrain_density",
    "sphere_density",
    "from_sdf",

    # Mesh helpers
    "as_triangles",
    "vertex_count",
    "triangle_count",
    "face_normals",
    "bounds",

    # Host
    "TerrainSettings",
    "TerrainGenerator",
]
