"""Stock density functions for :func:`voxelmc.grid.populate`.

Every function here follows the ``f(x, y, z, scale) -> float`` contract:
it is evaluated on integer lattice coordinates and must not have side
effects.  Densities are "solid above the surface level": larger values
lie inside the extracted surface.
"""

from __future__ import annotations

from math import cos, sin, sqrt
from typing import Callable, Sequence

import numpy as np
import numpy.typing as npt

from .grid import DensityFunc

_Array = npt.NDArray[np.floating]

__all__ = ["noise3d", "terrain_density", "sphere_density", "from_sdf"]


def noise3d(x: float, y: float, z: float, scale: float) -> float:
    """Three-octave trigonometric noise, roughly in ``[0, 1]``."""
    nx = x * scale
    ny = y * scale
    nz = z * scale
    octaves = (
        sin(nx) * cos(ny) * sin(nz)
        + sin(nx * 2) * cos(ny * 2) * sin(nz * 2) * 0.5
        + sin(nx * 4) * cos(ny * 4) * sin(nz * 4) * 0.25
    )
    return octaves * 0.5 + 0.5


def terrain_density(grid_size: int) -> DensityFunc:
    """Noise blended with a ground plane that is denser near ``y = 0``."""

    def density(x: int, y: int, z: int, scale: float) -> float:
        ground_height = (grid_size - y) / grid_size
        return (noise3d(x, y, z, scale) + ground_height) * 0.5

    return density


def sphere_density(center: Sequence[float], radius: float) -> DensityFunc:
    """Ball of *radius* around *center* (grid units): ``radius - |p - center|``.

    *scale* is ignored.
    """
    cx, cy, cz = (float(c) for c in center)

    def density(x: int, y: int, z: int, scale: float) -> float:
        dx, dy, dz = x - cx, y - cy, z - cz
        return radius - sqrt(dx * dx + dy * dy + dz * dz)

    return density


def from_sdf(func: Callable[[_Array], _Array]) -> DensityFunc:
    """Adapt a signed distance function into a density.

    *func* takes a ``(..., 3)`` point array and returns signed distances,
    negative inside.  The lattice point is multiplied by *scale* before the
    call and the distance is negated, so the surface sits at level ``0``.
    """

    def density(x: int, y: int, z: int, scale: float) -> float:
        p = np.array([[x * scale, y * scale, z * scale]], dtype=np.float64)
        return -float(np.asarray(func(p)).reshape(-1)[0])

    return density
