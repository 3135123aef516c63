"""Dense cubic voxel storage and density population."""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np
import numpy.typing as npt

import voxelmc

logger = logging.getLogger(voxelmc.__name__)

_Array = npt.NDArray[np.floating]
DensityFunc = Callable[[int, int, int, float], float]
FieldFunc = Callable[[_Array], _Array]

#: Value returned for reads outside the grid.
EMPTY = 0.0


class VoxelGrid:
    """Cubic grid of ``size³`` float32 densities in one flat arena.

    Cell ``(x, y, z)`` lives at ``x + y*size + z*size²``.  Reads outside
    ``[0, size)`` on any axis return :data:`EMPTY` and writes there are
    ignored, so boundary cells never need special casing.

    Parameters
    ----------
    size:
        Number of samples along each axis.  ``0`` and ``1`` are allowed and
        give a grid that contains no marching-cubes cell.
    """

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"grid size must be an integer, got {size!r}")
        if size < 0:
            raise ValueError(f"grid size must be non-negative, got {size}")
        self._size = int(size)
        self._data = np.zeros(self._size ** 3, dtype=np.float32)

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> VoxelGrid:
        """Build a grid from a ``(size, size, size)`` array in ``(z, y, x)`` order.

        A flat array of ``size³`` values in index order is accepted too.
        """
        arr = np.asarray(values, dtype=np.float32)
        if arr.ndim == 1:
            size = round(arr.size ** (1.0 / 3.0))
            if size ** 3 != arr.size:
                raise ValueError(f"{arr.size} values do not form a cubic grid")
        elif arr.ndim == 3 and arr.shape[0] == arr.shape[1] == arr.shape[2]:
            size = arr.shape[0]
        else:
            raise ValueError(f"expected a cubic (n, n, n) array, got shape {arr.shape}")
        grid = cls(size)
        grid._data[:] = arr.reshape(-1)
        return grid

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def data(self) -> _Array:
        """Read-only view of the flat arena."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def as_volume(self) -> _Array:
        """Read-only ``(z, y, x)`` view of the same storage."""
        return self.data.reshape(self._size, self._size, self._size)

    def __len__(self) -> int:
        return self._data.size

    def __repr__(self) -> str:
        return f"VoxelGrid(size={self._size})"

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def in_bounds(self, x: int, y: int, z: int) -> bool:
        n = self._size
        return 0 <= x < n and 0 <= y < n and 0 <= z < n

    def index(self, x: int, y: int, z: int) -> int:
        """Linear offset of ``(x, y, z)``; no bounds check."""
        return x + y * self._size + z * self._size * self._size

    def get(self, x: int, y: int, z: int) -> float:
        """Density at ``(x, y, z)``, or :data:`EMPTY` outside the grid."""
        if not self.in_bounds(x, y, z):
            return EMPTY
        return float(self._data[self.index(x, y, z)])

    def set(self, x: int, y: int, z: int, value: float) -> None:
        """Store *value* at ``(x, y, z)``; out-of-range writes are dropped."""
        if self.in_bounds(x, y, z):
            self._data[self.index(x, y, z)] = value


# ===========================================================================
# Population
# ===========================================================================

def populate(grid: VoxelGrid, density: DensityFunc, scale: float) -> VoxelGrid:
    """Fill every sample of *grid* with ``density(x, y, z, scale)``.

    *density* must be free of side effects; it is called exactly once per
    sample, ``x`` outermost and ``z`` innermost.
    """
    n = grid.size
    for x in range(n):
        for y in range(n):
            for z in range(n):
                grid.set(x, y, z, density(x, y, z, scale))
    logger.debug(f"Populated {len(grid)} samples (scale={scale})")
    return grid


def sample_field(grid: VoxelGrid, field: FieldFunc, scale: float = 1.0) -> VoxelGrid:
    """Vectorised population from a point-array field.

    *field* receives a ``(size, size, size, 3)`` array of lattice
    coordinates multiplied by *scale*, laid out z-first, and returns the
    ``(size, size, size)`` densities.
    """
    n = grid.size
    lin = np.arange(n, dtype=np.float64) * scale
    Z, Y, X = np.meshgrid(lin, lin, lin, indexing="ij")
    p = np.stack([X, Y, Z], axis=-1)
    values = np.asarray(field(p), dtype=np.float32)
    grid._data[:] = values.reshape(-1)
    logger.debug(f"Sampled field on {len(grid)} points (scale={scale})")
    return grid
