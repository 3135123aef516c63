"""Helpers for the flat, non-indexed vertex arrays produced by extraction."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

_Array = npt.NDArray[np.floating]

__all__ = ["as_triangles", "vertex_count", "triangle_count", "face_normals", "bounds"]


def as_triangles(vertices: _Array) -> _Array:
    """View a flat vertex array as ``(n_triangles, 3, 3)``."""
    v = np.asarray(vertices)
    if v.ndim != 1 or v.size % 9:
        raise ValueError(
            f"expected a flat array whose length is a multiple of 9, got shape {v.shape}"
        )
    return v.reshape(-1, 3, 3)


def vertex_count(vertices: _Array) -> int:
    return np.asarray(vertices).size // 3


def triangle_count(vertices: _Array) -> int:
    return np.asarray(vertices).size // 9


def face_normals(vertices: _Array) -> _Array:
    """Unit normal of every triangle, shape ``(n_triangles, 3)``.

    Normals follow the table's winding order.  Degenerate triangles get a
    zero vector.
    """
    tris = as_triangles(vertices).astype(np.float64)
    e1 = tris[:, 1] - tris[:, 0]
    e2 = tris[:, 2] - tris[:, 0]
    norms = np.cross(e1, e2)
    nlen = np.linalg.norm(norms, axis=1, keepdims=True)
    return norms / np.where(nlen > 0, nlen, 1.0)


def bounds(vertices: _Array) -> Optional[Tuple[_Array, _Array]]:
    """``(min_xyz, max_xyz)`` of the mesh, or ``None`` when it is empty."""
    v = np.asarray(vertices).reshape(-1, 3)
    if len(v) == 0:
        return None
    return v.min(axis=0), v.max(axis=0)
