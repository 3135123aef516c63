"""Render a marching-cubes terrain mesh to a PNG.

Builds a noise terrain density grid, extracts its isosurface with
:func:`voxelmc.generate_mesh` and draws the triangles with matplotlib's
3-D axes, shaded from per-face normals.

Usage::

    python scripts/terrain_preview.py                     # saves terrain.png
    python scripts/terrain_preview.py --out my_file.png
    python scripts/terrain_preview.py --size 32 --level 0.45 --scale 0.2
    python scripts/terrain_preview.py --workers 4 -v

Requirements: numpy, matplotlib
    pip install matplotlib
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from voxelmc import TerrainGenerator, TerrainSettings, as_triangles, bounds, face_normals
from voxelmc.utils import configure_logging


_FACE_COLOR = np.array([0.3, 0.7, 0.3])   # grass green
_LIGHT_DIR  = np.array([0.577, 0.577, 0.577])
_VIEW_ELEV  = 30
_VIEW_AZIM  = 45


def render_mesh(vertices: np.ndarray, out_path: str, title: str = "") -> None:
    try:
        import matplotlib.pyplot as plt
        from mpl_toolkits.mplot3d.art3d import Poly3DCollection
    except ImportError:
        raise SystemExit(
            "matplotlib is required for rendering.\n"
            "  pip install matplotlib"
        )

    fig = plt.figure(figsize=(6.0, 6.0), facecolor="#1a1a33")
    ax = fig.add_subplot(1, 1, 1, projection="3d")
    ax.set_facecolor("#1a1a33")
    ax.set_axis_off()

    extent = bounds(vertices)
    if extent is None:
        ax.text2D(0.5, 0.5, "no surface", ha="center", va="center",
                  color="gray", transform=ax.transAxes)
    else:
        tris = as_triangles(vertices)[..., [0, 2, 1]]   # y-up terrain -> z-up axes
        diffuse = np.clip(face_normals(vertices) @ _LIGHT_DIR, 0.0, 1.0)
        shade = 0.3 + 0.7 * diffuse               # ambient + diffuse
        face_colors = np.outer(shade, _FACE_COLOR)
        mesh = Poly3DCollection(tris, facecolors=face_colors,
                                edgecolors="none", alpha=1.0)
        ax.add_collection3d(mesh)

        lo, hi = extent
        ax.set_xlim(lo[0], hi[0]); ax.set_ylim(lo[2], hi[2]); ax.set_zlim(lo[1], hi[1])
        ax.set_box_aspect([1, 1, 1])
        ax.view_init(elev=_VIEW_ELEV, azim=_VIEW_AZIM)

    if title:
        ax.set_title(title, color="white", fontsize=9)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    defaults = TerrainSettings()
    parser = argparse.ArgumentParser(
        description="Extract a noise terrain isosurface and save it as a PNG."
    )
    parser.add_argument("--out",        default="terrain.png", help="Output PNG path")
    parser.add_argument("--size",       type=int, default=defaults.grid_size,
                        help=f"Grid samples per axis (default {defaults.grid_size})")
    parser.add_argument("--voxel-size", type=float, default=defaults.voxel_size,
                        help=f"World size of one voxel (default {defaults.voxel_size})")
    parser.add_argument("--scale",      type=float, default=defaults.scale,
                        help=f"Noise frequency (default {defaults.scale})")
    parser.add_argument("--level",      type=float, default=defaults.surface_level,
                        help=f"Surface level (default {defaults.surface_level})")
    parser.add_argument("--workers",    type=int, default=1,
                        help="Extraction processes (default 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = TerrainSettings(
            grid_size=args.size,
            voxel_size=args.voxel_size,
            scale=args.scale,
            surface_level=args.level,
        )
    except ValueError as exc:
        parser.error(str(exc))

    terrain = TerrainGenerator(settings, workers=args.workers)
    vertices = terrain.update()
    render_mesh(
        vertices, args.out,
        title=f"size={settings.grid_size} scale={settings.scale} level={settings.surface_level}",
    )


if __name__ == "__main__":
    main()
