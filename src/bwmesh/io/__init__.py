"""Image and mesh I/O layer for bwmesh.

This module handles decoding image files with Pillow and writing meshing
results. It keeps file formats out of the meshing pipeline.

Key responsibilities:
- Load images and select the mask channel (alpha or luminance)
- Write meshes and boundary graphs (.npz, .off, .poly)

Key classes:
- ImageReader: Load image files as masks
- MeshWriter: Save meshing results
"""

from bwmesh.io.reader import ImageReader, read_mask
from bwmesh.io.writer import MeshWriter

__all__ = [
    "ImageReader",
    "MeshWriter",
    "read_mask",
]
