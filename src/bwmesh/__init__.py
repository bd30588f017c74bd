"""bwmesh - Construct triangle meshes from black and white images.

bwmesh traces the foreground boundaries of a binary raster image, optionally
simplifies them, locates holes, and hands the resulting planar straight-line
graph to the Triangle quality mesh generator.

Example:
    $ bwmesh shape.png --tol 0.5

This will create shape-mesh.npz holding the mesh (W, F) and the boundary
graph (V, E, H) it was built from.

From Python:
    >>> from bwmesh import bwmesh
    >>> W, F, V, E, H = bwmesh(mask, "Tol", 0.5)
"""

__version__ = "0.1.0"

from bwmesh.core.processor import ImageMesher, MeshResult, bwmesh  # noqa: E402

__all__ = ["ImageMesher", "MeshResult", "__version__", "bwmesh"]
