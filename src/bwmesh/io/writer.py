"""Mesh writer for saving meshing results.

Supported formats, chosen by file extension:
- .npz: all five arrays (W, F, V, E, H) in a numpy archive
- .off: the triangle mesh as an Object File Format surface (z = 0)
- .poly: the boundary graph in Triangle's .poly format
"""

from pathlib import Path

import numpy as np

from bwmesh.domain import PSLG, Mesh
from bwmesh.exceptions import MeshWriteError

SUPPORTED_SUFFIXES = (".npz", ".off", ".poly")


def write_npz(path: Path, mesh: Mesh, pslg: PSLG) -> None:
    """Write mesh and boundary graph arrays to a numpy archive.

    Args:
        path: Output .npz path
        mesh: Triangle mesh
        pslg: Boundary graph the mesh was built from
    """
    np.savez(
        path,
        W=mesh.vertices,
        F=mesh.triangles,
        V=pslg.vertices,
        E=pslg.edges,
        H=pslg.holes,
    )


def write_off(path: Path, mesh: Mesh) -> None:
    """Write a triangle mesh in OFF format.

    Args:
        path: Output .off path
        mesh: Triangle mesh
    """
    lines = ["OFF", f"{mesh.num_vertices} {mesh.num_triangles} 0"]
    lines.extend(f"{x:.17g} {y:.17g} 0" for x, y in mesh.vertices)
    lines.extend(f"3 {a} {b} {c}" for a, b, c in mesh.triangles)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def write_poly(path: Path, pslg: PSLG) -> None:
    """Write a boundary graph in Triangle's .poly format (1-based indices).

    Args:
        path: Output .poly path
        pslg: Boundary graph
    """
    lines = [f"{pslg.num_vertices} 2 0 0"]
    lines.extend(f"{i + 1} {x:.17g} {y:.17g}" for i, (x, y) in enumerate(pslg.vertices))
    lines.append(f"{pslg.num_edges} 0")
    lines.extend(f"{i + 1} {a + 1} {b + 1}" for i, (a, b) in enumerate(pslg.edges))
    lines.append(f"{pslg.num_holes}")
    lines.extend(f"{i + 1} {x:.17g} {y:.17g}" for i, (x, y) in enumerate(pslg.holes))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


class MeshWriter:
    """Writes meshing results, choosing the format from the file extension.

    Example:
        writer = MeshWriter(Path("shape-mesh.npz"))
        writer.write(mesh, pslg)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the mesh writer.

        Args:
            output_path: Path where the result will be saved

        Raises:
            MeshWriteError: If the extension is not supported
        """
        self._output_path = Path(output_path)
        suffix = self._output_path.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise MeshWriteError(
                str(self._output_path),
                f"unsupported format '{suffix}' (use one of {', '.join(SUPPORTED_SUFFIXES)})",
            )
        self._suffix = suffix

    @property
    def output_path(self) -> Path:
        """Path the result is written to."""
        return self._output_path

    @property
    def needs_mesh(self) -> bool:
        """True if the format stores the triangle mesh."""
        return self._suffix != ".poly"

    def write(self, mesh: Mesh | None, pslg: PSLG) -> None:
        """Write the result.

        Args:
            mesh: Triangle mesh (may be None only for .poly output)
            pslg: Boundary graph

        Raises:
            MeshWriteError: If the file cannot be written or the mesh is
                missing for a format that needs it
        """
        if mesh is None and self.needs_mesh:
            raise MeshWriteError(str(self._output_path), "no mesh to write")

        try:
            if self._suffix == ".npz":
                write_npz(self._output_path, mesh, pslg)  # type: ignore[arg-type]
            elif self._suffix == ".off":
                write_off(self._output_path, mesh)  # type: ignore[arg-type]
            else:
                write_poly(self._output_path, pslg)
        except OSError as e:
            raise MeshWriteError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_mesh_path(input_path: Path, suffix: str = ".npz") -> Path:
        """Generate output path with the mesh naming convention.

        Converts: shape.png -> shape-mesh.npz

        Args:
            input_path: Original image file path
            suffix: Output extension

        Returns:
            Path with -mesh suffix and the output extension
        """
        return input_path.parent / f"{input_path.stem}-mesh{suffix}"
