"""Unit tests for the image and mesh I/O layer.

Tests for ImageReader and MeshWriter.
"""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from bwmesh.domain import PSLG, Mesh
from bwmesh.exceptions import ImageLoadError, MeshWriteError
from bwmesh.io import ImageReader, MeshWriter, read_mask


@pytest.fixture
def sample_mesh() -> Mesh:
    """Unit square split into two triangles."""
    return Mesh(
        vertices=np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]),
        triangles=np.array([[0, 1, 2], [0, 2, 3]]),
    )


@pytest.fixture
def sample_pslg() -> PSLG:
    """Square boundary with one hole point."""
    return PSLG(
        vertices=np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]),
        edges=np.array([[0, 1], [1, 2], [2, 3], [3, 0]]),
        holes=np.array([[0.25, 0.5]]),
    )


class TestImageReader:
    """Tests for ImageReader class."""

    def test_init(self) -> None:
        """Test ImageReader initialization."""
        path = Path("shape.png")
        reader = ImageReader(path)
        assert reader._image_path == path
        assert reader._mask is None

    def test_load_nonexistent_file(self) -> None:
        """Test loading a nonexistent file raises ImageLoadError."""
        reader = ImageReader(Path("nonexistent.png"))
        with pytest.raises(ImageLoadError, match="file not found"):
            reader.load()

    def test_mask_before_load(self) -> None:
        """Test accessing mask before loading raises RuntimeError."""
        reader = ImageReader(Path("shape.png"))
        with pytest.raises(RuntimeError, match="Image not loaded"):
            _ = reader.mask

    def test_channel_before_load(self) -> None:
        """Test accessing channel before loading raises RuntimeError."""
        reader = ImageReader(Path("shape.png"))
        with pytest.raises(RuntimeError, match="Image not loaded"):
            _ = reader.channel

    def test_grayscale_uses_luminance(self, tmp_path: Path) -> None:
        """Test that images without alpha use their luminance."""
        pixels = np.zeros((4, 5), dtype=np.uint8)
        pixels[1:3, 1:4] = 255
        path = tmp_path / "gray.png"
        Image.fromarray(pixels).save(path)

        with ImageReader(path) as reader:
            assert reader.channel == "luminance"
            assert reader.mode == "L"
            assert reader.size == (4, 5)
            np.testing.assert_allclose(reader.mask, pixels / 255.0)

    def test_rgb_converted_to_luminance(self, tmp_path: Path) -> None:
        """Test that color images are reduced to luminance in [0, 1]."""
        pixels = np.zeros((3, 3, 3), dtype=np.uint8)
        pixels[1, 1] = [255, 255, 255]
        path = tmp_path / "rgb.png"
        Image.fromarray(pixels).save(path)

        mask = read_mask(path)
        assert mask.shape == (3, 3)
        assert mask[1, 1] == pytest.approx(1.0)
        assert mask[0, 0] == 0.0

    def test_alpha_channel_preferred(self, tmp_path: Path) -> None:
        """Test that the alpha channel is the mask when present."""
        pixels = np.zeros((4, 4, 4), dtype=np.uint8)
        # Opaque black block on a transparent white background
        pixels[..., :3] = 255
        pixels[1:3, 1:3] = [0, 0, 0, 255]
        path = tmp_path / "alpha.png"
        Image.fromarray(pixels).save(path)

        with ImageReader(path) as reader:
            assert reader.channel == "alpha"
            expected = np.zeros((4, 4))
            expected[1:3, 1:3] = 1.0
            np.testing.assert_allclose(reader.mask, expected)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        """Test that a non-image file raises ImageLoadError."""
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image")
        with pytest.raises(ImageLoadError):
            read_mask(path)

    def test_close_releases_mask(self, tmp_path: Path) -> None:
        """Test that closing drops the decoded data."""
        path = tmp_path / "gray.png"
        Image.fromarray(np.zeros((2, 2), dtype=np.uint8)).save(path)

        reader = ImageReader(path)
        reader.load()
        reader.close()
        with pytest.raises(RuntimeError):
            _ = reader.mask


class TestMeshWriter:
    """Tests for MeshWriter class."""

    def test_get_mesh_path(self) -> None:
        """Test output path naming convention."""
        assert MeshWriter.get_mesh_path(Path("/data/shape.png")) == Path("/data/shape-mesh.npz")
        assert MeshWriter.get_mesh_path(Path("logo.bmp"), ".off") == Path("logo-mesh.off")

    def test_unsupported_suffix(self) -> None:
        """Test that unknown output formats are rejected up front."""
        with pytest.raises(MeshWriteError, match="unsupported format"):
            MeshWriter(Path("mesh.stl"))

    def test_write_npz(self, tmp_path: Path, sample_mesh: Mesh, sample_pslg: PSLG) -> None:
        """Test that all five arrays are stored."""
        path = tmp_path / "shape-mesh.npz"
        MeshWriter(path).write(sample_mesh, sample_pslg)

        with np.load(path) as data:
            assert set(data.files) == {"W", "F", "V", "E", "H"}
            np.testing.assert_array_equal(data["F"], sample_mesh.triangles)
            np.testing.assert_array_equal(data["E"], sample_pslg.edges)
            np.testing.assert_allclose(data["H"], sample_pslg.holes)

    def test_write_off(self, tmp_path: Path, sample_mesh: Mesh, sample_pslg: PSLG) -> None:
        """Test OFF output layout."""
        path = tmp_path / "shape.off"
        MeshWriter(path).write(sample_mesh, sample_pslg)

        lines = path.read_text().splitlines()
        assert lines[0] == "OFF"
        assert lines[1] == "4 2 0"
        assert [float(v) for v in lines[4].split()] == [1.0, 1.0, 0.0]
        assert lines[6] == "3 0 1 2"
        assert lines[7] == "3 0 2 3"

    def test_write_poly(self, tmp_path: Path, sample_pslg: PSLG) -> None:
        """Test Triangle .poly output with 1-based indices."""
        path = tmp_path / "shape.poly"
        writer = MeshWriter(path)
        assert not writer.needs_mesh
        writer.write(None, sample_pslg)

        lines = path.read_text().splitlines()
        assert lines[0] == "4 2 0 0"
        assert lines[5] == "4 0"
        assert lines[6] == "1 1 2"
        assert lines[9] == "4 4 1"
        assert lines[10] == "1"
        assert [float(v) for v in lines[11].split()] == [1.0, 0.25, 0.5]

    def test_mesh_required_for_npz(self, tmp_path: Path, sample_pslg: PSLG) -> None:
        """Test that mesh formats refuse to write without a mesh."""
        with pytest.raises(MeshWriteError, match="no mesh"):
            MeshWriter(tmp_path / "shape.npz").write(None, sample_pslg)

    def test_write_failure_wrapped(self, tmp_path: Path, sample_mesh: Mesh, sample_pslg: PSLG) -> None:
        """Test that file system errors become MeshWriteError."""
        path = tmp_path / "missing-dir" / "shape.off"
        with pytest.raises(MeshWriteError):
            MeshWriter(path).write(sample_mesh, sample_pslg)
