"""Smoke tests for the bwmesh command line."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image
from typer.testing import CliRunner

from bwmesh import __version__
from bwmesh.cli.app import app

runner = CliRunner()


@pytest.fixture
def ring_png(tmp_path: Path) -> Path:
    """Grayscale PNG of a white ring on black."""
    pixels = np.zeros((12, 12), dtype=np.uint8)
    pixels[1:11, 1:11] = 255
    pixels[4:8, 4:8] = 0
    path = tmp_path / "ring.png"
    Image.fromarray(pixels).save(path)
    return path


class TestCli:
    """Tests for the bwmesh command."""

    def test_version(self) -> None:
        """Test --version output."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_default_output_path(self, ring_png: Path) -> None:
        """Test that the mesh is written next to the image by default."""
        result = runner.invoke(app, [str(ring_png), "-q"])

        assert result.exit_code == 0, result.output
        output = ring_png.parent / "ring-mesh.npz"
        assert output.exists()
        with np.load(output) as data:
            assert len(data["H"]) == 1
            assert len(data["F"]) > 0

    def test_off_output(self, ring_png: Path, tmp_path: Path) -> None:
        """Test writing an OFF file with explicit options."""
        output = tmp_path / "ring.off"
        result = runner.invoke(
            app, [str(ring_png), "-o", str(output), "--tol", "0.5", "--triangle-flags", "q25"]
        )

        assert result.exit_code == 0, result.output
        assert output.read_text().startswith("OFF\n")
        assert "pq25Q" in result.output

    def test_dry_run_poly(self, ring_png: Path, tmp_path: Path) -> None:
        """Test that --dry-run writes only the boundary graph."""
        output = tmp_path / "ring.poly"
        result = runner.invoke(app, [str(ring_png), "-o", str(output), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "Dry run complete" in result.output
        lines = output.read_text().splitlines()
        assert lines[-2] == "1"

    def test_dry_run_without_poly_writes_nothing(self, ring_png: Path) -> None:
        """Test that --dry-run with a mesh format does not write a file."""
        result = runner.invoke(app, [str(ring_png), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert not (ring_png.parent / "ring-mesh.npz").exists()

    def test_missing_input(self, tmp_path: Path) -> None:
        """Test that a missing image exits with code 1."""
        result = runner.invoke(app, [str(tmp_path / "nope.png")])
        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_verbose_and_quiet(self, ring_png: Path) -> None:
        """Test that --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(ring_png), "-v", "-q"])
        assert result.exit_code == 1

    def test_blank_image_fails(self, tmp_path: Path) -> None:
        """Test that an image with nothing to mesh exits with code 1."""
        path = tmp_path / "blank.png"
        Image.fromarray(np.zeros((5, 5), dtype=np.uint8)).save(path)

        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 1
        assert "nothing to triangulate" in result.output

    def test_unsupported_output(self, ring_png: Path, tmp_path: Path) -> None:
        """Test that an unknown output format exits with code 1."""
        result = runner.invoke(app, [str(ring_png), "-o", str(tmp_path / "ring.stl")])
        assert result.exit_code == 1
        assert "Could not save mesh" in result.output

    def test_negative_tolerance_rejected(self, ring_png: Path) -> None:
        """Test that typer rejects a negative tolerance."""
        result = runner.invoke(app, [str(ring_png), "--tol", "-1"])
        assert result.exit_code != 0
