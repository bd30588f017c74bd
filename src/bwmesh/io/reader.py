"""Image reader for loading black and white masks.

This module provides the ImageReader class for decoding image files into
the 2D float arrays the meshing pipeline consumes.
"""

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from bwmesh.exceptions import ImageLoadError

# Pillow modes that carry an alpha channel
_ALPHA_MODES = frozenset({"RGBA", "LA", "PA", "RGBa", "La"})


class ImageReader:
    """Loads image files as masks with values in [0, 1].

    When the image carries an alpha channel (or palette transparency) the
    alpha channel is the mask; otherwise the luminance channel is.

    Example:
        reader = ImageReader(Path("shape.png"))
        reader.load()
        mask = reader.mask
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = Path(image_path)
        self._mask: np.ndarray | None = None
        self._channel: str | None = None
        self._mode: str | None = None

    def load(self) -> None:
        """Decode the image file.

        Raises:
            ImageLoadError: If the file does not exist or cannot be decoded
        """
        if not self._image_path.exists():
            raise ImageLoadError(str(self._image_path), "file not found")

        try:
            with Image.open(self._image_path) as image:
                self._mode = image.mode
                if image.mode in _ALPHA_MODES or "transparency" in image.info:
                    channel = image.convert("RGBA").getchannel("A")
                    self._channel = "alpha"
                else:
                    channel = image.convert("L")
                    self._channel = "luminance"
                self._mask = np.asarray(channel, dtype=float) / 255.0
        except (UnidentifiedImageError, OSError) as e:
            raise ImageLoadError(str(self._image_path), str(e)) from e

    @property
    def mask(self) -> np.ndarray:
        """Return the decoded mask.

        Returns:
            (H, W) float array with values in [0, 1]

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        if self._mask is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._mask

    @property
    def channel(self) -> str:
        """Return which channel the mask came from ("alpha" or "luminance").

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        if self._channel is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._channel

    @property
    def mode(self) -> str:
        """Return the Pillow mode of the source image.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        if self._mode is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._mode

    @property
    def size(self) -> tuple[int, int]:
        """Return (height, width) of the mask.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        height, width = self.mask.shape
        return int(height), int(width)

    def close(self) -> None:
        """Release the decoded mask."""
        self._mask = None
        self._channel = None
        self._mode = None

    def __enter__(self) -> "ImageReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def read_mask(image_path: Path) -> np.ndarray:
    """Load an image file as a mask.

    Args:
        image_path: Path to the image file

    Returns:
        (H, W) float array with values in [0, 1]

    Raises:
        ImageLoadError: If the file does not exist or cannot be decoded
    """
    with ImageReader(image_path) as reader:
        return reader.mask
