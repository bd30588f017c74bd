"""Exception hierarchy for bwmesh."""


class BWMeshError(Exception):
    """Base exception for all bwmesh errors."""

    pass


class ConfigurationError(BWMeshError):
    """Errors in meshing options, raised before any image processing."""

    pass


class UnknownOptionError(ConfigurationError):
    """An option name that bwmesh does not recognize."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unsupported parameter: {name}")


class MissingOptionValueError(ConfigurationError):
    """An option name given without a value."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing value for parameter: {name}")


class InvalidOptionError(ConfigurationError):
    """An option value that fails validation."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid value for parameter '{name}': {reason}")


class ImageError(BWMeshError):
    """Errors related to the input image."""

    pass


class ImageLoadError(ImageError):
    """Error loading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class ImageFormatError(ImageError):
    """Image data that cannot be interpreted as a binary raster."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid image data: {details}")


class GeometryError(BWMeshError):
    """Errors in geometric calculations."""

    pass


class DegenerateGeometryError(GeometryError):
    """Input geometry too degenerate to mesh."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class HoleLocationError(DegenerateGeometryError):
    """No interior point could be found for a hole loop."""

    def __init__(self, loop_index: int, reason: str) -> None:
        self.loop_index = loop_index
        self.reason = reason
        super().__init__(
            f"Could not place hole point for loop {loop_index}: {reason} "
            "(try a lower Tol)"
        )


class EmptyBoundaryError(DegenerateGeometryError):
    """The boundary graph has no edges, so there is nothing to triangulate."""

    def __init__(self) -> None:
        super().__init__("Boundary has no edges; nothing to triangulate")


class MeshWriteError(BWMeshError):
    """Error writing mesh output."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write mesh '{path}': {reason}")
