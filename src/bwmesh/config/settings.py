"""Configuration settings for bwmesh."""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bwmesh.domain import TriangulationDirective
from bwmesh.exceptions import InvalidOptionError, MissingOptionValueError, UnknownOptionError


class MeshOptions(BaseModel):
    """Named meshing options.

    Options accept both their Python names (``tol``) and the parameter names
    in CamelCase (``Tol``). Unknown names are rejected.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    tol: float = Field(
        default=0.0,
        ge=0.0,
        allow_inf_nan=False,
        alias="Tol",
        description="Douglas-Peucker tolerance; 0 disables simplification",
    )
    triangle_flags: str | TriangulationDirective | None = Field(
        default=None,
        alias="TriangleFlags",
        description="Triangulation directive; overrides the quality heuristic",
    )

    def explicit_directive(self) -> TriangulationDirective | None:
        """Get the caller-supplied directive, if any.

        An empty flag string counts as not supplied.

        Returns:
            Directive to use verbatim, or None to run the quality heuristic
        """
        if isinstance(self.triangle_flags, TriangulationDirective):
            return self.triangle_flags
        if self.triangle_flags:
            return TriangulationDirective.from_flags(self.triangle_flags)
        return None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file log)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BWMeshSettings(BaseModel):
    """Main application settings."""

    options: MeshOptions = Field(default_factory=MeshOptions)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BWMeshSettings:
    """Get default application settings."""
    return BWMeshSettings()


def option_names() -> frozenset[str]:
    """All accepted option names, Python names and CamelCase aliases."""
    names: set[str] = set()
    for name, info in MeshOptions.model_fields.items():
        names.add(name)
        if info.alias:
            names.add(info.alias)
    return frozenset(names)


def parse_options(params: Mapping[str, Any] | None = None, **kwargs: Any) -> MeshOptions:
    """Validate named options into a MeshOptions instance.

    Args:
        params: Mapping of option names to values
        **kwargs: Further options, merged over params

    Returns:
        Validated options

    Raises:
        UnknownOptionError: If a name is not a recognized option
        InvalidOptionError: If a value fails validation
    """
    merged = dict(params or {})
    merged.update(kwargs)

    known = option_names()
    for name in merged:
        if name not in known:
            raise UnknownOptionError(name)

    try:
        return MeshOptions.model_validate(merged)
    except ValidationError as e:
        error = e.errors()[0]
        location = str(error["loc"][0]) if error["loc"] else "options"
        raise InvalidOptionError(location, error["msg"]) from e


def parse_parameter_pairs(args: Sequence[Any]) -> MeshOptions:
    """Validate a flat ``name, value, name, value, ...`` sequence.

    Names are checked in order; an unknown name fails before its value is
    looked at, and a trailing name without a value fails as missing.

    Args:
        args: Alternating option names and values

    Returns:
        Validated options

    Raises:
        UnknownOptionError: If a name is not a recognized option
        MissingOptionValueError: If the last name has no value
        InvalidOptionError: If a value fails validation
    """
    known = option_names()
    params: dict[str, Any] = {}
    i = 0
    while i < len(args):
        name = args[i]
        if not isinstance(name, str) or name not in known:
            raise UnknownOptionError(str(name))
        if i + 1 >= len(args):
            raise MissingOptionValueError(name)
        params[name] = args[i + 1]
        i += 2
    return parse_options(params)
