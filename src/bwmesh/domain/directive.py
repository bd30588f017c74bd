"""Triangulation directive passed to the quality mesh generator.

A directive either carries structured quality constraints (minimum angle,
maximum triangle area) or a free-form Triangle switch string supplied by the
caller. Both render to the switch string Triangle expects.
"""

import re
from dataclasses import dataclass
from typing import Any

# Dash opening a switch group in command-line style flags ("-q30 -a0.5")
_LEADING_DASH = re.compile(r"(^|\s)-")


@dataclass(frozen=True)
class TriangulationDirective:
    """Quality constraints for a triangulation request.

    Attributes:
        min_angle: Minimum triangle angle in degrees (None = no quality bound)
        max_area: Maximum triangle area (None = unconstrained)
        quiet: Suppress triangulator console output
        flags: Free-form Triangle switches; overrides min_angle and max_area
    """

    min_angle: float | None = None
    max_area: float | None = None
    quiet: bool = True
    flags: str | None = None

    @classmethod
    def from_flags(cls, flags: str, quiet: bool = True) -> "TriangulationDirective":
        """Wrap a caller-supplied switch string.

        Both Triangle's own style ("pq30a0.5") and the command-line style
        with dashes ("-q30 -a0.5") are accepted.

        Args:
            flags: Triangle switches
            quiet: Whether to append the quiet switch

        Returns:
            Free-form directive
        """
        return cls(flags=flags, quiet=quiet)

    def is_free_form(self) -> bool:
        """Check if this directive wraps a caller-supplied switch string.

        Returns:
            True if flags were given verbatim
        """
        return self.flags is not None

    def to_switches(self) -> str:
        """Render the directive as a Triangle switch string.

        The PSLG switch ``p`` is always present so boundary segments and
        holes are honored. ``Q`` is appended when quiet.

        Returns:
            Switch string such as "pq30a0.50000000000000000Q"
        """
        if self.flags is not None:
            switches = "".join(_LEADING_DASH.sub(r"\1", self.flags).split())
        else:
            switches = ""
            if self.min_angle is not None:
                switches += f"q{self.min_angle:g}"
            if self.max_area is not None:
                switches += f"a{self.max_area:.17f}"

        if "p" not in switches:
            switches = "p" + switches
        if self.quiet and "Q" not in switches:
            switches += "Q"
        return switches

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with all directive fields
        """
        return {
            "min_angle": self.min_angle,
            "max_area": self.max_area,
            "quiet": self.quiet,
            "flags": self.flags,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TriangulationDirective":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by to_dict()

        Returns:
            TriangulationDirective instance
        """
        return cls(
            min_angle=data.get("min_angle"),
            max_area=data.get("max_area"),
            quiet=data.get("quiet", True),
            flags=data.get("flags"),
        )
