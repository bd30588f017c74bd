"""Unit tests for meshing options and settings."""

import pytest

from bwmesh.config import (
    BWMeshSettings,
    MeshOptions,
    get_default_settings,
    option_names,
    parse_options,
    parse_parameter_pairs,
)
from bwmesh.domain import TriangulationDirective
from bwmesh.exceptions import (
    ConfigurationError,
    InvalidOptionError,
    MissingOptionValueError,
    UnknownOptionError,
)


class TestMeshOptions:
    """Tests for MeshOptions model."""

    def test_defaults(self) -> None:
        """Test default options: no simplification, heuristic directive."""
        options = MeshOptions()
        assert options.tol == 0.0
        assert options.triangle_flags is None
        assert options.explicit_directive() is None

    def test_camel_case_names(self) -> None:
        """Test construction with the CamelCase aliases."""
        options = MeshOptions(Tol=0.5, TriangleFlags="q25")
        assert options.tol == 0.5
        assert options.triangle_flags == "q25"

    def test_python_names(self) -> None:
        """Test construction with Python names."""
        options = MeshOptions(tol=1.5, triangle_flags="q25")
        assert options.tol == 1.5

    def test_flag_string_directive(self) -> None:
        """Test that a flag string becomes a free-form directive."""
        directive = MeshOptions(triangle_flags="q25a2").explicit_directive()
        assert directive is not None
        assert directive.is_free_form()
        assert directive.to_switches() == "pq25a2Q"

    def test_structured_directive(self) -> None:
        """Test that a directive object is passed through."""
        explicit = TriangulationDirective(min_angle=20.0, max_area=4.0)
        assert MeshOptions(triangle_flags=explicit).explicit_directive() == explicit

    def test_empty_flags_mean_default(self) -> None:
        """Test that an empty flag string does not override the heuristic."""
        assert MeshOptions(triangle_flags="").explicit_directive() is None

    def test_frozen(self) -> None:
        """Test that options cannot be changed after validation."""
        options = MeshOptions()
        with pytest.raises(Exception):
            options.tol = 3.0  # type: ignore


class TestParseOptions:
    """Tests for parse_options function."""

    def test_mapping_and_keywords(self) -> None:
        """Test that keywords are merged over the mapping."""
        options = parse_options({"Tol": 0.25}, triangle_flags="q30")
        assert options.tol == 0.25
        assert options.triangle_flags == "q30"

    def test_unknown_name(self) -> None:
        """Test that an unknown name names the offending option."""
        with pytest.raises(UnknownOptionError, match="Unsupported parameter: Tolerance"):
            parse_options({"Tolerance": 1.0})

    def test_negative_tolerance(self) -> None:
        """Test that a negative tolerance is invalid."""
        with pytest.raises(InvalidOptionError) as exc_info:
            parse_options(Tol=-1.0)
        assert exc_info.value.name == "Tol"

    def test_non_numeric_tolerance(self) -> None:
        """Test that a non-numeric tolerance is invalid."""
        with pytest.raises(InvalidOptionError):
            parse_options(tol="coarse")

    def test_infinite_tolerance(self) -> None:
        """Test that an infinite tolerance is invalid."""
        with pytest.raises(InvalidOptionError):
            parse_options(tol=float("inf"))

    def test_errors_are_configuration_errors(self) -> None:
        """Test that every parsing failure is a ConfigurationError."""
        for bad in ({"bogus": 1}, {"tol": -2}):
            with pytest.raises(ConfigurationError):
                parse_options(bad)


class TestParseParameterPairs:
    """Tests for parse_parameter_pairs function."""

    def test_empty(self) -> None:
        """Test that no pairs give default options."""
        assert parse_parameter_pairs([]) == MeshOptions()

    def test_pairs(self) -> None:
        """Test name/value pairs with CamelCase names."""
        options = parse_parameter_pairs(["Tol", 0.5, "TriangleFlags", "q20"])
        assert options.tol == 0.5
        assert options.triangle_flags == "q20"

    def test_missing_value(self) -> None:
        """Test that a trailing name without a value fails."""
        with pytest.raises(MissingOptionValueError, match="Tol"):
            parse_parameter_pairs(["TriangleFlags", "q20", "Tol"])

    def test_unknown_name_checked_first(self) -> None:
        """Test that an unknown trailing name is reported as unknown."""
        with pytest.raises(UnknownOptionError):
            parse_parameter_pairs(["Bogus"])

    def test_non_string_name(self) -> None:
        """Test that a value in name position is rejected."""
        with pytest.raises(UnknownOptionError, match="0.5"):
            parse_parameter_pairs([0.5, "Tol"])


class TestSettings:
    """Tests for BWMeshSettings and helpers."""

    def test_default_settings(self) -> None:
        """Test default application settings."""
        settings = get_default_settings()
        assert isinstance(settings, BWMeshSettings)
        assert settings.options.tol == 0.0
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_option_names(self) -> None:
        """Test that both naming styles are recognized."""
        assert option_names() == {"tol", "Tol", "triangle_flags", "TriangleFlags"}
