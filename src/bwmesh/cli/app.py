"""CLI application entry point for bwmesh.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import numpy as np
import typer

from bwmesh import __version__
from bwmesh.cli.output import (
    SYM_OK,
    console,
    print_directive,
    print_error,
    print_header,
    print_image_info,
    print_pslg_summary,
    print_step,
    print_success,
)
from bwmesh.config import BWMeshSettings, LoggingConfig, parse_options
from bwmesh.core import ImageMesher
from bwmesh.exceptions import BWMeshError, ImageLoadError, MeshWriteError
from bwmesh.io import ImageReader, MeshWriter
from bwmesh.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="bwmesh",
    help="Construct a triangle mesh from a black and white image.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bwmesh[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def mesh(
    input_image: Annotated[
        Path,
        typer.Argument(
            help="Path to input image (alpha channel used when present)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path, .npz, .off or .poly (default: {name}-mesh.npz)",
        ),
    ] = None,
    tol: Annotated[
        float,
        typer.Option(
            "--tol",
            "-t",
            help="Douglas-Peucker simplification tolerance in pixels (0 = off)",
            min=0.0,
        ),
    ] = 0.0,
    triangle_flags: Annotated[
        str | None,
        typer.Option(
            "--triangle-flags",
            "-f",
            help="Triangle switches, e.g. 'q25a2' (default: derived from edge lengths)",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Build the boundary graph and report it without triangulating",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Construct a triangle mesh from a black and white image.

    Traces the foreground boundaries, optionally simplifies them, places a
    point inside every hole and meshes the region with Triangle.

    Example:
        bwmesh shape.png --tol 0.5

    This will create shape-mesh.npz holding the mesh (W, F) and the boundary
    graph (V, E, H) it was built from.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_image.exists():
        print_error(
            f"Input file not found: {input_image}",
            details=f"The file '{input_image}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_image.is_file():
        print_error(
            f"Input path is not a file: {input_image}",
            details="Please provide a path to an image file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        options = parse_options(tol=tol, triangle_flags=triangle_flags)
        settings = BWMeshSettings(
            options=options,
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )

        output_path = output if output is not None else MeshWriter.get_mesh_path(input_image)
        writer = MeshWriter(output_path)

        if not quiet:
            print_step("Loading image")

        with ImageReader(input_image) as reader:
            mask = reader.mask
            if not quiet:
                height, width = reader.size
                print_image_info(str(input_image), height, width, reader.channel)

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        mesher = ImageMesher(settings, logger=logger)

        if dry_run:
            _handle_dry_run(mesher, mask, writer, quiet, verbose)
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Meshing")

        result = mesher.mesh(mask)

        if not quiet:
            print_pslg_summary(result.pslg, result.stats, verbose=verbose)
            print_directive(result.directive)

        writer.write(result.mesh, result.pslg)

        if not quiet:
            print_success(
                output_path=str(writer.output_path),
                file_size=_format_file_size(writer.output_path),
                total_time_s=result.stats.duration_seconds,
                vertices=result.mesh.num_vertices,
                triangles=result.mesh.num_triangles,
                holes=result.pslg.num_holes,
            )

    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except MeshWriteError as e:
        print_error(f"Could not save mesh: {e.reason}")
        raise typer.Exit(code=1)
    except BWMeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_dry_run(
    mesher: ImageMesher,
    mask: np.ndarray,
    writer: MeshWriter,
    quiet: bool,
    verbose: bool,
) -> None:
    """Handle --dry-run mode.

    Builds the boundary graph only. It is written out when the output path
    asks for a .poly file; other formats need a mesh and are skipped.

    Args:
        mesher: Configured mesher
        mask: Decoded image
        writer: Writer for the requested output path
        quiet: Suppress output
        verbose: Show verbose output
    """
    if not quiet:
        print_step("Building boundary graph (dry run)")

    pslg, stats = mesher.build_pslg(mask)

    if not quiet:
        console.print("\n[bold]Boundary graph[/bold]\n")
        print_pslg_summary(pslg, stats, verbose=verbose)

    if not writer.needs_mesh:
        writer.write(None, pslg)
        if not quiet:
            console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] - wrote {writer.output_path}")
    elif not quiet:
        console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] - no mesh written")


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
