"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""


from rich.console import Console
from rich.table import Table
from rich.text import Text

from bwmesh.domain import PSLG, LoopKind, TriangulationDirective
from bwmesh.utils import MeshingStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]bwmesh[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, height: int, width: int, channel: str) -> None:
    """Print image information.

    Args:
        image_path: Path to the image file
        height: Image height in pixels
        width: Image width in pixels
        channel: Channel used as the mask ("alpha" or "luminance")
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(image_path)
    console.print(line1)
    console.print(f"  {width} x {height} px {SYM_DOT} {channel} channel")


def print_pslg_summary(pslg: PSLG, stats: MeshingStats, verbose: bool = False) -> None:
    """Print the boundary graph summary table.

    Args:
        pslg: Assembled boundary graph
        stats: Statistics of the run so far
        verbose: Whether to list every accepted loop
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(justify="right")
    table.add_row("Outer loops", str(stats.outer_loops))
    table.add_row("Hole loops", str(stats.hole_loops))
    table.add_row("Skipped loops", str(stats.loops_skipped))
    table.add_row("Vertices", str(pslg.num_vertices))
    table.add_row("Edges", str(pslg.num_edges))
    table.add_row("Hole points", str(pslg.num_holes))
    console.print(table)

    if verbose and pslg.loops:
        console.print("\n[bold]Loops[/bold]")
        for span in pslg.loops[:20]:
            kind = "hole" if span.kind is LoopKind.HOLE else "outer"
            console.print(f"  #{span.source_index}: {kind} {SYM_DOT} {span.size} vertices")
        if len(pslg.loops) > 20:
            console.print(f"  ... +{len(pslg.loops) - 20} more")


def print_directive(directive: TriangulationDirective) -> None:
    """Print the triangulation switches in use.

    Args:
        directive: Directive passed to the triangulator
    """
    console.print(f"  switches {directive.to_switches()}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    vertices: int,
    triangles: int,
    holes: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total meshing time in seconds
        vertices: Number of mesh vertices
        triangles: Number of mesh triangles
        holes: Number of hole points passed to the triangulator
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {vertices} vertices {SYM_DOT} {triangles} triangles {SYM_DOT} {holes} holes"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
