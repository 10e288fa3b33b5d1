"""Rich console output helpers for the CLI.

Messages go to stderr; standard output is reserved for path data.
"""

from rich.console import Console
from rich.text import Text

from pathdata.utils import EncodingStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Pathdata[/bold] v{version}")
    console.print("─" * 44)


def print_source(source: str) -> None:
    """Print the name of the command source being encoded."""
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source, style="bold")
    console.print(line)


def print_stats(stats: EncodingStats) -> None:
    """Print encoding summary.

    Args:
        stats: Statistics collected while encoding
    """
    console.print(
        f"\n[bold green]{SYM_OK} Encoded[/bold green] "
        f"{stats.segments_encoded} commands {SYM_DOT} {stats.relative_count} relative"
    )
    if stats.command_counts:
        counts = f" {SYM_DOT} ".join(
            f"{letter}×{n}" for letter, n in sorted(stats.command_counts.items())
        )
        console.print(f"  {counts}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # User data must not be parsed as markup
    line = Text("\n")
    line.append(f"{SYM_ERR} Error:", style="bold red")
    line.append(f" {message}")
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
