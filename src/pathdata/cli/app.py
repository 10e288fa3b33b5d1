"""CLI application entry point for pathdata.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathdata import __version__
from pathdata.cli.output import console, print_error, print_header, print_source, print_stats
from pathdata.config import EncoderConfig, LoggingConfig, NonFinitePolicy, PathDataSettings
from pathdata.core import PathProcessor
from pathdata.exceptions import (
    DocumentLoadError,
    FontLoadError,
    GlyphNotFoundError,
    PathDataError,
    SegmentDecodeError,
)

# Create the Typer app
app = typer.Typer(
    name="pathdata",
    help="Encode drawing commands as SVG path data.",
    add_completion=False,
    no_args_is_help=True,
)

PrecisionOption = Annotated[
    int | None,
    typer.Option(
        "--precision",
        "-p",
        help="Round numbers to this many decimal places",
        min=0,
        max=15,
    ),
]
RejectNonFiniteOption = Annotated[
    bool,
    typer.Option(
        "--reject-non-finite",
        help="Fail on NaN or infinite numbers instead of writing them",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
StatsOption = Annotated[
    bool,
    typer.Option(
        "--stats",
        "-s",
        help="Print a summary of encoded commands to stderr",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Only print path data and errors",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pathdata[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Encode drawing commands as SVG path data."""


def _build_settings(
    precision: int | None,
    reject_non_finite: bool,
    log_file: Path | None,
    log_level: str,
) -> PathDataSettings:
    return PathDataSettings(
        encoder=EncoderConfig(
            precision=precision,
            non_finite=NonFinitePolicy.REJECT if reject_non_finite else NonFinitePolicy.PASS_THROUGH,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
        ),
    )


@app.command()
def encode(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="JSON array of commands ('-' reads standard input)",
            show_default=False,
        ),
    ] = Path("-"),
    precision: PrecisionOption = None,
    reject_non_finite: RejectNonFiniteOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    stats: StatsOption = False,
    quiet: QuietOption = False,
) -> None:
    """Encode a JSON document of path commands.

    Each command is an object with a "command" letter and its fields:

        [{"command": "M", "point": [10, 10]}, {"command": "Z"}]

    Example:
        pathdata encode shape.json
    """
    settings = _build_settings(precision, reject_non_finite, log_file, log_level)

    try:
        processor = PathProcessor(settings, quiet=quiet)
        d = processor.encode_document(input_file)
    except DocumentLoadError as e:
        print_error(f"Could not load commands: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except SegmentDecodeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except PathDataError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)

    typer.echo(d)

    if stats and not quiet:
        print_header(__version__)
        print_source(str(input_file))
        print_stats(processor.stats)


@app.command()
def glyph(
    font_file: Annotated[
        Path,
        typer.Argument(
            help="Path to TTF/OTF font file",
            show_default=False,
        ),
    ],
    glyph_name: Annotated[
        str,
        typer.Argument(
            help="Glyph name, e.g. 'A' or 'zero'",
            show_default=False,
        ),
    ],
    precision: PrecisionOption = None,
    reject_non_finite: RejectNonFiniteOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    stats: StatsOption = False,
    quiet: QuietOption = False,
) -> None:
    """Encode the outline of a glyph in font units.

    Example:
        pathdata glyph Roboto-Regular.ttf O
    """
    settings = _build_settings(precision, reject_non_finite, log_file, log_level)

    try:
        processor = PathProcessor(settings, quiet=quiet)
        d = processor.encode_glyph(font_file, glyph_name)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except GlyphNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except PathDataError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)

    typer.echo(d)

    if stats and not quiet:
        print_header(__version__)
        print_source(f"{font_file}:{glyph_name}")
        print_stats(processor.stats)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
