"""
cocoaconv CLI.

Commands:
- convert: Generate NS_ENUM wrappers or Swift descriptions from a header
- inspect: List the enums found in a header
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from cocoaconv._version import get_version
from cocoaconv.config import CONFIG_FILENAME, ConversionConfig, OutputMode, load_config
from cocoaconv.core.errors import CocoaconvError
from cocoaconv.core.extractor import EnumRecord, extract_enums
from cocoaconv.core.header import read_header_lines, resolve_header_path
from cocoaconv.core.strings import type_name
from cocoaconv.emit import get_emitter

console = Console()

app = typer.Typer(
    help="""cocoaconv – Cocoa bridging code from C enum headers

Without a header path, the configured fallback location is used:
  build-xcode/Debug/include/libMultiMarkdown/libMultiMarkdown.h
""",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"cocoaconv version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log diagnostics to stderr",
    ),
) -> None:
    """cocoaconv CLI main callback for global options."""
    # Log to stderr so generated code on stdout stays clean
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
    )


def _load_records(header: Path | None, config_path: Path | None) -> tuple[list[EnumRecord], ConversionConfig]:
    """Load config and header, exiting with code 1 on failure."""
    try:
        config = load_config(config_path or Path.cwd() / CONFIG_FILENAME)
        path = resolve_header_path(header, config.get_fallback_path(Path.cwd()))
        lines = read_header_lines(path)
    except CocoaconvError as e:
        typer.echo(e.message, err=True)
        raise typer.Exit(code=1)
    return extract_enums(lines), config


@app.command()
def convert(
    header: Path | None = typer.Argument(  # noqa: B008
        None,
        help="Path to the C header (default: configured fallback)",
    ),
    mode: OutputMode = typer.Option(  # noqa: B008
        OutputMode.NSENUM,
        "--mode",
        "-m",
        help="nsenum: Objective-C NS_ENUM wrappers. swift: Swift enum descriptions.",
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None,
        "--output",
        "-o",
        help="Write output to file instead of stdout",
    ),
    config_path: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help=f"Configuration file (default: ./{CONFIG_FILENAME})",
    ),
) -> None:
    """
    Convert the enums of a C header.

    Examples:
        cocoaconv convert include/libMultiMarkdown.h
        cocoaconv convert -m swift -o Descriptions.swift
    """
    records, config = _load_records(header, config_path)
    result = get_emitter(mode, config).emit(records)
    if not result.endswith("\n"):
        result += "\n"

    if output is None:
        typer.echo(result, nl=False)
    else:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(result)
        except OSError as e:
            typer.echo(f"Failed to write `{output}`: {e.strerror}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Wrote {len(records)} enum(s) to {output}", err=True)


@app.command()
def inspect(
    header: Path | None = typer.Argument(  # noqa: B008
        None,
        help="Path to the C header (default: configured fallback)",
    ),
    config_path: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help=f"Configuration file (default: ./{CONFIG_FILENAME})",
    ),
) -> None:
    """List the enums found in a header with their exported names."""
    records, config = _load_records(header, config_path)
    if not records:
        console.print("[yellow]No enums found[/yellow]")
        return

    table = Table(title="Enums")
    table.add_column("Line", justify="right")
    table.add_column("Declared")
    table.add_column("Type name", style="cyan")
    table.add_column("Cases", justify="right")
    for record in records:
        table.add_row(
            str(record.line),
            record.declared_name,
            type_name(record.declared_name, config.type_name_overrides),
            str(len(record.raw_cases)),
        )
    console.print(table)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
