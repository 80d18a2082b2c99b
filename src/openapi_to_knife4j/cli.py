"""
Command-line interface for the OpenAPI to Knife4j converter.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer

from .config import get_settings
from .converter import Knife4jConverter, build_swagger_config, default_resources
from .exceptions import ParseError
from .loader import load_document_file

app = typer.Typer(help="Convert OpenAPI specifications to the Knife4j documentation format")


def _write_json(content: Any, path: Optional[Path], indent: int) -> None:
    """Write content as JSON to a file, or to stdout if no path is given.

    Raises:
        typer.Exit: If the file cannot be written
    """
    text = json.dumps(content, indent=indent, ensure_ascii=False)
    if path is None:
        typer.echo(text)
        return
    try:
        path.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error saving to {path}: {str(e)}", err=True)
        raise typer.Exit(1)


@app.callback()
def main_options(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level. Defaults to the configured log_level."
    ),
) -> None:
    """Configure logging for all commands."""
    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@app.command()
def convert(
    input_file: Path = typer.Argument(..., help="Path to the input OpenAPI JSON or YAML file"),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Path to save the converted document. If not provided, will use input filename with .knife4j.json extension",
    ),
    server_name: Optional[str] = typer.Option(
        None, "--server-name", "-n", help="Display name of the service"
    ),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Convert an OpenAPI specification to the Knife4j format."""
    if not input_file.exists():
        typer.echo(f"Input file not found: {input_file}", err=True)
        raise typer.Exit(1)

    if output_file is None:
        output_file = input_file.parent / f"{input_file.stem}.knife4j.json"

    try:
        document = load_document_file(input_file)
    except ParseError as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(1)

    result = Knife4jConverter(document, server_name=server_name).convert()
    _write_json(result, output_file, indent)
    typer.echo(f"Successfully converted {input_file} to {output_file}")


@app.command("swagger-config")
def swagger_config(
    server_name: Optional[str] = typer.Option(
        None, "--server-name", "-n", help="Display name of the service"
    ),
    output_file: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Path to save the config. Printed if not provided."
    ),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Print the swagger-config resource list for the documentation UI."""
    config = build_swagger_config(default_resources(server_name))
    _write_json(config, output_file, indent)


def main():
    """Entry point for the CLI."""
    app()
