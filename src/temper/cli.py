"""Temper CLI

Usage:
    temper engines                       # Show extensions and resolved engines
    temper compile views/index.jinja     # Compile and print hashes
    temper compile x.mustache -o build/  # Write client and library sources
    temper render x.html -d data.yaml    # Render on the server side
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from temper._version import __version__
from temper.config import TemperConfig
from temper.errors import NoEngineAvailableError, TemperError
from temper.naming import normalize_name
from temper.service import Temper

console = Console()

typer_app = typer.Typer(
    help="Compile templates for server and client rendering.",
    invoke_without_command=True,
    no_args_is_help=True,
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the temper CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level
    - Debug (TEMPER_DEBUG=1): DEBUG level - engine loads, evictions, compiles
    """
    debug = bool(os.environ.get("TEMPER_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("temper")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=exit_code)


def load_data(path: Optional[Path]) -> dict[str, Any]:
    """Load template data from a YAML (or JSON) file."""
    if path is None:
        return {}
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise TemperError(f"Template data in {path} must be a mapping")
    return data


def make_temper(ctx: typer.Context) -> Temper:
    config: TemperConfig = ctx.obj["config"]
    temper = Temper(config)
    ctx.call_on_close(temper.destroy)
    return temper


@typer_app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to a temper.yaml file."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(f"temper {__version__}")
        raise typer.Exit()

    setup_logging(verbose)
    if config is not None and not config.exists():
        exit_with_error(f"Config file not found: {config}")
    try:
        ctx.obj = {"config": TemperConfig.load(config or Path("temper.yaml"))}
    except (OSError, yaml.YAMLError, ValueError) as exc:
        exit_with_error(f"Invalid configuration: {exc}")


@typer_app.command("engines")
def engines_command(ctx: typer.Context) -> None:
    """List supported extensions and the engine each resolves to."""
    temper = make_temper(ctx)

    table = Table()
    table.add_column("Extension", style="cyan")
    table.add_column("Candidates")
    table.add_column("Engine")

    for extname, candidates in sorted(temper.supported.items()):
        try:
            engine = f"[green]{temper.resolve('template' + extname)}[/green]"
        except NoEngineAvailableError:
            engine = "[red]not installed[/red]"
        table.add_row(extname, ", ".join(candidates), engine)

    console.print(table)


@typer_app.command("compile")
def compile_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Template file to compile."),
    engine: Optional[str] = typer.Option(None, "-e", "--engine", help="Force an engine."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Directory to write client and library sources to."
    ),
) -> None:
    """Compile a template and report its engine and hashes."""
    temper = make_temper(ctx)
    try:
        artifact = temper.fetch(file, engine)
    except TemperError as exc:
        exit_with_error(str(exc))

    typer.echo(f"engine: {artifact.engine}")
    typer.echo(f"library: {artifact.hash.library}")
    typer.echo(f"client: {artifact.hash.client}")
    typer.echo(f"server: {artifact.hash.server}")

    if output is None:
        return

    name = normalize_name(file) or "template"
    output.mkdir(parents=True, exist_ok=True)
    client_path = output / f"{name}.py"
    client_path.write_text(artifact.client, encoding="utf-8")
    typer.echo(f"Wrote client to {client_path}")

    if artifact.library:
        library_path = output / f"{name}.library.py"
        library_path.write_text(artifact.library, encoding="utf-8")
        typer.echo(f"Wrote library to {library_path}")


@typer_app.command("render")
def render_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Template file to render."),
    data: Optional[Path] = typer.Option(
        None, "-d", "--data", help="YAML or JSON file with template data."
    ),
    engine: Optional[str] = typer.Option(None, "-e", "--engine", help="Force an engine."),
) -> None:
    """Render a template with the server side function."""
    temper = make_temper(ctx)
    try:
        artifact = temper.fetch(file, engine)
        typer.echo(artifact.server(load_data(data)), nl=False)
    except (TemperError, OSError, yaml.YAMLError) as exc:
        exit_with_error(str(exc))


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
