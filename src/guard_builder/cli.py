"""Command-line interface for running guards against JSON documents."""

import importlib
import importlib.util
import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from guard_builder import __description__, __version__
from guard_builder.config import apply_config, load_config
from guard_builder.diagnostics import DiagnosticKind, capture_diagnostics, configure_diagnostics
from guard_builder.schema import schema_keys

app = typer.Typer(
    name="guard-builder",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"guard-builder version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """guard-builder - Composable runtime type guards for record-shaped values."""


def _configure_logging(verbose: bool, level: int) -> None:
    package_logger = logging.getLogger("guard_builder")
    if verbose:
        if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
            package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(level)


def load_object(reference: str) -> Any:
    """Resolve ``module:attribute`` or ``path/to/file.py:attribute``.

    Raises:
        ValueError: If the reference is malformed or cannot be resolved
    """
    module_ref, sep, attribute = reference.rpartition(":")
    if not sep or not module_ref or not attribute:
        raise ValueError(f"Expected 'module:attribute', got '{reference}'")

    if module_ref.endswith(".py"):
        module_path = Path(module_ref)
        if not module_path.exists():
            raise ValueError(f"Module file not found: {module_path}")
        spec = importlib.util.spec_from_file_location(module_path.stem, module_path)
        if spec is None or spec.loader is None:
            raise ValueError(f"Cannot import {module_path}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[spec.name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(spec.name, None)
            raise ValueError(f"Cannot import {module_path}: {type(e).__name__}: {e}") from e
    else:
        try:
            module = importlib.import_module(module_ref)
        except Exception as e:
            raise ValueError(f"Cannot import module '{module_ref}': {type(e).__name__}: {e}") from e

    target: Any = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ValueError(f"'{module_ref}' has no attribute '{attribute}'") from e
    return target


def _read_input(input_file: str) -> Any:
    if input_file == "-":
        return jsonlib.load(sys.stdin)
    with open(input_file, encoding="utf-8") as f:
        return jsonlib.load(f)


@app.command()
def check(
    target: Annotated[
        str,
        typer.Argument(help="Guard to run, as module:attribute or path/to/file.py:attribute")
    ],
    input_file: Annotated[
        str,
        typer.Argument(help="JSON document to classify, or '-' for stdin")
    ] = "-",
    redact: Annotated[
        bool | None,
        typer.Option("--redact/--show-values", help="Hide or show offending values in diagnostics (default: from config)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .guard-builder.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Classify a JSON document with a guard and report diagnostics."""
    valid_formats = ["table", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        guard_config = load_config(config)
        apply_config(guard_config)
        if redact is not None:
            configure_diagnostics(log_value_received=not redact)
        _configure_logging(verbose, guard_config.logging.level.to_logging_level())

        guard = load_object(target)
        if not callable(guard):
            raise ValueError(f"'{target}' is not callable")

        value = _read_input(input_file)
    except (ValueError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    with capture_diagnostics() as diagnostics:
        passed = bool(guard(value))

    if format == "json":
        typer.echo(jsonlib.dumps({
            "target": target,
            "passed": passed,
            "diagnostics": [diagnostic.to_dict() for diagnostic in diagnostics],
        }, indent=2))
    else:
        status = "[green]PASS[/green]" if passed else "[red]FAIL[/red]"
        console.print(f"{status} {escape(target)}")

        if diagnostics:
            console.print("\n[blue]Diagnostics:[/blue]")
            table = Table()
            table.add_column("Kind", style="cyan")
            table.add_column("Schema", style="white")
            table.add_column("Property", style="white")
            table.add_column("Message", style="dim")

            for diagnostic in diagnostics:
                kind_color = "yellow" if diagnostic.kind == DiagnosticKind.MISSING_VALIDATOR else "red"
                table.add_row(
                    f"[{kind_color}]{diagnostic.kind.value}[/{kind_color}]",
                    escape(diagnostic.schema_name or "-"),
                    escape(diagnostic.property_name or ("root" if diagnostic.is_root else "-")),
                    escape(diagnostic.message),
                )

            console.print(table)

    raise typer.Exit(0 if passed else 1)


@app.command()
def keys(
    schema: Annotated[
        str,
        typer.Argument(help="Schema class, as module:attribute or path/to/file.py:attribute")
    ],
) -> None:
    """List the properties a strict builder requires for a schema."""
    try:
        declared = schema_keys(load_object(schema))
    except (ValueError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=f"Properties of {escape(schema)}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Property", style="cyan")
    for index, key in enumerate(declared, start=1):
        table.add_row(str(index), escape(str(key)))
    console.print(table)


if __name__ == "__main__":
    app()
