"""Command-line interface for protojs code generation."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from protojs.resolver import (
    ExternalModules,
    MalformedImportStatement,
    combined_modules,
    resolve_file,
)
from protojs.resolver.modules import load_modules_config

from .files import DEFAULT_RUNTIME_IMPORT
from .kinds import SchemaInconsistency
from .pipeline import Pipeline
from .registry import TypeRegistry
from .types import FileSet, load_file_set


def _parse_module(value: str) -> tuple[str, list[str]]:
    name, sep, patterns = value.partition("=")
    if not sep or not name.strip():
        raise click.BadParameter(f"expected NAME=PATTERN[,PATTERN...], got {value!r}")
    return name.strip(), [p for p in patterns.split(",") if p.strip()]


def _modules_option(func: Callable) -> Callable:
    func = click.option(
        "--module",
        "-m",
        "module_specs",
        multiple=True,
        help="External module as NAME=PATTERN[,PATTERN...]; a PATTERN ending with /* "
        "includes subdirectories",
    )(func)
    func = click.option(
        "--modules-config",
        "modules_config",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="JSON file mapping module names to directory patterns",
    )(func)
    return func


def _modules(module_specs: tuple[str, ...], modules_config: str | None) -> ExternalModules:
    specs = [_parse_module(spec) for spec in module_specs]
    try:
        config = load_modules_config(modules_config) if modules_config else {}
        for name, patterns in specs:
            config.setdefault(name, []).extend(patterns)
        return combined_modules(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


def _load(input_file: str) -> FileSet:
    try:
        return load_file_set(input_file)
    except (ValueError, KeyError, TypeError) as e:
        raise click.ClickException(f"Cannot read schema {input_file}: {e}") from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug information")
def cli(verbose: bool) -> None:
    """Generate JSON parsers for Protobuf JavaScript code."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Schema file (JSON)",
)
@click.option("--output", "-o", "js_root", required=True, help="Root of the compiled JS files")
@click.option(
    "--generated-root",
    default=None,
    help="Root where standard Protobuf types are generated (defaults to --output)",
)
@click.option(
    "--runtime-import",
    default=DEFAULT_RUNTIME_IMPORT,
    show_default=True,
    help="Path of the runtime parsers relative to the output root",
)
@_modules_option
def gen(
    input_file: str,
    js_root: str,
    generated_root: str | None,
    runtime_import: str,
    module_specs: tuple[str, ...],
    modules_config: str | None,
) -> None:
    """Generate parsers, type URLs and the index, then resolve imports."""
    file_set = _load(input_file)
    pipeline = Pipeline(
        js_root=Path(js_root),
        modules=_modules(module_specs, modules_config),
        generated_root=Path(generated_root) if generated_root else None,
        runtime_import=runtime_import,
    )
    try:
        pipeline.run(file_set)
    except (SchemaInconsistency, MalformedImportStatement) as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--generated-root", required=True, help="Root where standard Protobuf types live")
@_modules_option
def resolve(
    files: tuple[str, ...],
    generated_root: str,
    module_specs: tuple[str, ...],
    modules_config: str | None,
) -> None:
    """Resolve imports of already generated or hand-written files."""
    modules = _modules(module_specs, modules_config)
    for file in files:
        try:
            changed = resolve_file(file, generated_root, modules)
        except MalformedImportStatement as e:
            raise click.ClickException(f"{file}: {e}") from e
        click.echo(f"{'Resolved' if changed else 'Unchanged'}: {file}")


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Schema file (JSON)",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display the types known to the generator."""
    registry = TypeRegistry.from_file_set(_load(input_file))
    entries = sorted(registry.entries(), key=lambda e: e.url)

    if output_json:
        data = {
            e.url: {"full_name": e.full_name, "type": e.type_name, "parser": e.parser_name}
            for e in entries
        }
        click.echo(json.dumps(data, indent=2))
        return

    console = Console()
    console.print("[bold cyan]Types[/bold cyan]")
    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Type URL", style="white")
    table.add_column("JS type", style="yellow")
    table.add_column("Parser", style="green")
    for e in entries:
        table.add_row(e.url, e.type_name, e.parser_name or "")
    console.print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
