"""
uidlc command line interface.

Commands:
  • component: generate one component and print its files
  • project: generate a whole project into a folder
  • stacks: list the registered stacks

Settings not given on the command line come from ``uidlc.toml`` in the
current directory.
"""

from __future__ import annotations

import base64
import json
import logging
import platform
from dataclasses import replace
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ._version import get_version
from .core.config import UidlcConfig, load_config
from .core.errors import UidlcError
from .core.ir import FileEncoding, GeneratedFolder
from .project import ProjectStrategy
from .stacks import create_project_generator, get_registry, get_strategy

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

LEXERS = {"js": "jsx", "ts": "tsx", "tsx": "tsx", "html": "html", "vue": "html", "css": "css"}

app = typer.Typer(
    help="""uidlc – UIDL to source code compiler

Commands:
  • component: compile a single component UIDL
  • project: compile a project UIDL into a folder tree
  • stacks: list available stacks
""",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"uidlc {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """uidlc CLI main callback for global options."""
    pass


def _configure_logging(config: UidlcConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.generation.log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _load_config() -> UidlcConfig:
    try:
        return load_config(Path.cwd())
    except UidlcError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text())
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot read {path}: {e}")
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] {path} is not valid JSON: {e}")
        raise typer.Exit(code=1)


def _strategy_for(stack: str, config: UidlcConfig) -> ProjectStrategy:
    strategy = get_strategy(stack)
    if config.generation.assets_prefix is not None:
        strategy = replace(
            strategy, static=replace(strategy.static, prefix=config.generation.assets_prefix)
        )
    return strategy


def write_folder(folder: GeneratedFolder, output_dir: Path) -> list[Path]:
    """Write a generated folder tree below ``output_dir``; returns the written paths."""
    written = []
    for path, file in folder.walk():
        target = output_dir.joinpath(*path, file.full_name)
        target.parent.mkdir(parents=True, exist_ok=True)
        if file.content_encoding == FileEncoding.BASE64:
            target.write_bytes(base64.b64decode(file.content))
        else:
            target.write_text(file.content)
        written.append(target)
    return written


@app.command()
def component(
    uidl_json: Annotated[Path, typer.Argument(help="Component UIDL (JSON file)")],
    stack: Annotated[
        str | None, typer.Option("--stack", "-s", help="Stack to compile for")
    ] = None,
    file_type: Annotated[
        str | None, typer.Option("--file-type", "-t", help="Only show files of this type")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Debug logging")] = False,
) -> None:
    """
    Compile one component and print the generated files.
    """
    config = _load_config()
    _configure_logging(config, verbose)
    data = _read_json(uidl_json)

    try:
        strategy = _strategy_for(stack or config.generation.stack, config)
        generator = strategy.components.config.build("components")
        result = generator.generate_component_sync(
            data, {"assets_prefix": strategy.static.prefix}
        )
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid component UIDL: {e}")
        raise typer.Exit(code=1)
    except UidlcError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1)

    for file in result.files:
        if file_type and file.file_type != file_type:
            continue
        syntax = Syntax(file.content, LEXERS.get(file.file_type or "", "text"))
        console.print(Panel(syntax, title=file.full_name, expand=False))

    if result.package_dependencies:
        table = Table(title="Dependencies")
        table.add_column("Package", style="cyan")
        table.add_column("Version")
        for package, version in result.package_dependencies.items():
            table.add_row(package, version)
        console.print(table)


@app.command()
def project(
    project_json: Annotated[Path, typer.Argument(help="Project UIDL (JSON file)")],
    stack: Annotated[
        str | None, typer.Option("--stack", "-s", help="Stack to compile for")
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output directory")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="List the files without writing them")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Debug logging")] = False,
) -> None:
    """
    Compile a project UIDL into a folder tree.
    """
    config = _load_config()
    _configure_logging(config, verbose)
    data = _read_json(project_json)

    stack_name = stack or config.generation.stack
    try:
        generator = create_project_generator(
            stack_name, dev_dependencies=config.package.dev_dependencies
        )
        generator = replace(generator, strategy=_strategy_for(stack_name, config))
        folder = generator.generate_project(data)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid project UIDL: {e}")
        raise typer.Exit(code=1)
    except UidlcError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1)

    if dry_run:
        table = Table(title=f"Files ({stack_name})")
        table.add_column("Path", style="cyan")
        table.add_column("Size", justify="right")
        for path, file in folder.walk():
            table.add_row("/".join([*path, file.full_name]), str(len(file.content)))
        console.print(table)
        return

    output_dir = output or config.get_output_path(Path.cwd())
    written = write_folder(folder, output_dir)
    console.print(f"[green]✓[/green] Wrote {len(written)} file(s) to {output_dir}")


@app.command()
def stacks() -> None:
    """
    List available stacks.
    """
    table = Table(title="Available stacks")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for info in get_registry().list_stacks():
        table.add_row(info.name, info.description)
    console.print(table)
    typer.echo("\nUse: uidlc project PROJECT_JSON --stack <name>")


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
