"""CLI interface for annogen using Typer"""

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from annogen import __version__
from annogen.conventions import list_conventions, lookup
from annogen.core.config import (
    build_templates,
    create_settings,
    get_config_path,
    load_settings,
    settings_exist,
)
from annogen.core.generator import generate
from annogen.errors import (
    ConfigInvalidError,
    ConfigNotFoundError,
    ConventionNotFoundError,
    InvalidRuleError,
)
from annogen.models.annotation import parse_annotation
from annogen.models.settings import Settings
from annogen.models.template import TemplateConfig

app = typer.Typer(
    name="annogen",
    help="Annotation templates for documentation-comment generators",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"annogen version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-V", callback=version_callback, is_eager=True, help="Show version"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """annogen - render documentation comments from annotation templates"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def init(
    config_file: Optional[Path] = typer.Option(None, "--config", help="Settings file to create"),
):
    """Create .annogen/config.yaml with starter settings"""
    path = config_file or get_config_path()
    if settings_exist(path):
        if not typer.confirm("Config file already exists. Overwrite?"):
            raise typer.Exit(0)

    settings = create_settings(path)
    console.print(f"[green]Created:[/green] {path}")
    for filetype, ft in settings.filetypes.items():
        console.print(f"[dim]{filetype}:[/dim] {ft.annotation_convention}")


# Conventions subcommands
conventions_app = typer.Typer(help="Inspect annotation conventions")
app.add_typer(conventions_app, name="conventions")


@conventions_app.command("list")
def conventions_list():
    """List available annotation conventions"""
    table = Table(title="Annotation Conventions")
    table.add_column("Name", style="cyan")
    table.add_column("Rules", justify="right")

    for name in list_conventions():
        annotation = lookup(name)
        table.add_row(name, str(len(annotation)) if annotation is not None else "-")

    console.print(table)


@conventions_app.command("show")
def conventions_show(name: str = typer.Argument(..., help="Convention name")):
    """Show the rules of a convention"""
    annotation = lookup(name)
    if annotation is None:
        console.print(f"[red]Error:[/red] Convention not found: {name}")
        raise typer.Exit(1)

    try:
        rules = parse_annotation(annotation, name)
    except InvalidRuleError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=name)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Selector", style="cyan")
    table.add_column("Template")
    table.add_column("Options", style="dim")

    for index, rule in enumerate(rules):
        selector = rule.selector
        if isinstance(selector, list):
            selector = f"{'+'.join(selector)} in {rule.options.required}"
        options = rule.options.model_dump(exclude_defaults=True)
        table.add_row(
            str(index),
            escape(selector or "-"),
            escape(repr(rule.template)),
            escape(", ".join(f"{k}={v}" for k, v in options.items())),
        )

    console.print(table)


@app.command()
def render(
    filetype: str = typer.Argument(..., help="Filetype whose template to use"),
    element_type: str = typer.Argument(..., help="Element type, e.g. func, class, file"),
    nodes_file: Path = typer.Argument(..., help="YAML or JSON file of found nodes"),
    convention: Optional[str] = typer.Option(None, "--convention", "-c", help="Convention to use"),
    comment: Optional[str] = typer.Option(None, "--comment", help="Default comment token"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Settings file"),
    show_markers: bool = typer.Option(True, "--markers/--no-markers", help="List jump markers"),
):
    """Render the annotation for a code element"""
    settings = _load_settings(config_file)
    template = TemplateConfig()
    if settings is not None:
        template = build_templates(settings).get(filetype) or template
        if comment is None:
            comment = settings.comment_for(filetype)
    if convention is not None and convention not in template:
        template.add_annotation(convention)

    try:
        with open(nodes_file, "r", encoding="utf-8") as f:
            nodes = yaml.safe_load(f) or {}
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot read {nodes_file}: {escape(str(e))}")
        raise typer.Exit(1)
    except yaml.YAMLError as e:
        console.print(f"[red]Error:[/red] Invalid nodes file: {escape(str(e))}")
        raise typer.Exit(1)

    if not isinstance(nodes, dict):
        console.print("[red]Error:[/red] Nodes file must hold a mapping of value-kinds")
        raise typer.Exit(1)

    try:
        rendered = generate(template, element_type, nodes, comment=comment, convention=convention)
    except (ConventionNotFoundError, InvalidRuleError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    for line in rendered.lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)

    if show_markers and rendered.markers:
        console.print("")
        console.print("[dim]Jump markers (line:col):[/dim]")
        for marker in rendered.markers:
            console.print(f"[dim]  {marker.line}:{marker.col}[/dim]")


def _load_settings(config_file: Optional[Path]) -> Optional[Settings]:
    """Load settings; None when the default settings file is absent"""
    if config_file is None and not settings_exist():
        return None

    try:
        return load_settings(config_file)
    except (ConfigNotFoundError, ConfigInvalidError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def main():
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    main()
