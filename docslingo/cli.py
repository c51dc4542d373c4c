"""
Command-line interface for Docslingo.

Provides commands for:
- Translating an OpenAPI spec into several languages
- Browsing the translated specs in a local web viewer
- Showing the state of the current project

Usage:
    docslingo generate --spec openapi.yaml --languages es,fr,de
    docslingo serve --port 5173
    docslingo info
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from docslingo import __version__
from docslingo.config import API_KEY_ENV, APP_NAME, DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SOURCE_LANGUAGE, ProjectConfig
from docslingo.errors import DocslingoError
from docslingo.locales import read_locale_config
from docslingo.pipeline import GeneratePipeline
from docslingo.server import build_spec_index, prepare_viewer_assets, start_viewer, write_env_file
from docslingo.translate.base import create_translator

app = typer.Typer(
    name="docslingo",
    help="Translate your OpenAPI spec into multiple languages",
    add_completion=False,
)
console = Console()

STATUS_STYLES = {
    "ok": "[green]✔[/] [green]{}[/]",
    "warn": "[yellow]{}[/]",
    "info": "[dim]{}[/]",
}


def print_status(level: str, message: str) -> None:
    console.print(STATUS_STYLES.get(level, "{}").format(message))


def fail(error: DocslingoError) -> None:
    console.print(f"[red]✖ {error}[/]")
    if error.hint:
        console.print(error.hint)
    raise typer.Exit(1)


def version_callback(value: bool):
    if value:
        console.print(f"{APP_NAME} v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-V",
        help="Show debug logging (subprocess commands, auth output)",
    ),
):
    """Docslingo: localize OpenAPI specs with lingo.dev."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    spec: Path = typer.Option(
        ..., "--spec",
        help="Path to your OpenAPI spec file",
    ),
    languages: str = typer.Option(
        ..., "--languages",
        help="Target languages e.g. es,fr,de",
    ),
    source: str = typer.Option(
        DEFAULT_SOURCE_LANGUAGE, "--source", "-s",
        help="Language of the spec file",
    ),
    backend: str = typer.Option(
        "lingo", "--backend", "-b",
        help="Translation backend (lingo, dummy)",
    ),
):
    """Translate an OpenAPI spec into multiple languages."""
    console.print(f"\n[bold]🌍 {APP_NAME}[/]\n")

    config = ProjectConfig.from_env()
    try:
        translator = create_translator(backend)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    pipeline = GeneratePipeline(config, translator, notify=print_status)
    try:
        result = pipeline.run(spec, languages, source)
    except DocslingoError as e:
        fail(e)

    console.print("\n[bold]✔ Done! Your translated specs are in:[/]\n")
    for path in result.outputs:
        console.print(f"  [cyan]{path}[/]")
    console.print("\nTo view your docs, run:")
    console.print("  [cyan]docslingo serve[/]\n")


@app.command()
def serve(
    port: int = typer.Option(
        DEFAULT_PORT, "--port", "-p",
        help="Port to run the viewer on",
    ),
    host: str = typer.Option(
        DEFAULT_HOST, "--host",
        help="Interface to bind",
    ),
):
    """Browse the translated specs in a local web viewer."""
    config = ProjectConfig.from_env()
    try:
        with console.status("Preparing viewer..."):
            index = prepare_viewer_assets(config)
            env_file = write_env_file(config)
    except DocslingoError as e:
        fail(e)

    total = sum(len(files) for files in index.values())
    print_status("ok", f"Published {total} spec file(s) in {len(index)} language(s)")
    if env_file:
        print_status("info", f"Wrote {env_file}")

    console.print(f"[dim]Opening viewer at http://{host}:{port}[/]")
    console.print("[dim]Press Ctrl+C to stop the server[/]\n")
    try:
        returncode = start_viewer(config, port=port, host=host)
    except DocslingoError as e:
        fail(e)
    except KeyboardInterrupt:
        returncode = 0

    if returncode:
        raise typer.Exit(returncode)


@app.command()
def info():
    """Show the current project and its translations."""
    config = ProjectConfig.from_env()
    console.print(f"[bold]{APP_NAME} v{__version__}[/]\n")
    console.print(f"Project: [cyan]{config.root}[/]")

    if not config.exists():
        console.print("[yellow]No project yet.[/] Run: docslingo generate --spec <path> --languages <langs>")
        return

    source, targets = "?", []
    if config.config_path.is_file():
        try:
            locale = read_locale_config(config).get("locale", {})
        except DocslingoError as e:
            fail(e)
        source, targets = locale.get("source", "?"), locale.get("targets", [])

    index = build_spec_index(config.i18n_dir)
    table = Table(title="Languages")
    table.add_column("Language", style="cyan")
    table.add_column("Role")
    table.add_column("Spec files", style="green")
    for lang in [source, *targets]:
        files = index.get(lang, [])
        role = "source" if lang == source else "target"
        table.add_row(lang, role, ", ".join(files) if files else "[yellow]missing[/]")
    console.print(table)

    has_key = bool(os.getenv(API_KEY_ENV))
    console.print(f"\n{API_KEY_ENV}: " + ("[green]✓ set[/]" if has_key else "[yellow]⚠ not set[/]"))


if __name__ == "__main__":
    app()
