"""
Entry point of the viewer process started by ``docslingo serve``.

Usage:
    python -m docslingo.viewer --public-dir .docslingo/viewer/public/trans-spec --port 5173
"""

from __future__ import annotations

import os
from pathlib import Path

import typer
from dotenv import load_dotenv

from docslingo.config import API_KEY_ENV, DEFAULT_HOST, DEFAULT_PORT
from docslingo.viewer.app import ViewerSettings, launch

cli = typer.Typer(add_completion=False)


@cli.command()
def main(
    public_dir: Path = typer.Option(..., "--public-dir", help="Directory published at /trans-spec"),
    host: str = typer.Option(DEFAULT_HOST, "--host", help="Interface to bind"),
    port: int = typer.Option(DEFAULT_PORT, "--port", "-p", help="Port to listen on"),
):
    """Serve the Docslingo spec browser."""
    # .env is written next to the viewer by `docslingo serve`
    load_dotenv(Path.cwd() / ".env")
    launch(ViewerSettings(
        public_dir=public_dir,
        host=host,
        port=port,
        api_key=os.getenv(API_KEY_ENV),
    ))


if __name__ == "__main__":
    cli()
