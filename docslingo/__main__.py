"""
Entry point for running Docslingo as a module.

Usage:
    python -m docslingo --help
    python -m docslingo generate --spec openapi.yaml --languages es,fr
    python -m docslingo serve --port 5173
"""
from .cli import app


if __name__ == "__main__":
    app()
