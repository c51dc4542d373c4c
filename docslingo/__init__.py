"""
Docslingo: translate an OpenAPI spec into multiple languages.

The heavy lifting (the actual translation) is delegated to the lingo.dev
CLI. This package prepares the project folder, writes the lingo.dev
configuration, drives the translation run with retries, and ships a small
web viewer for browsing the translated specs.

License: MIT
"""

__version__ = "1.0.0"

from docslingo.config import ProjectConfig
from docslingo.pipeline import GeneratePipeline, GenerateResult

__all__ = [
    "ProjectConfig",
    "GeneratePipeline",
    "GenerateResult",
]
