"""
Project setup: place the user's spec inside the project tree.

The source spec is copied byte-for-byte to
``<root>/i18n/<source>/<spec_filename>``; lingo.dev later writes the
translated copies next to it under each target language.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from docslingo.config import ProjectConfig
from docslingo.errors import SpecNotFound

logger = logging.getLogger(__name__)


def setup_spec(config: ProjectConfig, spec_path: str | Path, source_language: str) -> Path:
    """Copy a spec file into the project under its source language.

    Re-running overwrites the previous copy.

    Args:
        config: Project layout
        spec_path: Path to the user's OpenAPI spec
        source_language: Language code of the spec (e.g. "en")

    Returns:
        Path of the copied spec

    Raises:
        SpecNotFound: If spec_path is not an existing file. Nothing is
            created on disk in that case.
    """
    resolved = Path(spec_path).expanduser().resolve()
    if not resolved.is_file():
        raise SpecNotFound(f"Spec file not found: {spec_path}")

    source_dir = config.language_dir(source_language)
    if not source_dir.is_dir():
        source_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Created project structure at %s", source_dir)

    destination = config.spec_path(source_language)
    shutil.copyfile(resolved, destination)
    logger.debug("Copied %s -> %s", resolved, destination)
    return destination
