"""
Viewer bootstrap for ``docslingo serve``.

Prepares the viewer's static assets from the project and starts the viewer
process:

1. Copy ``<root>/i18n`` into ``<viewer>/public/trans-spec/i18n`` (replacing
   any previous copy) along with i18n.json
2. Build index.json: ``{language: [sorted spec filenames]}``
3. Write ``<viewer>/.env`` when a lingo.dev API key is set
4. Run ``python -m docslingo.viewer`` in the foreground
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Mapping

from docslingo.config import API_KEY_ENV, DEFAULT_HOST, DEFAULT_PORT, ProjectConfig
from docslingo.errors import ProjectNotSetUp, ServerStartFailed

logger = logging.getLogger(__name__)

SPEC_SUFFIXES = (".yaml", ".yml")


def build_spec_index(i18n_dir: Path) -> dict[str, list[str]]:
    """Map each language folder to its YAML files, sorted alphabetically."""
    index: dict[str, list[str]] = {}
    if not i18n_dir.is_dir():
        return index

    for lang_dir in sorted(p for p in i18n_dir.iterdir() if p.is_dir()):
        index[lang_dir.name] = sorted(
            p.name for p in lang_dir.iterdir()
            if p.is_file() and p.suffix.lower() in SPEC_SUFFIXES
        )
    return index


def prepare_viewer_assets(config: ProjectConfig) -> dict[str, list[str]]:
    """Copy the project's specs into the viewer and write index.json.

    Returns:
        The spec index that was written

    Raises:
        ProjectNotSetUp: If the project directory does not exist
    """
    if not config.exists():
        raise ProjectNotSetUp(
            f"No project found at {config.root}",
            hint="Run first: docslingo generate --spec <path> --languages <langs>",
        )

    public_dir = config.public_dir
    public_dir.mkdir(parents=True, exist_ok=True)

    target = public_dir / "i18n"
    if target.exists():
        shutil.rmtree(target)
    if config.i18n_dir.is_dir():
        shutil.copytree(config.i18n_dir, target)
        logger.info("Copied %s -> %s", config.i18n_dir, target)

    if config.config_path.is_file():
        shutil.copyfile(config.config_path, public_dir / config.config_path.name)

    index = build_spec_index(config.i18n_dir)
    config.index_path.write_text(json.dumps(index, indent=2), encoding="utf-8")
    logger.debug("Spec index: %s", index)
    return index


def write_env_file(config: ProjectConfig, environ: Mapping[str, str] | None = None) -> Path | None:
    """Write the viewer's .env when the lingo.dev API key is available.

    Without a key, a .env left by an earlier run is removed so the viewer
    does not pick up an old key.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV)
    if not api_key:
        if config.env_path.exists():
            config.env_path.unlink()
            logger.info("Removed stale %s", config.env_path)
        return None

    config.viewer_dir.mkdir(parents=True, exist_ok=True)
    config.env_path.write_text(f"{API_KEY_ENV}={api_key}\n", encoding="utf-8")
    config.env_path.chmod(0o600)
    return config.env_path


def viewer_command(config: ProjectConfig, port: int = DEFAULT_PORT, host: str = DEFAULT_HOST) -> list[str]:
    return [
        sys.executable, "-m", "docslingo.viewer",
        "--public-dir", str(config.public_dir.resolve()),
        "--host", host,
        "--port", str(port),
    ]


def start_viewer(config: ProjectConfig, port: int = DEFAULT_PORT, host: str = DEFAULT_HOST) -> int:
    """Run the viewer in the foreground until it exits.

    Returns:
        The viewer's exit code

    Raises:
        ServerStartFailed: If the process cannot be spawned
    """
    cmd = viewer_command(config, port, host)
    logger.debug("Running %s in %s", " ".join(cmd), config.viewer_dir)
    try:
        return subprocess.call(cmd, cwd=config.viewer_dir)
    except OSError as e:
        raise ServerStartFailed(f"Failed to start server: {e}") from e
