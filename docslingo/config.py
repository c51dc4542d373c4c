"""
Project-wide configuration and directory structure.

A Docslingo project is a single directory (``.docslingo`` by default) that
holds the source spec, the lingo.dev configuration and every translated copy:

    .docslingo/
        i18n.json
        i18n/<language>/api.yaml
        viewer/
            .env
            public/trans-spec/{index.json, i18n.json, i18n/...}

Rather than module-level path constants, every component receives a
``ProjectConfig`` so several projects (or test fixtures) can coexist.

Example:
    >>> from docslingo.config import ProjectConfig
    >>> config = ProjectConfig.from_env()
    >>> print(config.spec_path("es"))
    .docslingo/i18n/es/api.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

# Application name for display purposes
APP_NAME = "Docslingo"

# Environment variables
PROJECT_DIR_ENV = "DOCSLINGO_DIR"
VIEWER_DIR_ENV = "DOCSLINGO_VIEWER_DIR"
API_KEY_ENV = "LINGODOTDEV_API_KEY"

# Project layout
DEFAULT_PROJECT_DIR = ".docslingo"
SPEC_FILENAME = "api.yaml"
CONFIG_FILENAME = "i18n.json"
INDEX_FILENAME = "index.json"
ENV_FILENAME = ".env"
STATIC_ROOT = "trans-spec"

# lingo.dev configuration
CONFIG_SCHEMA_URL = "https://lingo.dev/schema/i18n.json"
CONFIG_VERSION = "1.12"
INCLUDE_PATTERN = "i18n/[locale]/*.yaml"
DEFAULT_SOURCE_LANGUAGE = "en"

# Retry budgets
AUTH_RETRIES = 2
AUTH_RETRY_DELAY = 2.0  # seconds
TRANSLATION_ATTEMPTS = 2

# Viewer server
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5173


@dataclass(frozen=True)
class ProjectConfig:
    """Locations of everything a Docslingo project reads or writes.

    Attributes:
        root: Project directory
        spec_filename: Name given to the spec inside every language folder
        viewer_dir: Working directory of the viewer (defaults to ``<root>/viewer``)
    """
    root: Path = field(default_factory=lambda: Path(DEFAULT_PROJECT_DIR))
    spec_filename: str = SPEC_FILENAME
    viewer_dir: Optional[Path] = None

    def __post_init__(self):
        object.__setattr__(self, "root", Path(self.root))
        if self.viewer_dir is None:
            object.__setattr__(self, "viewer_dir", self.root / "viewer")
        else:
            object.__setattr__(self, "viewer_dir", Path(self.viewer_dir))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ProjectConfig":
        """Build a config from ``DOCSLINGO_DIR`` / ``DOCSLINGO_VIEWER_DIR``."""
        env = os.environ if environ is None else environ
        root = Path(env.get(PROJECT_DIR_ENV) or DEFAULT_PROJECT_DIR)
        viewer_dir = env.get(VIEWER_DIR_ENV)
        return cls(root=root, viewer_dir=Path(viewer_dir) if viewer_dir else None)

    @property
    def i18n_dir(self) -> Path:
        return self.root / "i18n"

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILENAME

    def language_dir(self, language: str) -> Path:
        return self.i18n_dir / language

    def spec_path(self, language: str) -> Path:
        return self.language_dir(language) / self.spec_filename

    @property
    def public_dir(self) -> Path:
        """Static asset directory served by the viewer at ``/trans-spec``."""
        return self.viewer_dir / "public" / STATIC_ROOT

    @property
    def index_path(self) -> Path:
        return self.public_dir / INDEX_FILENAME

    @property
    def env_path(self) -> Path:
        return self.viewer_dir / ENV_FILENAME

    def exists(self) -> bool:
        return self.root.is_dir()
