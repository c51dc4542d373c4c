"""
Base translator interface and implementations.

This module defines:
- Abstract Translator interface that every backend implements
- DummyTranslator for testing and offline runs (copies the source spec)
- create_translator() factory

Design Philosophy:
- Translators own the external tool: auth probing, login and the run itself
- Retry and sequencing live in the callers (AuthChecker, TranslationRunner)
- A run reports success through TranslationResult, it does not raise
"""

from __future__ import annotations

import logging
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docslingo.config import ProjectConfig
from docslingo.locales import read_locale_config

logger = logging.getLogger(__name__)


@dataclass
class AuthStatus:
    """Outcome of an authentication probe.

    Attributes:
        authenticated: Whether the tool reported a logged-in session
        output: Raw output of the probe (for debugging)
    """
    authenticated: bool
    output: str = ""


@dataclass
class TranslationResult:
    """Result of one translation run.

    Attributes:
        success: True when the run finished cleanly
        returncode: Exit code of the run (None if it never started)
        metadata: Additional info (translator name, error message, ...)
    """
    success: bool
    returncode: int | None = None
    metadata: dict = field(default_factory=dict)


class Translator(ABC):
    """Abstract base class for translation backends.

    All translators must implement:
    - check_auth(): Probe whether the backend has a usable session
    - login(): Interactive login, raising LoginFailed on failure
    - run(): Translate the project described by its i18n.json
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the translator name (e.g., 'lingo', 'dummy')."""
        pass

    @abstractmethod
    def check_auth(self) -> AuthStatus:
        pass

    @abstractmethod
    def login(self) -> None:
        pass

    @abstractmethod
    def run(self, config: ProjectConfig) -> TranslationResult:
        """Translate every file matched by the project configuration.

        Args:
            config: Project layout; the run works from config.root

        Returns:
            TranslationResult (a failed run is reported, not raised)
        """
        pass


class DummyTranslator(Translator):
    """A dummy translator for testing.

    Always authenticated. A run copies every source-language YAML file into
    each target language folder listed in i18n.json, unchanged.
    """

    @property
    def name(self) -> str:
        return "dummy"

    def check_auth(self) -> AuthStatus:
        return AuthStatus(authenticated=True, output="Authenticated as dummy")

    def login(self) -> None:
        return None

    def run(self, config: ProjectConfig) -> TranslationResult:
        locale = read_locale_config(config)["locale"]
        source_dir = config.language_dir(locale["source"])
        sources = sorted(source_dir.glob("*.yaml"))

        for target in locale["targets"]:
            target_dir = config.language_dir(target)
            target_dir.mkdir(parents=True, exist_ok=True)
            for path in sources:
                shutil.copyfile(path, target_dir / path.name)
            logger.debug("Copied %d file(s) to %s", len(sources), target_dir)

        return TranslationResult(
            success=True,
            returncode=0,
            metadata={"translator": self.name, "files": len(sources)},
        )


def create_translator(backend: str, **kwargs) -> Translator:
    """Factory function to create a translator by name.

    Args:
        backend: Translator backend name
        **kwargs: Backend-specific arguments

    Supported backends and aliases:
        - lingo, lingo.dev, lingodotdev: lingo.dev CLI via npx (default)
        - dummy, echo, test: Copies the source spec (useful for testing)
    """
    backend_lower = backend.lower().replace("_", "-")

    if backend_lower in ("lingo", "lingo.dev", "lingodotdev"):
        from docslingo.translate.lingo import LingoTranslator
        return LingoTranslator(**kwargs)

    elif backend_lower in ("dummy", "echo", "test"):
        return DummyTranslator()

    else:
        available = ["lingo", "dummy"]
        raise ValueError(
            f"Unknown translator backend: {backend}. "
            f"Available backends: {', '.join(available)}"
        )
