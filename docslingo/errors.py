"""
Error types raised by Docslingo.

Every pipeline error is fatal: components raise, and the CLI prints the
message (plus the recovery hint, when there is one) and exits non-zero.
The viewer errors are caught by the UI and shown in its error view.
"""

from __future__ import annotations

from typing import Optional


class DocslingoError(Exception):
    """Base class for all Docslingo errors.

    Attributes:
        hint: Optional manual-recovery instructions shown to the user
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.hint = hint


class SpecNotFound(DocslingoError):
    """The spec path does not point at an existing file."""


class NoTargetLanguages(DocslingoError):
    """The languages argument contained no usable language code."""


class LoginFailed(DocslingoError):
    """The interactive login process failed or exited non-zero."""


class AuthVerificationFailed(DocslingoError):
    """Still unauthenticated after logging in and re-checking."""


class TranslationFailed(DocslingoError):
    """Every translation attempt exited non-zero."""


class InvalidLocaleConfig(DocslingoError):
    """``i18n.json`` exists but cannot be read as a locale config."""


class ProjectNotSetUp(DocslingoError):
    """``serve`` was called before ``generate`` created the project."""


class ServerStartFailed(DocslingoError):
    """The viewer process could not be spawned."""


class SpecLoadError(DocslingoError):
    """Base class for viewer-side spec loading errors."""


class SpecFetchFailed(SpecLoadError):
    """A static asset could not be fetched."""


class SpecParseFailed(SpecLoadError):
    """The fetched document is not valid YAML (or not a mapping)."""


class SpecDereferenceFailed(SpecLoadError):
    """A ``$ref`` in the document could not be resolved."""
