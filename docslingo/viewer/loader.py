"""
Spec loader for the viewer.

Fetches the static assets published by ``docslingo serve``:

    GET /trans-spec/index.json              -> {language: [filenames]}
    GET /trans-spec/i18n.json               -> lingo.dev locale config
    GET /trans-spec/i18n/<lang>/<filename>  -> raw YAML

Nothing is cached: every call goes back to the server.

Failure policy:
    Each public SpecLoader method looks up its own name in FAILURE_POLICY
    when it fails. FALLBACK returns the method's fallback value (English
    only for the language list, so the UI can still come up); RAISE
    re-raises as a SpecLoadError for the UI's error view.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

import jsonref
import requests
import yaml

from docslingo.config import DEFAULT_SOURCE_LANGUAGE, INDEX_FILENAME, CONFIG_FILENAME, STATIC_ROOT
from docslingo.errors import SpecDereferenceFailed, SpecFetchFailed, SpecLoadError, SpecParseFailed

logger = logging.getLogger(__name__)


class OnFailure(str, Enum):
    RAISE = "raise"
    FALLBACK = "fallback"


FAILURE_POLICY: dict[str, OnFailure] = {
    "get_spec_index": OnFailure.RAISE,
    "get_available_languages": OnFailure.FALLBACK,
    "get_default_language": OnFailure.FALLBACK,
    "get_default_spec": OnFailure.RAISE,
    "load_spec": OnFailure.RAISE,
}


@dataclass
class AvailableLanguages:
    """Languages a project was translated into."""
    source: str
    targets: list[str] = field(default_factory=list)
    all: list[str] = field(default_factory=list)


def fallback_languages() -> AvailableLanguages:
    return AvailableLanguages(
        source=DEFAULT_SOURCE_LANGUAGE,
        targets=[],
        all=[DEFAULT_SOURCE_LANGUAGE],
    )


def on_failure(fallback: Optional[Callable[[], Any]] = None):
    """Apply FAILURE_POLICY to a SpecLoader method.

    The table is read on every call. Errors that are not already a
    SpecLoadError are wrapped in one, so callers handle a single type.
    A method without a fallback always raises.
    """
    def decorate(method):
        name = method.__name__

        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except Exception as e:
                if FAILURE_POLICY.get(name) is OnFailure.FALLBACK and fallback is not None:
                    logger.error("%s failed, using fallback: %s", name, e)
                    return fallback()
                logger.error("%s failed: %s", name, e)
                if isinstance(e, SpecLoadError):
                    raise
                raise SpecLoadError(f"{name} failed: {e}") from e

        return wrapper

    return decorate


def primary_language(accept_language: str | None) -> str:
    """Primary subtag of the first preferred language.

    Example:
        >>> primary_language("fr-CA,fr;q=0.9,en;q=0.8")
        'fr'
    """
    if not accept_language:
        return ""
    first = accept_language.split(",")[0].split(";")[0].strip()
    return first.split("-")[0].lower()


class SpecLoader:
    """Fetch and parse the viewer's static assets.

    Args:
        base_url: Server root, e.g. "http://127.0.0.1:5173/"
        browser_language: Browser preference (an Accept-Language value or a
            tag like "en-US")
        session: Optional requests session (anything with a ``get`` method)
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        browser_language: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        static_root: str = STATIC_ROOT,
    ):
        self.base_url = base_url.rstrip("/")
        self.browser_language = browser_language
        self.session = session or requests.Session()
        self.timeout = timeout
        self.static_root = static_root.strip("/")

    def url(self, *parts: str) -> str:
        return "/".join([self.base_url, self.static_root, *parts])

    def _get(self, url: str) -> requests.Response:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise SpecFetchFailed(f"Failed to fetch {url}: {e}") from e
        return response

    @on_failure(fallback=dict)
    def get_spec_index(self) -> dict[str, list[str]]:
        """Fetch index.json."""
        url = self.url(INDEX_FILENAME)
        response = self._get(url)
        try:
            index = response.json()
        except ValueError as e:
            raise SpecParseFailed(f"Invalid index at {url}: {e}") from e
        if not isinstance(index, dict) or not all(isinstance(files, list) for files in index.values()):
            raise SpecParseFailed(f"Invalid index at {url}: expected {{language: [filenames]}}")
        return index

    @on_failure(fallback=fallback_languages)
    def get_available_languages(self) -> AvailableLanguages:
        """Languages declared in i18n.json."""
        config = self._get(self.url(CONFIG_FILENAME)).json()
        source = config["locale"]["source"]
        targets = list(config["locale"]["targets"])
        return AvailableLanguages(source=source, targets=targets, all=[source, *targets])

    def get_browser_language(self) -> str:
        return primary_language(self.browser_language)

    @on_failure(fallback=lambda: DEFAULT_SOURCE_LANGUAGE)
    def get_default_language(self) -> str:
        """Browser language if the project has it, else the source language."""
        languages = self.get_available_languages()
        browser_lang = self.get_browser_language()
        return browser_lang if browser_lang in languages.all else languages.source

    @on_failure(fallback=lambda: None)
    def get_default_spec(self) -> Optional[str]:
        """First spec file (alphabetically) of the default language."""
        index = self.get_spec_index()
        specs = index.get(self.get_default_language()) or []
        return specs[0] if specs else None

    @on_failure()
    def load_spec(self, language: str, filename: str) -> dict:
        """Fetch, parse and dereference one spec.

        Raises:
            SpecFetchFailed, SpecParseFailed, SpecDereferenceFailed
        """
        text = self._get(self.url("i18n", language, filename)).text
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SpecParseFailed(f"Invalid YAML in {filename}: {e}") from e
        if not isinstance(parsed, dict):
            raise SpecParseFailed(f"{filename} is not an OpenAPI document")
        return dereference(parsed)


def dereference(document: dict) -> dict:
    """Inline every internal ``$ref`` of a parsed document."""
    try:
        return jsonref.replace_refs(document, proxies=False, lazy_load=False)
    except (jsonref.JsonRefError, RecursionError) as e:
        raise SpecDereferenceFailed(f"Could not resolve references: {e}") from e
