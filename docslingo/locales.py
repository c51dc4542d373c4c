"""
Locale configuration (``i18n.json``) for the lingo.dev CLI.

The file tells lingo.dev which language the spec is written in, which
languages to produce, and which files to translate:

    {
      "$schema": "https://lingo.dev/schema/i18n.json",
      "version": "1.12",
      "locale": {"source": "en", "targets": ["es", "fr"]},
      "buckets": {"yaml": {"include": ["i18n/[locale]/*.yaml"]}}
    }

The same file is read back by the viewer to list the available languages.
"""

from __future__ import annotations

import json
import logging
import re

from docslingo.config import (
    CONFIG_SCHEMA_URL,
    CONFIG_VERSION,
    DEFAULT_SOURCE_LANGUAGE,
    INCLUDE_PATTERN,
    ProjectConfig,
)
from docslingo.errors import InvalidLocaleConfig, NoTargetLanguages

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")


def parse_languages(languages: str | None) -> list[str]:
    """Split a comma and/or whitespace separated list of language codes.

    Order is preserved and duplicates are kept.

    Example:
        >>> parse_languages("es, fr  de")
        ['es', 'fr', 'de']
    """
    if not languages:
        return []
    return [token.strip() for token in _SEPARATORS.split(languages) if token.strip()]


def build_locale_config(targets: list[str], source: str = DEFAULT_SOURCE_LANGUAGE) -> dict:
    """Build the lingo.dev configuration mapping."""
    return {
        "$schema": CONFIG_SCHEMA_URL,
        "version": CONFIG_VERSION,
        "locale": {
            "source": source,
            "targets": list(targets),
        },
        "buckets": {
            "yaml": {
                "include": [INCLUDE_PATTERN],
            },
        },
    }


def write_locale_config(
    config: ProjectConfig,
    languages: str,
    source: str = DEFAULT_SOURCE_LANGUAGE,
) -> list[str]:
    """Parse target languages and (over)write ``i18n.json``.

    Returns:
        The parsed target languages, in input order

    Raises:
        NoTargetLanguages: If no language code could be parsed. No file is
            written in that case.
    """
    targets = parse_languages(languages)
    if not targets:
        raise NoTargetLanguages("No target languages provided")

    config.root.mkdir(parents=True, exist_ok=True)
    payload = build_locale_config(targets, source)
    config.config_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.debug("Wrote %s: %s", config.config_path, payload["locale"])
    return targets


def read_locale_config(config: ProjectConfig) -> dict:
    """Load ``i18n.json`` from the project root.

    Raises:
        InvalidLocaleConfig: If the file is not a JSON object
    """
    try:
        payload = json.loads(config.config_path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise InvalidLocaleConfig(
            f"Invalid {config.config_path.name}: {e}",
            hint="Run docslingo generate again to rewrite it.",
        ) from e
    if not isinstance(payload, dict):
        raise InvalidLocaleConfig(
            f"Invalid {config.config_path.name}: expected a JSON object",
            hint="Run docslingo generate again to rewrite it.",
        )
    return payload
