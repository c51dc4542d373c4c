"""
Interface labels for the viewer, localized to the active spec language.

The English catalog below is the source. When LINGODOTDEV_API_KEY is set,
each other locale is translated once with the lingo.dev SDK and kept for the
life of the server. Without a key, or when translation fails, the English
labels are used.

Usage:
    catalog = LabelCatalog(LingoLabelTranslator(api_key))
    await catalog.prepare("es")
    catalog.get("es")["parameters"]
"""

from __future__ import annotations

import asyncio
import logging
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

LABEL_LOCALE = "en"

LABELS: dict[str, str] = {
    "api_documentation": "API Documentation",
    "loading": "Loading API documentation...",
    "load_failed": "Failed to load documentation",
    "generate_hint": "Make sure you've run `docslingo generate` first.",
    "unknown_error": "Unknown error",
    "language": "Language:",
    "endpoints": "Endpoints",
    "no_endpoints": "No endpoints found",
    "overview": "Overview",
    "parameters": "Parameters",
    "request_body": "Request Body",
    "required": "Required",
    "responses": "Responses",
    "content_types": "Content Types:",
    "name": "Name",
    "type": "Type",
    "in": "In",
    "description": "Description",
    "yes": "Yes",
    "no": "No",
}


class LingoLabelTranslator:
    """Translate a label catalog with the lingo.dev SDK."""

    def __init__(self, api_key: str, fast: bool = True):
        self.api_key = api_key
        self.fast = fast

    async def translate(self, labels: Mapping[str, str], source_locale: str, target_locale: str) -> dict[str, str]:
        from lingodotdev import LingoDotDevEngine

        params = {
            "source_locale": source_locale,
            "target_locale": target_locale,
            "fast": self.fast,
        }
        async with LingoDotDevEngine({"api_key": self.api_key}) as engine:
            texts = await asyncio.gather(
                *(engine.localize_text(text, params) for text in labels.values())
            )
        return dict(zip(labels, texts))


class LabelCatalog:
    """Per-locale label sets, filled on demand by a translator.

    Args:
        translator: Object with an async ``translate(labels, source, target)``;
            None keeps every locale in English
        labels: Source catalog (defaults to LABELS)
        source_locale: Locale the source catalog is written in
    """

    def __init__(self, translator=None, labels: Optional[Mapping[str, str]] = None, source_locale: str = LABEL_LOCALE):
        self.translator = translator
        self.labels = dict(labels or LABELS)
        self.source_locale = source_locale
        self._locales: dict[str, dict[str, str]] = {source_locale: self.labels}

    def get(self, locale: Optional[str]) -> dict[str, str]:
        return self._locales.get(locale or self.source_locale, self.labels)

    def has(self, locale: str) -> bool:
        return locale in self._locales

    async def prepare(self, locale: Optional[str]) -> None:
        """Translate the catalog into ``locale`` unless it is already known."""
        if not locale or self.has(locale) or self.translator is None:
            return
        try:
            translated = await self.translator.translate(self.labels, self.source_locale, locale)
        except Exception as e:
            # not cached, so the next page load tries again
            logger.warning("Could not localize interface labels to %s: %s", locale, e)
            return

        # missing or empty translations keep the English text
        self._locales[locale] = {
            key: translated.get(key) or text for key, text in self.labels.items()
        }
        logger.info("Interface labels localized to %s", locale)
