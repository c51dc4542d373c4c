"""
Translation runner: invoke the translator with a bounded number of attempts.

The translation scope comes from i18n.json, which the backend reads itself;
the target list is only used to report where the output went.
"""

from __future__ import annotations

import logging

from docslingo.config import TRANSLATION_ATTEMPTS, ProjectConfig
from docslingo.errors import TranslationFailed
from docslingo.status import StatusCallback, silent
from docslingo.translate.base import TranslationResult, Translator

logger = logging.getLogger(__name__)


class TranslationRunner:
    """Run the translator, retrying immediately on failure."""

    def __init__(
        self,
        translator: Translator,
        config: ProjectConfig,
        max_attempts: int = TRANSLATION_ATTEMPTS,
        notify: StatusCallback | None = None,
    ):
        self.translator = translator
        self.config = config
        self.max_attempts = max_attempts
        self.notify = notify or silent

    def run(self, targets: list[str]) -> TranslationResult:
        """Translate the project.

        Args:
            targets: Target languages (for reporting only)

        Returns:
            The successful TranslationResult

        Raises:
            TranslationFailed: If every attempt fails
        """
        for attempt in range(1, self.max_attempts + 1):
            result = self.translator.run(self.config)
            if result.success:
                logger.info("Translated into %s on attempt %d", ", ".join(targets), attempt)
                self.notify("ok", "Translation complete")
                return result

            logger.debug("Attempt %d failed: %s", attempt, result.metadata)
            if attempt < self.max_attempts:
                self.notify("warn", f"Translation failed. Retrying ({attempt}/{self.max_attempts})...")

        raise TranslationFailed(
            f"Translation failed after {self.max_attempts} attempts.",
            hint="Please try running manually: npx lingo.dev@latest run",
        )
