"""
Generate pipeline for Docslingo.

This module orchestrates the complete ``generate`` workflow:
1. Check that the translator is authenticated (login if needed)
2. Copy the user's spec into the project tree
3. Write i18n.json for the requested languages
4. Run the translation

Design Philosophy:
- Strictly sequential: each stage finishes before the next starts
- Any error aborts the remaining stages (the CLI turns it into an exit code)
- The translator is injected so the pipeline can run without lingo.dev
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from docslingo.auth import AuthChecker
from docslingo.config import DEFAULT_SOURCE_LANGUAGE, ProjectConfig
from docslingo.locales import write_locale_config
from docslingo.project import setup_spec
from docslingo.runner import TranslationRunner
from docslingo.status import StatusCallback, silent
from docslingo.translate.base import Translator


@dataclass
class GenerateResult:
    """Result of running the generate pipeline.

    Attributes:
        source: Source language
        targets: Target languages, in the order given by the user
        outputs: Expected location of each translated spec
    """
    source: str
    targets: list[str]
    outputs: list[Path] = field(default_factory=list)


class GeneratePipeline:
    """Auth check, setup, config and translation, in that order.

    Usage:
        pipeline = GeneratePipeline(ProjectConfig(), create_translator("lingo"))
        result = pipeline.run("openapi.yaml", "es,fr")
        for path in result.outputs:
            print(path)
    """

    def __init__(
        self,
        config: ProjectConfig,
        translator: Translator,
        notify: StatusCallback | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.translator = translator
        self.notify = notify or silent
        self.auth = AuthChecker(translator, notify=self.notify, sleep=sleep)
        self.runner = TranslationRunner(translator, config, notify=self.notify)

    def run(
        self,
        spec_path: str | Path,
        languages: str,
        source: str = DEFAULT_SOURCE_LANGUAGE,
    ) -> GenerateResult:
        self.auth.ensure_authenticated()

        setup_spec(self.config, spec_path, source)
        self.notify("ok", "Project setup complete")

        targets = write_locale_config(self.config, languages, source)
        self.notify("ok", f"Config generated for: {', '.join(targets)}")

        self.runner.run(targets)

        return GenerateResult(
            source=source,
            targets=targets,
            outputs=[self.config.spec_path(lang) for lang in targets],
        )
