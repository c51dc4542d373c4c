"""
Translation backends.

The orchestration code never talks to lingo.dev directly; it goes through
the ``Translator`` interface so tests (and offline runs) can swap in
``DummyTranslator``.
"""

from docslingo.translate.base import (
    AuthStatus,
    DummyTranslator,
    TranslationResult,
    Translator,
    create_translator,
)
from docslingo.translate.lingo import LingoTranslator

__all__ = [
    "AuthStatus",
    "DummyTranslator",
    "LingoTranslator",
    "TranslationResult",
    "Translator",
    "create_translator",
]
