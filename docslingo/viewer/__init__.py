"""
Spec browser for translated OpenAPI documents.

The loader, state machine and markdown renderer have no UI dependency;
only ``docslingo.viewer.app`` and ``components`` import NiceGUI.
"""

from docslingo.viewer.labels import LabelCatalog
from docslingo.viewer.loader import AvailableLanguages, SpecLoader
from docslingo.viewer.markdown import render_markdown
from docslingo.viewer.state import ViewerState, ViewerStateMachine, ViewStatus

__all__ = [
    "AvailableLanguages",
    "LabelCatalog",
    "SpecLoader",
    "render_markdown",
    "ViewerState",
    "ViewerStateMachine",
    "ViewStatus",
]
