"""
Restricted Markdown rendering for spec descriptions.

Descriptions come from the spec (and from machine translation), so only a
small subset is rendered: paragraphs, bullet/numbered lists and emphasis.
Raw HTML, links and images are left as escaped text.
"""

from __future__ import annotations

from markdown_it import MarkdownIt

_md = MarkdownIt("zero", {"html": False}).enable(["list", "emphasis"])


def render_markdown(text: str | None) -> str:
    """Render text to HTML limited to p, ul/ol/li, em and strong."""
    if not text:
        return ""
    return _md.render(text)
