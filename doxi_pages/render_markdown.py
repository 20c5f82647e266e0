"""Markdown rendering of Doxi text blocks.

Fenced and indented code blocks are highlighted by the ``codehilite``
extension, which guesses the language and falls back to plain text when
Pygments cannot classify a block. Inline code spans get the same treatment
from ``InlineCodeExtension``.
"""

import html
import xml.etree.ElementTree as etree

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from doxi_pages.highlight_code import highlight_inline


class InlineCodeHighlighter(Treeprocessor):
    """Replace the text of inline ``<code>`` elements with highlighted HTML."""

    def run(self, root: etree.Element) -> None:
        for parent in root.iter():
            if parent.tag == "pre":
                continue
            for child in parent:
                if child.tag != "code" or not child.text:
                    continue
                # Backtick spans arrive already escaped.
                highlighted = highlight_inline(html.unescape(child.text))
                if highlighted is not None:
                    child.text = self.md.htmlStash.store(highlighted)


class InlineCodeExtension(Extension):
    """Register InlineCodeHighlighter after inline patterns have run."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.treeprocessors.register(
            InlineCodeHighlighter(md), "inline_code_highlight", priority=15
        )


_MD = markdown.Markdown(
    extensions=[
        "fenced_code",
        "tables",
        "codehilite",
        InlineCodeExtension(),
    ],
    extension_configs={
        "codehilite": {
            "css_class": "highlight",
            "guess_lang": True,
        }
    },
)


def render_markdown(text: str) -> str:
    """Render Markdown text to HTML."""
    if not text:
        return ""
    return _MD.reset().convert(text)
