"""The text transformation applied to every Doxi description."""

from doxi_pages.convert_image_tags import convert_image_tags
from doxi_pages.convert_link_tags import convert_link_tags
from doxi_pages.render_markdown import render_markdown


def prepare_text(text: str) -> str:
    """Mark up a text block and convert its JavaDoc-style tags to HTML."""
    text = render_markdown(text)
    text = convert_link_tags(text)
    return convert_image_tags(text)
