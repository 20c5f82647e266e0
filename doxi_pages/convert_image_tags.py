"""Logic for converting {@img} tags into HTML images."""

import re

from doxi_pages.inline_tags import IMG_TAG_RE, image_tag_from_match


def convert_image_tags(html: str) -> str:
    """Convert JavaDoc-style images into HTML image elements."""
    if not html:
        return ""

    def repl(m: re.Match) -> str:
        return f'<img src="{image_tag_from_match(m).source}" />'

    return IMG_TAG_RE.sub(repl, html)
