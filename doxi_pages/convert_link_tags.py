"""Logic for converting {@link} tags into HTML anchors."""

import re

from doxi_pages.inline_tags import LINK_TAG_RE, link_tag_from_match
from doxi_pages.link_href import link_html


def convert_link_tags(html: str) -> str:
    """Convert JavaDoc-style links into HTML anchors."""
    if not html:
        return ""

    def repl(m: re.Match) -> str:
        return link_html(link_tag_from_match(m))

    return LINK_TAG_RE.sub(repl, html)
