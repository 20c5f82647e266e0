"""Grammar for the JavaDoc-style inline tags found in Doxi text."""

import re

from doxi_pages.models import ImageTag, InlineTag, LinkTag, NoMatch

# Arguments are separated by whitespace or by an escaped newline token (\n).
LINK_TAG_RE = re.compile(
    r"['`]*\{\s*@link(?:\s+|\\n)(\S*?)(?:(?:\s+|\\n)(.+?))?\}['`]*"
)
IMG_TAG_RE = re.compile(r"\{\s*@img(?:\s+|\\n)(\S*?)(?:(?:\s+|\\n)(.+?))?\}['`]*")


def link_tag_from_match(m: re.Match) -> LinkTag:
    """Build a LinkTag from a LINK_TAG_RE match."""
    return LinkTag(target=m.group(1), label=m.group(2) or None)


def image_tag_from_match(m: re.Match) -> ImageTag:
    """Build an ImageTag from an IMG_TAG_RE match."""
    return ImageTag(source=m.group(1), caption=m.group(2) or None)


def parse_inline_tag(text: str) -> InlineTag:
    """Parse a single inline tag, returning NoMatch unless the whole text is a tag."""
    m = LINK_TAG_RE.fullmatch(text)
    if m:
        return link_tag_from_match(m)
    m = IMG_TAG_RE.fullmatch(text)
    if m:
        return image_tag_from_match(m)
    return NoMatch(text)
