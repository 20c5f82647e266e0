"""Resolution of cross-reference targets to page links."""

from doxi_pages.models import LinkTag


def normalize_target(target: str) -> str:
    """Replace scope separators (!) with hyphens and trim whitespace."""
    return target.replace("!", "-").strip()


def member_name(target: str) -> str:
    """Return the member-local name of a normalized target.

    This is the text after the last ``-``; a ``#fragment`` left in that tail
    contributes only its anchor name.
    """
    tail = target.rsplit("-", 1)[-1]
    name = tail.rsplit("#", 1)[-1]
    return name or tail or target


def link_href(target: str) -> str:
    """Resolve a normalized target to the href of its documentation page.

    ``Foo#bar`` points into ``Foo.html``. A target starting with ``#`` is not
    treated as a fragment and gets ``.html`` appended like any other target.
    """
    if "#" in target and not target.startswith("#"):
        return target.replace("#", ".html#", 1)
    return f"{target}.html"


def link_html(tag: LinkTag) -> str:
    """Render a LinkTag as an HTML anchor."""
    target = normalize_target(tag.target)
    label = tag.label or member_name(target)
    return f'<a href="{link_href(target)}">{label}</a>'
