"""Tests for the inline tag grammar and the link/image rewriters."""

from doxi_pages.convert_image_tags import convert_image_tags
from doxi_pages.convert_link_tags import convert_link_tags
from doxi_pages.inline_tags import parse_inline_tag
from doxi_pages.link_href import link_href, member_name, normalize_target
from doxi_pages.models import ImageTag, LinkTag, NoMatch


def test_parse_link_tag() -> None:
    """Verify link tags parse into target and optional label."""
    assert parse_inline_tag("{@link Foo}") == LinkTag("Foo")
    assert parse_inline_tag("{@link Foo#bar Custom Label}") == LinkTag(
        "Foo#bar", "Custom Label"
    )
    assert parse_inline_tag("`{@link Foo}`") == LinkTag("Foo")


def test_parse_image_tag() -> None:
    """Verify image tags parse into source and optional caption."""
    assert parse_inline_tag("{@img pic.png}") == ImageTag("pic.png")
    assert parse_inline_tag("{@img pic.png A caption}") == ImageTag(
        "pic.png", "A caption"
    )


def test_parse_no_match() -> None:
    """Verify malformed tags are reported as NoMatch."""
    assert parse_inline_tag("{@link}") == NoMatch("{@link}")
    assert parse_inline_tag("{@link Foo") == NoMatch("{@link Foo")
    assert parse_inline_tag("{@see Foo}") == NoMatch("{@see Foo}")
    assert parse_inline_tag("plain text") == NoMatch("plain text")


def test_parse_escaped_newline_separator() -> None:
    """Verify the escaped newline token separates tag arguments."""
    assert parse_inline_tag("{@link\\nFoo\\nLabel}") == LinkTag("Foo", "Label")
    assert parse_inline_tag("{@img\\npic.png}") == ImageTag("pic.png")


def test_normalize_target() -> None:
    """Verify scope separators become hyphens."""
    assert normalize_target("MyClass!method1") == "MyClass-method1"
    assert normalize_target(" Foo ") == "Foo"


def test_member_name() -> None:
    """Verify the member-local name is taken after the last hyphen."""
    assert member_name("MyClass-method1") == "method1"
    assert member_name("Ext.Button-cfg-text") == "text"
    assert member_name("Foo#bar") == "bar"
    assert member_name("Foo") == "Foo"


def test_link_href() -> None:
    """Verify fragment handling in link targets."""
    assert link_href("Foo#bar") == "Foo.html#bar"
    assert link_href("MyClass-method1") == "MyClass-method1.html"


def test_link_href_leading_fragment_quirk() -> None:
    """A target starting with '#' gets '.html' appended like any other target."""
    assert link_href("#anchor") == "#anchor.html"


def test_convert_link_tags() -> None:
    """Verify link tags are rewritten into anchors."""
    assert convert_link_tags("{@link Foo#bar}") == '<a href="Foo.html#bar">bar</a>'
    assert (
        convert_link_tags("{@link MyClass!method1}")
        == '<a href="MyClass-method1.html">method1</a>'
    )
    assert (
        convert_link_tags("{@link Foo#bar Custom Label}")
        == '<a href="Foo.html#bar">Custom Label</a>'
    )
    assert convert_link_tags("{@link #anchor}") == '<a href="#anchor.html">anchor</a>'


def test_convert_link_tags_strips_wrapping_quotes() -> None:
    """Verify stray quotes and backticks around a tag are consumed."""
    text = "See `{@link Foo}` and '{@link Bar}'."
    assert (
        convert_link_tags(text)
        == 'See <a href="Foo.html">Foo</a> and <a href="Bar.html">Bar</a>.'
    )


def test_convert_link_tags_in_html() -> None:
    """Verify several tags inside markup are all rewritten."""
    html = "<p>Use {@link Ext.Panel} or {@link Ext.Window!show the show method}.</p>"
    assert convert_link_tags(html) == (
        '<p>Use <a href="Ext.Panel.html">Ext.Panel</a> or '
        '<a href="Ext.Window-show.html">the show method</a>.</p>'
    )


def test_convert_link_tags_escaped_newline() -> None:
    """Verify tags split by an escaped newline token are rewritten."""
    assert (
        convert_link_tags("{@link Foo\\nLabel}") == '<a href="Foo.html">Label</a>'
    )


def test_convert_link_tags_leaves_malformed_tags() -> None:
    """Verify incomplete tags are left untouched."""
    assert convert_link_tags("{@link} and {@link Foo") == "{@link} and {@link Foo"
    assert convert_link_tags("") == ""


def test_convert_image_tags() -> None:
    """Verify image tags are rewritten into img elements."""
    assert convert_image_tags("{@img /path/pic.png}") == '<img src="/path/pic.png" />'
    assert (
        convert_image_tags("<p>{@img pic.png Caption text}</p>")
        == '<p><img src="pic.png" /></p>'
    )


def test_tag_rewrites_are_idempotent() -> None:
    """Verify running the rewrite passes again changes nothing."""
    text = "<p>{@link Foo#bar} {@img a.png} {@link A!b Label}</p>"
    once = convert_image_tags(convert_link_tags(text))
    twice = convert_image_tags(convert_link_tags(once))
    assert once == twice
