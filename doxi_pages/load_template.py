"""Logic for loading the Jinja2 class page template."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "class.html.j2"


def load_template(path: Path | None = None) -> Template:
    """Load the class template from path, or the bundled one when path is None.

    Raises jinja2.TemplateNotFound or jinja2.TemplateSyntaxError when the
    template cannot be used.
    """
    if path is None:
        directory, name = TEMPLATE_DIR, DEFAULT_TEMPLATE
    else:
        directory, name = path.parent, path.name

    env = Environment(
        loader=FileSystemLoader(str(directory)),
        autoescape=select_autoescape(["html", "htm", "xml", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return env.get_template(name)
