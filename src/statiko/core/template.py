"""Jinja2 page template loading and rendering"""

from dataclasses import asdict
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from statiko.core.models import TemplateData


def _make_env(template_dir: Path) -> Environment:
    # Fields are pre-rendered HTML; undefined names are errors, not blanks.
    return Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def load_template(path: Path) -> Template:
    """Load and compile a page template.

    Raises jinja2.TemplateNotFound for a missing file and
    jinja2.TemplateSyntaxError for malformed template source.
    """
    path = Path(path)
    return _make_env(path.parent).get_template(path.name)


def render_page(template: Template, data: TemplateData) -> str:
    """Substitute site_name, body and rel_root into template.

    Raises jinja2.UndefinedError when the template references any other name.
    """
    return template.render(**asdict(data))
