"""Jinja2 environment shared by the layout and the page components."""

import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def format_date(value: datetime.date) -> str:
    return f"{value:%B} {value.day}, {value.year}"


jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
    keep_trailing_newline=True,
)
jinja_env.filters["format_date"] = format_date


def render_template(template_name: str, **context) -> Markup:
    """Render a template to markup that later templates insert unescaped."""
    return Markup(jinja_env.get_template(template_name).render(**context))
