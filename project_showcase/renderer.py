"""
renderer.py

Responsibility: Fill the item template with one repository's metadata.

Rules:
- Placeholders are written `{{TOKEN}}`; every occurrence is replaced.
- Jinja2 only performs the substitution (autoescape off, strict undefined, no
  block or comment tags): values are escaped here, before rendering, so
  trusted fields stay untouched.
- Untrusted free text (name, description, language) is always HTML-escaped.

This module intentionally does NOT know about GitHub, files, or CLI parsing.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from project_showcase.github_client import RepositoryMetadata

DEFAULT_DESCRIPTION = "No description available"
DEFAULT_LANGUAGE = "Unknown"
MAX_DESCRIPTION_LENGTH = 120
ELLIPSIS = "..."

LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#2b7489",
    "Python": "#3572A5",
    "Java": "#b07219",
    "C#": "#239120",
    "C++": "#f34b7d",
    "C": "#555555",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "PHP": "#4F5D95",
    "Ruby": "#701516",
    "Swift": "#ffac45",
    "Kotlin": "#A97BFF",
    "Dart": "#00B4AB",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Shell": "#89e051",
    "PowerShell": "#012456",
    "Dockerfile": "#384d54",
    DEFAULT_LANGUAGE: "#cccccc",
}

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)

# Only `{{TOKEN}}` is live: block and comment delimiters are set to sequences
# an HTML page cannot contain, so `{%` and `{#` in the markup stay literal.
_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    block_start_string="\x00{%",
    block_end_string="%}\x00",
    comment_start_string="\x00{#",
    comment_end_string="#}\x00",
)


class RenderError(RuntimeError):
    pass


def escape_html(text: str) -> str:
    return text.translate(_HTML_ESCAPES)


def language_color(language: str) -> str:
    return LANGUAGE_COLORS.get(language, LANGUAGE_COLORS[DEFAULT_LANGUAGE])


def truncate_description(description: str | None) -> str:
    text = description or DEFAULT_DESCRIPTION
    if len(text) > MAX_DESCRIPTION_LENGTH:
        return text[:MAX_DESCRIPTION_LENGTH] + ELLIPSIS
    return text


def format_date(value: datetime) -> str:
    """Short US-style date, e.g. `Jan 5, 2024`, taken in UTC and locale independent."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def compile_item_template(text: str) -> Template:
    try:
        return _env.from_string(text)
    except TemplateError as e:
        raise RenderError(f"Item template is not valid: {e}") from e


def build_context(project: RepositoryMetadata, *, escape_url: bool = False) -> dict[str, Any]:
    language = project.language or DEFAULT_LANGUAGE
    return {
        "PROJECT_URL": escape_html(project.html_url) if escape_url else project.html_url,
        "PROJECT_NAME": escape_html(project.name),
        "PROJECT_DESCRIPTION": escape_html(truncate_description(project.description)),
        "LANGUAGE": escape_html(language),
        "LANGUAGE_COLOR": language_color(language),
        "STARS": str(project.stars or 0),
        "FORKS": str(project.forks or 0),
        "UPDATED_DATE": format_date(project.updated_at),
    }


def render_item(
    project: RepositoryMetadata,
    template: Template | str,
    *,
    escape_url: bool = False,
) -> str:
    if isinstance(template, str):
        template = compile_item_template(template)
    try:
        return template.render(**build_context(project, escape_url=escape_url))
    except TemplateError as e:
        raise RenderError(f"Failed rendering item for {project.name}: {e}") from e


def render_items(
    projects: list[RepositoryMetadata],
    item_template: str,
    *,
    escape_url: bool = False,
) -> list[str]:
    """Render every project with one compiled copy of the item template."""
    template = compile_item_template(item_template)
    return [render_item(p, template, escape_url=escape_url) for p in projects]
