"""
template.py

Responsibility: Locate the example project item inside the page template and
splice rendered items back in its place.

The page template must contain two literal sentinel markers. Everything between
them is the example item; it is used as the item template and then discarded
from the output page.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

START_MARKER = "<!-- PROJECT_ITEMS_PLACEHOLDER -->"
END_MARKER = "<!-- END_PROJECT_ITEM_TEMPLATE -->"

# Items are joined on a newline plus the indentation of the sample page.
ITEM_SEPARATOR = "\n        "


class TemplateError(ValueError):
    pass


@dataclass(frozen=True)
class PageTemplate:
    """Full page template plus the marker offsets found in it."""

    text: str
    start: int
    end: int
    item_template: str


def parse_page_template(text: str) -> PageTemplate:
    start = text.find(START_MARKER)
    end = text.find(END_MARKER)

    missing = [m for m, pos in ((START_MARKER, start), (END_MARKER, end)) if pos == -1]
    if missing:
        raise TemplateError(
            f"Template placeholders not found: {', '.join(missing)}. "
            f"Make sure the page template contains {START_MARKER} and {END_MARKER}"
        )

    body_start = start + len(START_MARKER)
    if end < body_start:
        raise TemplateError(f"{END_MARKER} must come after {START_MARKER} in the page template")

    return PageTemplate(
        text=text,
        start=start,
        end=end,
        item_template=text[body_start:end].strip(),
    )


def extract_item_template(text: str) -> str:
    return parse_page_template(text).item_template


def load_page_template(template_path: str | Path) -> PageTemplate:
    path = Path(template_path)
    if not path.exists() or not path.is_file():
        raise TemplateError(f"Page template not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"Could not read page template {path}: {e}") from e
    return parse_page_template(text)


def assemble_page(page: PageTemplate, items: list[str]) -> str:
    """
    Replace the example item (markers excluded) with the rendered items.

    Both markers are kept so the output can serve as a template again.
    """
    if not items:
        raise ValueError("assemble_page requires at least one rendered item")

    before = page.text[: page.start + len(START_MARKER)]
    after = page.text[page.end :]
    return before + ITEM_SEPARATOR + ITEM_SEPARATOR.join(items) + ITEM_SEPARATOR + after
