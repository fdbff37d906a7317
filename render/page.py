from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

if TYPE_CHECKING:
    from services.pipeline import RenderedPage

PAGE_TITLE = "Hydrometeorological monitoring stations"

_environment = Environment(
    loader=FileSystemLoader(str(Path(__file__).resolve().parent / "templates")),
    autoescape=select_autoescape(["html"]),
)


def render_page(page: "RenderedPage", title: str = PAGE_TITLE) -> str:
    """Render the map and charts into a standalone HTML document."""
    return _environment.get_template("index.html").render(title=title, page=page)
