"""Renderer HTML des blocs, composants et pages d'admin."""
from .html import (
    render_block,
    render_button,
    render_header,
    render_hero,
    render_input,
    render_checkbox,
    render_homepage,
)

__all__ = [
    "render_block",
    "render_button",
    "render_header",
    "render_hero",
    "render_input",
    "render_checkbox",
    "render_homepage",
]
