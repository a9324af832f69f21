"""
Stories : aperçu isolé de chaque composant avec des données de démonstration.

Registry manuel (ordre d'affichage = ordre de déclaration).
GET /admin/features/        → liste des stories
GET /admin/features/{name}/ → rendu du composant + fixture
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from pydantic import BaseModel

from .blocks import ButtonProps, CheckboxProps, HeaderProps, HeroProps, InputProps
from .renderer.html import render_button, render_checkbox, render_header, render_hero, render_input


@dataclass(frozen=True)
class Story:
    name: str
    description: str
    fixture: Callable[[], BaseModel]
    render: Callable[[BaseModel], str]
    stylesheets: List[str] = field(default_factory=list)


# ── Fixtures ───────────────────────────────────────────────────────────────────

def button_fixture() -> ButtonProps:
    return ButtonProps(
        href="/example",
        text="Example Button",
        aria_label="Example button for demonstration",
    )


def header_fixture() -> HeaderProps:
    return HeaderProps(
        headline="Sample Header Component",
        button=ButtonProps(
            href="https://www.google.com",
            text="Click Me",
            aria_label="Navigate to Google",
        ),
    )


def hero_fixture() -> HeroProps:
    return HeroProps(
        headline="Sample Hero Headline",
        subheadline="A short supporting sentence under the headline",
    )


def input_fixture() -> InputProps:
    return InputProps(
        label="Email Address",
        name="email",
        input_type="email",
        placeholder="you@example.com",
        required=True,
    )


def checkbox_fixture() -> CheckboxProps:
    return CheckboxProps(
        label="Send me product updates and announcements",
        name="newsletter",
        value="subscribe",
    )


# ── Registry ───────────────────────────────────────────────────────────────────

_STORIES: List[Story] = [
    Story(
        name="button",
        description="Interactive button component with link and accessibility features.",
        fixture=button_fixture,
        render=render_button,
        stylesheets=["/features/button/styles.css"],
    ),
    Story(
        name="header",
        description="Page header with headline and call-to-action button.",
        fixture=header_fixture,
        render=render_header,
        stylesheets=["/features/header/styles.css", "/features/button/styles.css"],
    ),
    Story(
        name="hero",
        description="Hero section with headline and subheadline.",
        fixture=hero_fixture,
        render=render_hero,
        stylesheets=["/features/hero/styles.css"],
    ),
    Story(
        name="input",
        description="Form input field with label, validation, and accessibility features.",
        fixture=input_fixture,
        render=render_input,
    ),
    Story(
        name="checkbox",
        description="Checkbox input field with label, checked state, and accessibility features.",
        fixture=checkbox_fixture,
        render=render_checkbox,
    ),
]


def get_all_stories() -> List[Story]:
    return list(_STORIES)


def get_story(name: str) -> Optional[Story]:
    return next((s for s in _STORIES if s.name == name), None)
