"""
homepage_cms : homepage composée de blocs typés + admin d'édition.

Usage :
    >>> from homepage_cms import ContentStore, Settings, render_homepage
    >>> store = ContentStore(Settings.from_dir("/srv/site"))
    >>> html = render_homepage(store.load_or_default("homepage"))

Contenu persisté en JSON : data/routes.json (index) → data/content/{route}.json.
"""

# ── Blocs ─────────────────────────────────────────────────────────────────────
from .blocks import (
    Block,
    BLOCK_TYPES,
    ButtonProps,
    HeaderBlock,
    HeaderProps,
    HeroBlock,
    HeroProps,
    InputProps,
    CheckboxProps,
)

# ── Persistance ───────────────────────────────────────────────────────────────
from .core import (
    Settings,
    BlockWithId,
    ContentDocument,
    HomepageData,
    Route,
    default_blocks,
    default_routes,
    ensure_block_ids,
    ContentStore,
    ContentError,
    RouteError,
    RouteNotFound,
    NoContentPath,
    SerializationError,
    IoError,
)

# ── Rendu ─────────────────────────────────────────────────────────────────────
from .renderer import render_block, render_homepage

__version__ = "0.1.0"

__all__ = [
    # Blocs
    "Block", "BLOCK_TYPES",
    "ButtonProps", "HeaderBlock", "HeaderProps", "HeroBlock", "HeroProps",
    "InputProps", "CheckboxProps",
    # Persistance
    "Settings", "BlockWithId", "ContentDocument", "HomepageData", "Route",
    "default_blocks", "default_routes", "ensure_block_ids", "ContentStore",
    "ContentError", "RouteError", "RouteNotFound", "NoContentPath",
    "SerializationError", "IoError",
    # Rendu
    "render_block", "render_homepage",
]
