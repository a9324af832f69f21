"""Core : schémas persistés, configuration, erreurs et stockage fichier."""
from .config import CONTENT_DIR, HOMEPAGE_ROUTE, Settings, content_path_for
from .errors import (
    ContentError,
    RouteError,
    RouteNotFound,
    NoContentPath,
    SerializationError,
    IoError,
)
from .schemas import BlockWithId, ContentDocument, HomepageData, Route, default_blocks
from .persistence import ContentStore, default_routes, ensure_block_ids

__all__ = [
    "CONTENT_DIR",
    "HOMEPAGE_ROUTE",
    "Settings",
    "content_path_for",
    "ContentError",
    "RouteError",
    "RouteNotFound",
    "NoContentPath",
    "SerializationError",
    "IoError",
    "BlockWithId",
    "ContentDocument",
    "HomepageData",
    "Route",
    "default_blocks",
    "ContentStore",
    "default_routes",
    "ensure_block_ids",
]
