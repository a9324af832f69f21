"""
Configuration du stockage : lue depuis l'environnement, passée explicitement.

  CMS_BASE_DIR     racine des chemins relatifs de blockIds (défaut : cwd)
  CMS_ROUTES_PATH  index des routes (défaut : <base_dir>/data/routes.json)
  CMS_LOG_LEVEL    niveau de log de l'application (défaut et valeur inconnue : INFO)
"""
import logging
import os
from pathlib import Path

from pydantic import BaseModel

HOMEPAGE_ROUTE = "homepage"
CONTENT_DIR = "data/content"


def content_path_for(route_name: str) -> str:
    """Chemin conventionnel (relatif) du fichier de contenu d'une route."""
    return f"{CONTENT_DIR}/{route_name}.json"


def _log_level(value: str) -> str:
    """Nom de niveau reconnu par logging, sinon INFO."""
    level = value.strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


class Settings(BaseModel):
    base_dir: Path
    routes_path: Path
    log_level: str = "INFO"

    @classmethod
    def from_dir(cls, base_dir: Path) -> "Settings":
        base_dir = Path(base_dir)
        return cls(base_dir=base_dir, routes_path=base_dir / "data" / "routes.json")

    @classmethod
    def from_env(cls) -> "Settings":
        """Relit l'environnement à chaque appel (pas de cache)."""
        base_dir = Path(os.getenv("CMS_BASE_DIR", os.getcwd()))
        routes_path = os.getenv("CMS_ROUTES_PATH")
        return cls(
            base_dir=base_dir,
            routes_path=Path(routes_path) if routes_path else base_dir / "data" / "routes.json",
            log_level=_log_level(os.getenv("CMS_LOG_LEVEL", "INFO")),
        )
