"""
Persistance JSON des blocs et des routes, sur disque local.

Fonctions exposées (via ContentStore) :
  resolve_content_path(route_name) -> Path            (RouteNotFound | NoContentPath)
  content_path(route)              -> Path            (NoContentPath)
  load_blocks(route_name)          -> list            (jamais d'exception, [] si échec)
  load_route_blocks(route)         -> list            (idem, index non relu)
  load_or_default(route_name)      -> list            ([] remplacé par default_blocks())
  save_blocks(route_name, blocks)  -> None            (erreurs propagées)
  load_routes()                    -> list[Route]     (default_routes() si échec)
  save_routes(routes)              -> None            (erreurs propagées)

L'index des routes est relu à chaque appel : pas de cache, pas de verrou.
Deux écritures concurrentes sur la même route : la dernière gagne.
"""
import logging
import os
import stat
import tempfile
import uuid
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .config import HOMEPAGE_ROUTE, Settings, content_path_for
from .errors import IoError, NoContentPath, RouteNotFound, SerializationError
from .schemas import BlockWithId, ContentDocument, Route, default_blocks

log = logging.getLogger(__name__)

_ROUTES = TypeAdapter(List[Route])


def default_routes() -> List[Route]:
    """Index utilisé quand routes.json est absent, vide ou invalide."""
    return [Route(path="/", name=HOMEPAGE_ROUTE, block_ids=[content_path_for(HOMEPAGE_ROUTE)])]


def ensure_block_ids(blocks: Sequence[BlockWithId]) -> List[BlockWithId]:
    """
    Attribue un UUID v4 neuf à chaque bloc sans id ; les autres sont conservés.
    Aucun contrôle d'unicité (ni entre blocs, ni avec le fichier existant).
    """
    return [
        b if b.id else b.model_copy(update={"id": str(uuid.uuid4())})
        for b in blocks
    ]


def _target_mode(path: Path) -> int:
    """Mode du fichier remplacé, sinon le défaut d'un open() classique (0666 & ~umask)."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_atomic(path: Path, text: str) -> None:
    """Remplace le fichier en un seul rename : un lecteur voit l'ancien ou le nouveau."""
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        # mkstemp crée en 0600
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


class ContentStore:
    """Stockage fichier des documents de contenu, indexés par nom de route."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @classmethod
    def from_env(cls) -> "ContentStore":
        return cls(Settings.from_env())

    # ── Routes ─────────────────────────────────────────────────────────────────

    def load_routes(self) -> List[Route]:
        path = self.settings.routes_path
        try:
            contents = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return default_routes()
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Lecture impossible de %s : %s", path, e)
            return default_routes()

        if not contents.strip():
            return default_routes()

        try:
            return _ROUTES.validate_json(contents)
        except ValidationError as e:
            log.warning("routes.json invalide (%s) : %s", path, e)
            return default_routes()

    def save_routes(self, routes: Sequence[Route]) -> None:
        path = self.settings.routes_path
        try:
            data = _ROUTES.dump_json(list(routes), indent=2, by_alias=True).decode("utf-8")
        except (ValidationError, PydanticSerializationError) as e:
            raise SerializationError(str(e)) from e
        try:
            _write_atomic(path, data)
        except OSError as e:
            raise IoError(f"{path}: {e}") from e
        log.info("Routes enregistrées : %d entrées → %s", len(routes), path)

    def find_route(self, route_name: str) -> Optional[Route]:
        """Première route portant ce nom (unicité des noms non vérifiée)."""
        return next((r for r in self.load_routes() if r.name == route_name), None)

    def content_path(self, route: Route) -> Path:
        if not route.block_ids:
            raise NoContentPath(route.name)
        # Seul le premier blockId est utilisé ; relatif → résolu depuis base_dir
        path = Path(route.block_ids[0])
        if not path.is_absolute():
            path = self.settings.base_dir / path
        return path

    def resolve_content_path(self, route_name: str) -> Path:
        route = self.find_route(route_name)
        if route is None:
            raise RouteNotFound(route_name)
        return self.content_path(route)

    # ── Blocs ──────────────────────────────────────────────────────────────────

    def load_blocks(self, route_name: str) -> List[BlockWithId]:
        try:
            path = self.resolve_content_path(route_name)
        except (RouteNotFound, NoContentPath) as e:
            log.warning("%s", e)
            return []
        return self._read_blocks(path)

    def load_route_blocks(self, route: Route) -> List[BlockWithId]:
        """Comme load_blocks, pour une route déjà trouvée (index non relu)."""
        try:
            path = self.content_path(route)
        except NoContentPath as e:
            log.warning("%s", e)
            return []
        return self._read_blocks(path)

    def _read_blocks(self, path: Path) -> List[BlockWithId]:
        try:
            contents = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            # Attendu au premier lancement
            return []
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Lecture impossible de %s : %s", path, e)
            return []

        try:
            document = ContentDocument.model_validate_json(contents)
        except ValidationError as e:
            log.warning("Contenu invalide dans %s : %s", path, e)
            return []
        return list(document.blocks)

    def load_or_default(self, route_name: str) -> List[BlockWithId]:
        """
        Comme load_blocks, mais un résultat vide devient default_blocks().
        Un document vidé volontairement est donc indiscernable d'un fichier absent.
        """
        return self.load_blocks(route_name) or default_blocks()

    def save_blocks(self, route_name: str, blocks: Sequence[BlockWithId]) -> None:
        """Remplace intégralement le document de la route (pas de fusion)."""
        path = self.resolve_content_path(route_name)

        try:
            document = ContentDocument(blocks=list(blocks))
            data = document.model_dump_json(indent=2)
        except (ValidationError, PydanticSerializationError) as e:
            raise SerializationError(str(e)) from e

        try:
            _write_atomic(path, data)
        except OSError as e:
            raise IoError(f"{path}: {e}") from e
        log.info("Route %s : %d blocs enregistrés → %s", route_name, len(document.blocks), path)
