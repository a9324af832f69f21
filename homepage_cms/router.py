"""
Router FastAPI : page publique + admin (routes, éditeur, API, stories).

GET  /                        → homepage (load_or_default)
GET  /admin                   → index admin
GET  /admin/route/            → liste des routes
GET  /admin/route/{name}/     → éditeur de la route
GET  /admin/api/{name}        → {"blocks": [...]}
POST /admin/api/{name}        → ContentDocument → ids complétés + enregistrement
GET  /admin/routes.json       → index des routes
PUT  /admin/routes.json       → remplace l'index des routes
GET  /admin/features/         → liste des stories
GET  /admin/features/{name}/  → story
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse

from .core import (
    HOMEPAGE_ROUTE,
    ContentDocument,
    ContentError,
    ContentStore,
    Route,
    RouteError,
    ensure_block_ids,
)
from .renderer.html import (
    render_admin_index,
    render_editor,
    render_homepage,
    render_route_index,
    render_story_index,
    render_story_page,
)
from .stories import get_all_stories, get_story

log = logging.getLogger(__name__)
router = APIRouter(tags=["CMS"])


def get_store() -> ContentStore:
    """Store construit à chaque requête depuis l'environnement."""
    return ContentStore.from_env()


def _to_http(e: ContentError) -> HTTPException:
    if isinstance(e, RouteError):
        return HTTPException(404, str(e))
    log.error("Échec d'écriture : %s", e)
    return HTTPException(500, f"Échec de l'enregistrement : {e}")


# ── Pages publiques ────────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse)
def homepage(store: ContentStore = Depends(get_store)):
    return HTMLResponse(render_homepage(store.load_or_default(HOMEPAGE_ROUTE)))


# ── Admin : pages ──────────────────────────────────────────────────────────────

@router.get("/admin", response_class=HTMLResponse)
def admin_index():
    return HTMLResponse(render_admin_index())


@router.get("/admin/route/", response_class=HTMLResponse)
def admin_route_index(store: ContentStore = Depends(get_store)):
    return HTMLResponse(render_route_index(store.load_routes()))


@router.get("/admin/route/{name}/", response_class=HTMLResponse)
def admin_route_page(name: str, store: ContentStore = Depends(get_store)):
    route = store.find_route(name)
    if route is None:
        raise HTTPException(404, f"Route '{name}' introuvable")
    document = ContentDocument(blocks=store.load_route_blocks(route))
    return HTMLResponse(render_editor(route, document))


# ── Admin : API ────────────────────────────────────────────────────────────────

@router.get("/admin/routes.json")
def get_routes(store: ContentStore = Depends(get_store)):
    routes = store.load_routes()
    return JSONResponse([r.model_dump(by_alias=True) for r in routes])


@router.put("/admin/routes.json")
def put_routes(routes: List[Route], store: ContentStore = Depends(get_store)):
    try:
        store.save_routes(routes)
    except ContentError as e:
        raise _to_http(e)
    return {"ok": True, "count": len(routes)}


@router.get("/admin/api/{name}")
def get_route_content(name: str, store: ContentStore = Depends(get_store)):
    document = ContentDocument(blocks=store.load_blocks(name))
    return JSONResponse(document.model_dump(mode="json"))


@router.post("/admin/api/{name}")
def update_route_content(name: str, document: ContentDocument, store: ContentStore = Depends(get_store)):
    """Complète les ids manquants puis remplace le document de la route."""
    blocks = ensure_block_ids(document.blocks)
    try:
        store.save_blocks(name, blocks)
    except ContentError as e:
        raise _to_http(e)
    return JSONResponse(ContentDocument(blocks=blocks).model_dump(mode="json"))


# ── Admin : stories ────────────────────────────────────────────────────────────

@router.get("/admin/features/", response_class=HTMLResponse)
def features_index():
    return HTMLResponse(render_story_index(get_all_stories()))


@router.get("/admin/features/{name}/", response_class=HTMLResponse)
def feature_story(name: str):
    story = get_story(name)
    if story is None:
        raise HTTPException(404, f"Story '{name}' introuvable")
    return HTMLResponse(render_story_page(story))
