"""
Renderer HTML : page publique, composants et pages d'admin.

Dispatch des blocs par discriminant `type` via _BLOCK_RENDERERS (un renderer
par variante). Un type absent de la table lève LookupError : une nouvelle
variante ne peut pas disparaître silencieusement du rendu.
"""
import json
from html import escape
from typing import Any, Callable, Dict, List, Sequence, Union

from ..blocks import (
    BLOCK_TYPES,
    ButtonProps,
    CheckboxProps,
    HeaderBlock,
    HeaderProps,
    HeroBlock,
    HeroProps,
    InputProps,
)
from ..core.schemas import BlockWithId, ContentDocument, Route


def _e(value: Any) -> str:
    return escape(str(value), quote=True)


def _attr(name: str, value: Any) -> str:
    """Attribut optionnel : rien si None."""
    return f' {name}="{_e(value)}"' if value is not None else ""


# ── Composants ──────────────────────────────────────────────────────────────

def render_button(p: ButtonProps) -> str:
    return f'<a href="{_e(p.href)}" aria-label="{_e(p.aria_label)}" class="cta-button">{_e(p.text)}</a>'


def render_header(p: HeaderProps) -> str:
    return f"""<header class="header-block">
  <div class="container">
    <h1>{_e(p.headline)}</h1>
    {render_button(p.button)}
  </div>
</header>"""


def render_hero(p: HeroProps) -> str:
    return f"""<section class="hero-block">
  <div class="container">
    <h2>{_e(p.headline)}</h2>
    <p class="subheadline">{_e(p.subheadline)}</p>
  </div>
</section>"""


def _required_indicator(required: bool) -> str:
    return '<span class="required-indicator" aria-label="required"> *</span>' if required else ""


def render_input(p: InputProps) -> str:
    attrs = (
        f'type="{_e(p.input_type)}" id="{_e(p.name)}" name="{_e(p.name)}" class="form-input"'
        + _attr("placeholder", p.placeholder)
        + _attr("value", p.value)
        + (" required" if p.required else "")
        + _attr("aria-describedby", p.aria_describedby)
    )
    return f"""<div class="form-field">
  <label for="{_e(p.name)}" class="form-label">{_e(p.label)}{_required_indicator(p.required)}</label>
  <input {attrs}>
</div>"""


def render_checkbox(p: CheckboxProps) -> str:
    attrs = (
        f'type="checkbox" id="{_e(p.name)}" name="{_e(p.name)}" class="checkbox-input"'
        + _attr("value", p.value)
        + (" checked" if p.checked else "")
        + (" required" if p.required else "")
        + _attr("aria-describedby", p.aria_describedby)
    )
    return f"""<div class="checkbox-field">
  <label class="checkbox-label">
    <input {attrs}>
    <span class="checkbox-label-text">{_e(p.label)}{_required_indicator(p.required)}</span>
  </label>
</div>"""


# ── Dispatch blocs ──────────────────────────────────────────────────────────

_BLOCK_RENDERERS: Dict[str, Callable[[Any], str]] = {
    "Header": lambda b: render_header(b.props),
    "Hero":   lambda b: render_hero(b.props),
}

# Gabarits vides proposés par l'éditeur ("ajouter un bloc")
_BLOCK_TEMPLATES: Dict[str, dict] = {
    "Header": {"id": "", "type": "Header", "props": {
        "headline": "", "button": {"href": "", "text": "", "aria_label": ""},
    }},
    "Hero": {"id": "", "type": "Hero", "props": {"headline": "", "subheadline": ""}},
}

# Feuilles de style par variante, chargées par la page publique
_BLOCK_STYLESHEETS: Dict[str, List[str]] = {
    "Header": ["/features/header/styles.css", "/features/button/styles.css"],
    "Hero":   ["/features/hero/styles.css"],
}


def render_block(block: Union[BlockWithId, HeaderBlock, HeroBlock]) -> str:
    if isinstance(block, BlockWithId):
        block = block.block
    renderer = _BLOCK_RENDERERS.get(block.type)
    if renderer is None:
        raise LookupError(f"Aucun renderer pour le bloc {block.type!r}")
    return renderer(block)


# ── Pages ───────────────────────────────────────────────────────────────────

def _document(title: str, body: str, stylesheets: Sequence[str] = ()) -> str:
    links = "\n  ".join(f'<link rel="stylesheet" href="{_e(href)}">' for href in stylesheets)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{_e(title)}</title>
  {links}
</head>
<body>
{body}
</body>
</html>"""


def render_homepage(blocks: Sequence[BlockWithId], title: str = "Eng Manager") -> str:
    """Page publique : blocs rendus dans l'ordre du document."""
    stylesheets = ["/assets/styles.css"]
    for t in BLOCK_TYPES:
        stylesheets += [s for s in _BLOCK_STYLESHEETS.get(t, []) if s not in stylesheets]
    body = "\n".join(render_block(b) for b in blocks)
    return _document(title, body, stylesheets)


_ADMIN_CSS = ["/assets/styles.css", "/features/admin/editor/styles.css"]


def _back_button(href: str, label: str) -> str:
    return f'<div class="button-group"><a href="{_e(href)}"><button type="button">{_e(label)}</button></a></div>'


def render_admin_index() -> str:
    body = """<div class="admin-index">
  <div class="admin-index__circle"></div>
  <h1 class="admin-index__heading">ADMIN</h1>
  <a class="admin-index__link" href="/admin/route/">Routes</a>
  <a class="admin-index__link" href="/admin/features/">Stories</a>
</div>"""
    return _document("Admin", body, ["/assets/styles.css", "/assets/admin-index.css"])


def render_route_index(routes: Sequence[Route]) -> str:
    items = "\n".join(
        f'    <li><a href="/admin/route/{_e(r.name)}/"><strong>{_e(r.name)}</strong> - <code>{_e(r.path)}</code></a></li>'
        for r in routes
    )
    body = f"""<h1>Routes</h1>
<div class="route-list">
  <ul>
{items}
  </ul>
</div>
{_back_button("/admin", "Retour admin")}"""
    return _document("Routes - Admin", body, _ADMIN_CSS)


# Script d'édition minimal : ajout de bloc dans le JSON + publication
_EDITOR_JS = """
const editor = document.getElementById('json-editor');
const message = document.getElementById('message');
const templates = JSON.parse(document.getElementById('block-templates').textContent);
document.getElementById('add-block-btn').addEventListener('click', () => {
  const type = document.getElementById('block-type-select').value;
  const data = JSON.parse(editor.value || '{"blocks": []}');
  data.blocks.push(JSON.parse(JSON.stringify(templates[type])));
  editor.value = JSON.stringify(data, null, 2);
});
document.getElementById('route-form').addEventListener('submit', async (e) => {
  e.preventDefault();
  const form = e.target;
  let payload;
  try { payload = JSON.parse(editor.value); }
  catch (err) { message.textContent = 'JSON invalide : ' + err.message; return; }
  const r = await fetch(form.dataset.endpoint, {
    method: 'POST', headers: {'Content-Type': 'application/json'}, body: JSON.stringify(payload),
  });
  if (r.ok) {
    editor.value = JSON.stringify(await r.json(), null, 2);
    message.textContent = 'Modifications publiées';
  } else {
    message.textContent = 'Échec de l\\'enregistrement (' + r.status + ')';
  }
});
"""


def render_editor(route: Route, document: ContentDocument) -> str:
    """Éditeur JSON d'une route : sélection du type, ajout de bloc, publication."""
    options = "".join(f'<option value="{_e(t)}">{_e(t)}</option>' for t in BLOCK_TYPES)
    templates = json.dumps(_BLOCK_TEMPLATES).replace("</", "<\\/")
    body = f"""<h1>Edit {_e(route.name)} Content</h1>
<p style="color:#666;margin-bottom:1rem">Route : <code>{_e(route.path)}</code></p>
<form id="route-form" data-endpoint="/admin/api/{_e(route.name)}">
  <div class="add-block">
    <label for="block-type-select">Ajouter un bloc : </label>
    <select id="block-type-select" aria-label="Type de bloc à ajouter">{options}</select>
    <button type="button" class="btn-add" id="add-block-btn">+ Ajouter</button>
  </div>
  <div class="form-group">
    <label for="json-editor">Contenu JSON</label>
    <textarea id="json-editor" name="json-data" spellcheck="false" rows="30" cols="100">{_e(document.model_dump_json(indent=2))}</textarea>
  </div>
  <div class="button-group">
    <button type="submit">Publish Changes</button>
    <a href="{_e(route.path)}"><button type="button">Preview {_e(route.name)}</button></a>
  </div>
</form>
<div id="message" class="message" role="status"></div>
<script type="application/json" id="block-templates">{templates}</script>
<script>{_EDITOR_JS}</script>"""
    return _document(f"Edit {route.name}", body, _ADMIN_CSS)


def render_story_index(stories: Sequence[Any]) -> str:
    items = "\n".join(
        f'    <li><a href="/admin/features/{_e(s.name)}/"><strong>{_e(s.name)}</strong> - <span>{_e(s.description)}</span></a></li>'
        for s in stories
    )
    body = f"""<h1>Component Stories</h1>
<p>Prévisualisation des composants avec des données de démonstration.</p>
<div class="route-list">
  <ul>
{items}
  </ul>
</div>
{_back_button("/admin", "Retour admin")}"""
    return _document("Component Stories - Admin", body, _ADMIN_CSS)


def render_story_page(story: Any) -> str:
    """Aperçu isolé d'un composant + ses données de fixture."""
    fixture = story.fixture()
    fixture_json = fixture.model_dump_json(indent=2, by_alias=True)
    body = f"""<h1>{_e(story.name.capitalize())} Component</h1>
<p>{_e(story.description)}</p>
<div class="story-preview">
  <h2>Preview</h2>
  <div class="story-component">
{story.render(fixture)}
  </div>
</div>
<div class="story-props">
  <h2>Fixture Data</h2>
  <pre><code>{_e(fixture_json)}</code></pre>
</div>
{_back_button("/admin/features/", "Retour aux stories")}"""
    return _document(
        f"{story.name.capitalize()} Story - Component Preview",
        body,
        [*_ADMIN_CSS, *story.stylesheets],
    )
