"""Tests modèle de contenu : union discriminée, format JSON, blocs par défaut."""
import json

import pytest
from pydantic import TypeAdapter, ValidationError

from homepage_cms.blocks import (
    BLOCK_TYPES, Block, ButtonProps, CheckboxProps,
    HeaderBlock, HeaderProps, HeroBlock, HeroProps, InputProps,
)
from homepage_cms.core.schemas import BlockWithId, ContentDocument, HomepageData, Route, default_blocks

BLOCK = TypeAdapter(Block)


def _header(headline="Titre") -> HeaderBlock:
    return HeaderBlock(props=HeaderProps(
        headline=headline,
        button=ButtonProps(href="/go", text="Go", aria_label="Aller"),
    ))


def _hero(headline="Accroche") -> HeroBlock:
    return HeroBlock(props=HeroProps(headline=headline, subheadline="Sous-titre"))


# ── Union Block ───────────────────────────────────────────────────────────────

def test_block_types_closed_set():
    assert BLOCK_TYPES == ("Header", "Hero")


def test_header_discriminant():
    data = BLOCK.dump_python(_header())
    assert data["type"] == "Header"
    assert data["props"]["button"]["aria_label"] == "Aller"


def test_hero_discriminant():
    data = BLOCK.dump_python(_hero())
    assert data == {"type": "Hero", "props": {"headline": "Accroche", "subheadline": "Sous-titre"}}


def test_block_validates_by_type():
    b = BLOCK.validate_python({"type": "Hero", "props": {"headline": "H", "subheadline": "S"}})
    assert isinstance(b, HeroBlock)


def test_unknown_block_type_rejected():
    with pytest.raises(ValidationError):
        BLOCK.validate_python({"type": "Footer", "props": {}})


def test_payload_field_names_not_transformed():
    data = json.loads(BLOCK.dump_json(_header()))
    assert set(data["props"]) == {"headline", "button"}
    assert set(data["props"]["button"]) == {"href", "text", "aria_label"}


# ── BlockWithId ───────────────────────────────────────────────────────────────

def test_block_with_id_is_flattened():
    data = BlockWithId(id="abc", block=_header()).model_dump()
    assert list(data) == ["id", "type", "props"]
    assert "block" not in data
    assert data["id"] == "abc"
    assert data["type"] == "Header"


def test_block_with_id_json_flattened():
    raw = json.loads(BlockWithId(id="abc", block=_hero()).model_dump_json())
    assert raw == {"id": "abc", "type": "Hero", "props": {"headline": "Accroche", "subheadline": "Sous-titre"}}


def test_block_with_id_reads_flat_object():
    b = BlockWithId.model_validate({"id": "x1", "type": "Hero", "props": {"headline": "H", "subheadline": "S"}})
    assert b.id == "x1"
    assert isinstance(b.block, HeroBlock)
    assert b.block.props.headline == "H"


@pytest.mark.parametrize("raw", [
    {"type": "Hero", "props": {"headline": "H", "subheadline": "S"}},
    {"id": None, "type": "Hero", "props": {"headline": "H", "subheadline": "S"}},
    {"id": "", "type": "Hero", "props": {"headline": "H", "subheadline": "S"}},
])
def test_block_with_id_missing_id_is_empty(raw):
    assert BlockWithId.model_validate(raw).id == ""


@pytest.mark.parametrize("bad_id", [0, False, []])
def test_block_with_id_falsy_non_string_id_rejected(bad_id):
    with pytest.raises(ValidationError):
        BlockWithId.model_validate({"id": bad_id, "type": "Hero", "props": {"headline": "H", "subheadline": "S"}})


def test_block_with_id_accepts_any_string():
    assert BlockWithId(id="pas-un-uuid", block=_hero()).id == "pas-un-uuid"


# ── ContentDocument ───────────────────────────────────────────────────────────

def test_document_round_trip_preserves_order():
    blocks = [
        BlockWithId(id="1", block=_hero("Premier")),
        BlockWithId(id="2", block=_header("Deuxième")),
        BlockWithId(id="3", block=_hero("Troisième")),
    ]
    parsed = ContentDocument.model_validate_json(ContentDocument(blocks=blocks).model_dump_json(indent=2))
    assert parsed.blocks == blocks


def test_document_wire_format():
    doc = ContentDocument(blocks=[BlockWithId(id="abc", block=_hero())])
    assert json.loads(doc.model_dump_json()) == {
        "blocks": [{"id": "abc", "type": "Hero", "props": {"headline": "Accroche", "subheadline": "Sous-titre"}}],
    }


def test_document_empty_blocks():
    assert ContentDocument.model_validate_json('{"blocks": []}').blocks == []


def test_homepage_data_alias():
    assert HomepageData is ContentDocument


# ── Route ─────────────────────────────────────────────────────────────────────

def test_route_serializes_block_ids_camel_case():
    r = Route(path="/", name="homepage", block_ids=["data/content/homepage.json"])
    data = json.loads(r.model_dump_json(by_alias=True))
    assert data == {"path": "/", "name": "homepage", "blockIds": ["data/content/homepage.json"]}


def test_route_reads_camel_case():
    r = Route.model_validate({"path": "/foo", "name": "foo", "blockIds": ["data/content/foo.json"]})
    assert r.block_ids == ["data/content/foo.json"]


# ── default_blocks ────────────────────────────────────────────────────────────

def test_default_blocks_stable():
    first, second = default_blocks(), default_blocks()
    assert first == second
    assert first is not second
    assert len(first) == 2


def test_default_blocks_content():
    header, hero = default_blocks()
    assert header.id == "550e8400-e29b-41d4-a716-446655440001"
    assert isinstance(header.block, HeaderBlock)
    assert header.block.props.headline == "Eng Manager"
    assert header.block.props.button.href == "/contact"
    assert header.block.props.button.text == "Get in touch"
    assert hero.id == "550e8400-e29b-41d4-a716-446655440002"
    assert isinstance(hero.block, HeroBlock)
    assert hero.block.props.headline == "Building world-class engineering teams"
    assert hero.block.props.subheadline == "Leadership through example, expertise, and empathy"


def test_default_blocks_not_shared():
    first = default_blocks()
    first[0].block.props.headline = "Modifié"
    assert default_blocks()[0].block.props.headline == "Eng Manager"


# ── Composants de formulaire ──────────────────────────────────────────────────

def test_input_props_type_key():
    p = InputProps(label="Email", name="email", input_type="email")
    data = p.model_dump(by_alias=True)
    assert data == {"label": "Email", "name": "email", "type": "email", "required": False}


def test_input_props_reads_type_key():
    p = InputProps.model_validate({"label": "L", "name": "n", "type": "password", "required": True})
    assert p.input_type == "password"
    assert p.required is True


def test_checkbox_props_omits_unset_optionals():
    data = CheckboxProps(label="Newsletter", name="nl").model_dump()
    assert "value" not in data
    assert "aria_describedby" not in data
    assert data["checked"] is False


def test_input_props_json_omits_unset_optionals():
    data = json.loads(InputProps(label="L", name="n").model_dump_json(by_alias=True))
    assert data == {"label": "L", "name": "n", "type": "text", "required": False}


def test_input_props_keeps_set_optionals():
    data = InputProps(label="L", name="n", placeholder="p", aria_describedby="aide").model_dump()
    assert data["placeholder"] == "p"
    assert data["aria_describedby"] == "aide"
    assert "value" not in data


def test_checkbox_props_json_omits_unset_optionals():
    data = json.loads(CheckboxProps(label="L", name="n", value="oui").model_dump_json())
    assert data == {"label": "L", "name": "n", "value": "oui", "checked": False, "required": False}
