"""
Schémas Pydantic du contenu persisté.

Fichier de contenu (un par route) :
    {"blocks": [{"id": "...", "type": "Header", "props": {...}}, ...]}
Index des routes (routes.json) :
    [{"path": "/", "name": "homepage", "blockIds": ["data/content/homepage.json"]}]

BlockWithId est stocké à plat : `id` est frère de `type`/`props`, pas de clé `block`.
"""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from ..blocks import Block, ButtonProps, HeaderBlock, HeaderProps, HeroBlock, HeroProps


class BlockWithId(BaseModel):
    """Bloc + identifiant stable (UUID v4 en pratique, forme non vérifiée)."""
    id: str = ""
    block: Block

    @model_validator(mode="before")
    @classmethod
    def unflatten_block(cls, data: Any) -> Any:
        # Forme disque {"id", "type", "props"} → {"id", "block": {"type", "props"}}
        if isinstance(data, dict) and "block" not in data:
            data = dict(data)
            block_id = data.pop("id", None)
            if block_id is None:
                block_id = ""
            return {"id": block_id, "block": data}
        return data

    @model_serializer(mode="wrap")
    def flatten_block(self, handler) -> dict:
        data = handler(self)
        block = data.pop("block")
        return {"id": data["id"], **block}


class ContentDocument(BaseModel):
    """Document persisté pour une route. L'ordre des blocs est l'ordre de rendu."""
    blocks: List[BlockWithId] = Field(default_factory=list)


# Nom historique
HomepageData = ContentDocument


class Route(BaseModel):
    """Entrée de l'index des routes. Seul block_ids[0] est utilisé."""
    model_config = ConfigDict(populate_by_name=True)

    path: str
    name: str
    block_ids: List[str] = Field(default_factory=list, alias="blockIds")


def default_blocks() -> List[BlockWithId]:
    """Contenu de repli quand aucun document valide n'existe (jamais persisté)."""
    return [
        BlockWithId(
            id="550e8400-e29b-41d4-a716-446655440001",
            block=HeaderBlock(props=HeaderProps(
                headline="Eng Manager",
                button=ButtonProps(
                    href="/contact",
                    text="Get in touch",
                    aria_label="Contact us to discuss your engineering needs",
                ),
            )),
        ),
        BlockWithId(
            id="550e8400-e29b-41d4-a716-446655440002",
            block=HeroBlock(props=HeroProps(
                headline="Building world-class engineering teams",
                subheadline="Leadership through example, expertise, and empathy",
            )),
        ),
    ]
