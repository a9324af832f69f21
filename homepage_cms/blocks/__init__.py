"""
Blocs de contenu : exports publics + union `Block` discriminée par `type`.

L'ensemble des variantes est fermé : ajouter une variante impose de mettre à
jour le renderer (table de dispatch), le sélecteur d'ajout de l'admin et les
stories. Les tests vérifient que la table de dispatch couvre `BLOCK_TYPES`.
"""
from typing import Annotated, Union, get_args
from pydantic import Field

from .button import ButtonProps
from .header import HeaderBlock, HeaderProps
from .hero import HeroBlock, HeroProps
from .input import InputProps
from .checkbox import CheckboxProps

# Union discriminée par type : {"type": "Header", "props": {...}}
Block = Annotated[
    Union[
        HeaderBlock,
        HeroBlock,
    ],
    Field(discriminator="type"),
]

_VARIANTS = get_args(get_args(Block)[0])

# Valeurs du discriminant, dans l'ordre de déclaration de l'union
BLOCK_TYPES: tuple = tuple(
    get_args(cls.model_fields["type"].annotation)[0] for cls in _VARIANTS
)

__all__ = [
    # Composants
    "ButtonProps", "InputProps", "CheckboxProps",
    # Header
    "HeaderBlock", "HeaderProps",
    # Hero
    "HeroBlock", "HeroProps",
    # Union
    "Block", "BLOCK_TYPES",
]
