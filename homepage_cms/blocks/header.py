"""Bloc Header : titre de page + bouton d'appel à l'action."""
from typing import Literal
from pydantic import BaseModel
from .button import ButtonProps


class HeaderProps(BaseModel):
    headline: str
    button: ButtonProps


class HeaderBlock(BaseModel):
    type: Literal["Header"] = "Header"
    props: HeaderProps
