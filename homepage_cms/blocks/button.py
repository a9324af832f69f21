"""Composant Button : lien d'appel à l'action, réutilisé par d'autres blocs."""
from pydantic import BaseModel


class ButtonProps(BaseModel):
    href: str
    text: str
    aria_label: str
