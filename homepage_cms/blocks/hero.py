"""Bloc Hero : accroche principale + sous-titre."""
from typing import Literal
from pydantic import BaseModel


class HeroProps(BaseModel):
    headline: str
    subheadline: str


class HeroBlock(BaseModel):
    type: Literal["Hero"] = "Hero"
    props: HeroProps
