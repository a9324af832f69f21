"""Composant Checkbox : case à cocher labellisée (primitive réutilisable)."""
from typing import Optional
from pydantic import BaseModel, model_serializer


class CheckboxProps(BaseModel):
    label: str
    name: str
    value: Optional[str] = None
    checked: bool = False
    required: bool = False
    aria_describedby: Optional[str] = None

    @model_serializer(mode="wrap")
    def omit_unset_optionals(self, handler) -> dict:
        # value / aria_describedby absents du JSON quand None
        data = handler(self)
        for key in ("value", "aria_describedby"):
            if key in data and data[key] is None:
                del data[key]
        return data
