"""
Composant Input : champ de formulaire labellisé (primitive réutilisable).

Pas un bloc de contenu : utilisé par composition et prévisualisé via les stories.
Le champ `input_type` est sérialisé sous la clé "type" ; les champs optionnels
non renseignés sont omis du JSON.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_serializer


class InputProps(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    label: str
    name: str
    input_type: str = Field(default="text", alias="type")
    placeholder: Optional[str] = None
    value: Optional[str] = None
    required: bool = False
    aria_describedby: Optional[str] = None

    @model_serializer(mode="wrap")
    def omit_unset_optionals(self, handler) -> dict:
        data = handler(self)
        for key in ("placeholder", "value", "aria_describedby"):
            if key in data and data[key] is None:
                del data[key]
        return data
