"""
Schemas base reutilizáveis em todo o cliente.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class BaseSchema(BaseModel):
    """
    Schema base para registros vindos da API.

    As chaves do JSON são em português; os atributos Python usam aliases,
    e populate_by_name permite construir os modelos pelos dois nomes.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # O CMS envia null em campos não preenchidos; vale o default do schema
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class MessageResponse(BaseSchema):
    """Resposta simples de operações de escrita do CMS."""
    success: bool = False
    message: str = ""
