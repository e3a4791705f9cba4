"""
Schemas Pydantic para taxonomias, planos e pagamento.
"""

from typing import List, Optional

from pydantic import Field

from vitrine.schemas.base import BaseSchema


class Taxonomy(BaseSchema):
    """Item de uma dimensão filtrável (cidade, bairro, categoria, serviço)."""
    id: int
    name: str = Field("", alias="nome")
    slug: str = ""
    count: int = 0


class Plan(BaseSchema):
    """Plano de assinatura à venda."""
    id: str
    name: str = Field("", alias="nome")
    price: float = Field(0, alias="preco")
    duration_days: int = Field(0, alias="duracao_dias")
    benefits: List[str] = Field(default_factory=list, alias="beneficios")


class CheckoutSession(BaseSchema):
    """Resposta de POST /pagamento/criar com a URL do checkout hospedado."""
    success: bool = False
    message: Optional[str] = None
    preference_id: Optional[str] = None
    init_point: Optional[str] = None
    sandbox_init_point: Optional[str] = None
