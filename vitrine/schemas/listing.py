"""
Schemas Pydantic para anúncios, fotos, filtros e estatísticas.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vitrine.schemas.base import BaseSchema
from vitrine.schemas.enums import ModerationStatus, PlanTier, SortMode
from vitrine.schemas.taxonomy import Taxonomy
from vitrine.schemas.user import coerce_moderation_status


class Photo(BaseSchema):
    """
    Foto de um anúncio com os quatro tamanhos derivados.

    A ordem das fotos na galeria é significativa: a primeira é a capa.
    """
    id: int
    thumbnail: str = ""
    medium: str = ""
    large: str = ""
    full: str = ""

    @classmethod
    def from_upload(cls, data: dict) -> "Photo":
        """Monta a foto a partir da resposta de POST /upload."""
        sizes = data.get("sizes") or {}
        url = data.get("url") or ""
        return cls(
            id=data["id"],
            thumbnail=sizes.get("thumbnail") or url,
            medium=sizes.get("medium") or url,
            large=sizes.get("large") or url,
            full=sizes.get("full") or url,
        )


class Listing(BaseSchema):
    """Projeção pública de um anúncio, como vem da listagem."""
    id: int
    slug: str = ""
    name: str = Field("", alias="nome")
    age: Optional[int] = Field(None, alias="idade")
    headline: str = ""
    city: str = Field("", alias="cidade")
    city_slug: str = Field("", alias="cidade_slug")
    state: str = Field("", alias="estado")
    neighborhood: str = Field("", alias="bairro")
    neighborhood_slug: str = Field("", alias="bairro_slug")
    category: str = Field("", alias="categoria")
    category_slug: str = Field("", alias="categoria_slug")
    hourly_rate: Optional[float] = Field(None, alias="valor_hora")
    main_photo: str = Field("", alias="foto_principal")
    thumbnail: str = Field("", alias="foto_thumbnail")
    verified: bool = Field(False, alias="verificada")
    online: bool = False
    featured: bool = Field(False, alias="destaque")
    plan: PlanTier = Field(PlanTier.FREE, alias="plano")
    serves_on_site: bool = Field(False, alias="atende_local")

    @field_validator("plan", mode="before")
    @classmethod
    def validate_plan(cls, v: Any) -> Any:
        return v or PlanTier.FREE


class ListingDetail(Listing):
    """Anúncio completo, retornado por GET /acompanhante/{slug}."""
    description: str = Field("", alias="descricao")
    whatsapp: str = ""
    phone: str = Field("", alias="telefone")
    height: Optional[int] = Field(None, alias="altura")
    weight: Optional[int] = Field(None, alias="peso")
    measurements: str = Field("", alias="medidas")
    eye_color: str = Field("", alias="cor_olhos")
    hair_color: str = Field("", alias="cor_cabelo")
    ethnicity: str = Field("", alias="etnia")
    silicone: str = ""
    half_hour_rate: Optional[float] = Field(None, alias="valor_meia_hora")
    overnight_rate: Optional[float] = Field(None, alias="valor_pernoite")
    accepts_card: bool = Field(False, alias="aceita_cartao")
    accepts_pix: bool = Field(False, alias="aceita_pix")
    services: List[Taxonomy] = Field(default_factory=list, alias="servicos")
    gallery: List[Photo] = Field(default_factory=list, alias="galeria")
    views: int = 0

    @property
    def cover(self) -> Optional[Photo]:
        return self.gallery[0] if self.gallery else None


class OwnedListing(ListingDetail):
    """
    Anúncio do próprio anunciante (GET /meu-perfil).

    Inclui status de moderação e contadores de engajamento.
    """
    status: Optional[ModerationStatus] = None
    birth_date: str = Field("", alias="data_nascimento")
    city_id: Optional[int] = Field(None, alias="cidade_id")
    neighborhood_id: Optional[int] = Field(None, alias="bairro_id")
    category_id: Optional[int] = Field(None, alias="categoria_id")
    service_ids: List[int] = Field(default_factory=list, alias="servicos_ids")
    whatsapp_clicks: int = 0
    phone_clicks: int = 0
    favorites: int = Field(0, alias="favoritos")

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v: Any) -> Optional[ModerationStatus]:
        return coerce_moderation_status(v)


class ListingPage(BaseSchema):
    """Uma página da listagem pública."""
    items: List[Listing] = Field(default_factory=list, alias="data")
    total: int = 0
    pages: int = 0
    current_page: int = 1


class ListingFilters(BaseModel):
    """
    Estado dos filtros da listagem.

    Os limites de preço ficam como texto digitado; a conversão para número
    acontece só na montagem dos parâmetros da consulta.
    """
    model_config = ConfigDict(validate_assignment=True)

    city: str = ""
    category: str = ""
    price_min: str = ""
    price_max: str = ""
    verified: bool = False
    online: bool = False
    sort: SortMode = SortMode.RECENT
    page: int = Field(1, ge=1)


class EngagementStats(BaseSchema):
    """Contadores de engajamento do anúncio."""
    views: int = 0
    whatsapp_clicks: int = 0
    phone_clicks: int = 0
    favorites: int = Field(0, alias="favoritos")
    conversion_rate: float = Field(0, alias="taxa_conversao")


class DashboardStats(BaseSchema):
    """Resposta de GET /dashboard/stats."""
    has_listing: bool = Field(False, alias="tem_perfil")
    listing_status: Optional[ModerationStatus] = Field(None, alias="perfil_status")
    plan: PlanTier = Field(PlanTier.FREE, alias="plano")
    plan_expires: Optional[str] = Field(None, alias="plano_expira")
    days_left: Optional[int] = Field(None, alias="dias_restantes")
    stats: Optional[EngagementStats] = None

    @field_validator("listing_status", mode="before")
    @classmethod
    def validate_listing_status(cls, v: Any) -> Optional[ModerationStatus]:
        return coerce_moderation_status(v)

    @field_validator("plan", mode="before")
    @classmethod
    def validate_plan(cls, v: Any) -> Any:
        return v or PlanTier.FREE
