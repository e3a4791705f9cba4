"""
Schemas do formulário de perfil do anunciante.

O formulário guarda tudo como texto (como foi digitado). O payload enviado
para POST /meu-perfil é tipado. A passagem de um para outro é explícita
e validada em ProfileForm.to_payload().
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from vitrine.core.config import get_settings
from vitrine.schemas.base import BaseSchema
from vitrine.schemas.listing import OwnedListing, Photo
from vitrine.utils.validators import FormValidationError, is_valid_phone, parse_optional_int

NUMERIC_FIELDS = (
    "city_id",
    "neighborhood_id",
    "category_id",
    "height",
    "weight",
    "hourly_rate",
    "half_hour_rate",
    "overnight_rate",
)

PHONE_FIELDS = ("whatsapp", "phone")


def _as_text(value: Optional[float]) -> str:
    # Campos inteiros no payload: valores com casas decimais são truncados
    if value is None:
        return ""
    return str(int(value))


class ProfilePayload(BaseSchema):
    """Corpo tipado de POST /meu-perfil (serializar com by_alias=True)."""
    name: str = Field("", alias="nome")
    headline: str = ""
    description: str = Field("", alias="descricao")
    birth_date: str = Field("", alias="data_nascimento")
    state: str = Field("", alias="estado")
    city_id: Optional[int] = Field(None, alias="cidade_id")
    neighborhood_id: Optional[int] = Field(None, alias="bairro_id")
    category_id: Optional[int] = Field(None, alias="categoria_id")
    whatsapp: str = ""
    phone: str = Field("", alias="telefone")
    height: Optional[int] = Field(None, alias="altura")
    weight: Optional[int] = Field(None, alias="peso")
    measurements: str = Field("", alias="medidas")
    eye_color: str = Field("", alias="cor_olhos")
    hair_color: str = Field("", alias="cor_cabelo")
    ethnicity: str = Field("", alias="etnia")
    silicone: str = ""
    hourly_rate: Optional[int] = Field(None, alias="valor_hora")
    half_hour_rate: Optional[int] = Field(None, alias="valor_meia_hora")
    overnight_rate: Optional[int] = Field(None, alias="valor_pernoite")
    serves_on_site: bool = Field(False, alias="atende_local")
    accepts_card: bool = Field(False, alias="aceita_cartao")
    accepts_pix: bool = Field(True, alias="aceita_pix")
    services: List[int] = Field(default_factory=list, alias="servicos")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class ProfileForm(BaseModel):
    """Estado do formulário de perfil, campo a campo como texto."""

    name: str = ""
    headline: str = ""
    description: str = ""
    birth_date: str = ""
    state: str = Field(default_factory=lambda: get_settings().DEFAULT_STATE)
    city_id: str = ""
    neighborhood_id: str = ""
    category_id: str = ""
    whatsapp: str = ""
    phone: str = ""
    height: str = ""
    weight: str = ""
    measurements: str = ""
    eye_color: str = ""
    hair_color: str = ""
    ethnicity: str = ""
    silicone: str = ""
    hourly_rate: str = ""
    half_hour_rate: str = ""
    overnight_rate: str = ""
    serves_on_site: bool = False
    accepts_card: bool = False
    accepts_pix: bool = True
    services: List[int] = Field(default_factory=list)

    @classmethod
    def from_listing(cls, listing: OwnedListing) -> "ProfileForm":
        """Preenche o formulário a partir do anúncio salvo."""
        return cls(
            name=listing.name,
            headline=listing.headline,
            description=listing.description,
            birth_date=listing.birth_date,
            state=listing.state or get_settings().DEFAULT_STATE,
            city_id=_as_text(listing.city_id),
            neighborhood_id=_as_text(listing.neighborhood_id),
            category_id=_as_text(listing.category_id),
            whatsapp=listing.whatsapp,
            phone=listing.phone,
            height=_as_text(listing.height),
            weight=_as_text(listing.weight),
            measurements=listing.measurements,
            eye_color=listing.eye_color,
            hair_color=listing.hair_color,
            ethnicity=listing.ethnicity,
            silicone=listing.silicone,
            hourly_rate=_as_text(listing.hourly_rate),
            half_hour_rate=_as_text(listing.half_hour_rate),
            overnight_rate=_as_text(listing.overnight_rate),
            serves_on_site=listing.serves_on_site,
            accepts_card=listing.accepts_card,
            accepts_pix=listing.accepts_pix,
            services=list(listing.service_ids),
        )

    def toggle_service(self, service_id: int) -> None:
        if service_id in self.services:
            self.services.remove(service_id)
        else:
            self.services.append(service_id)

    def to_payload(self) -> ProfilePayload:
        """
        Converte o formulário no payload tipado.

        Raises:
            FormValidationError: Campo numérico com texto inválido ou
                telefone com quantidade de dígitos errada
        """
        errors: Dict[str, str] = {}
        values = self.model_dump()

        for field in NUMERIC_FIELDS:
            try:
                values[field] = parse_optional_int(values[field])
            except ValueError:
                errors[field] = f"Valor numérico inválido: {values[field]!r}"

        for field in PHONE_FIELDS:
            if values[field] and not is_valid_phone(values[field]):
                errors[field] = "Telefone inválido"

        if errors:
            raise FormValidationError(errors)

        return ProfilePayload.model_validate(values)


class PhotoFile(BaseModel):
    """Arquivo escolhido para upload."""
    filename: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)


class RejectedFile(BaseModel):
    """Arquivo recusado no cliente ou pelo backend, com o motivo."""
    filename: str
    reason: str


class UploadReport(BaseModel):
    """
    Resultado de um lote de upload: enviados e recusados.

    gallery_error guarda a falha ao salvar a nova ordem da galeria; as
    fotos enviadas continuam valendo.
    """
    uploaded: List[Photo] = Field(default_factory=list)
    rejected: List[RejectedFile] = Field(default_factory=list)
    gallery_error: Optional[str] = None
