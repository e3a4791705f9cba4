"""
Schemas Pydantic para usuário e respostas de autenticação.
"""

from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from vitrine.schemas.base import BaseSchema
from vitrine.schemas.enums import ModerationStatus, PlanTier

ADMIN_ROLE = "administrator"


def coerce_moderation_status(value: Any) -> Optional[ModerationStatus]:
    """Converte o status do CMS, descartando valores desconhecidos."""
    if value is None or isinstance(value, ModerationStatus):
        return value
    try:
        return ModerationStatus(value)
    except ValueError:
        return None


class User(BaseSchema):
    """
    Usuário autenticado (retorno de /auth/me).

    Mutado apenas pelo backend; o cliente busca de novo após
    operações que o alteram.
    """
    id: int
    email: str = ""
    name: str = Field("", alias="nome")
    role: str = ""
    has_listing: bool = Field(False, alias="tem_perfil")
    listing_status: Optional[ModerationStatus] = Field(None, alias="perfil_status")
    listing_id: Optional[int] = Field(None, alias="perfil_id")
    plan: PlanTier = Field(PlanTier.FREE, alias="plano")
    slug: Optional[str] = None

    @field_validator("listing_status", mode="before")
    @classmethod
    def validate_listing_status(cls, v: Any) -> Optional[ModerationStatus]:
        return coerce_moderation_status(v)

    @field_validator("plan", mode="before")
    @classmethod
    def validate_plan(cls, v: Any) -> Any:
        return v or PlanTier.FREE

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


class AuthResponse(BaseSchema):
    """Resposta de /auth/login e /auth/register."""
    success: bool = False
    message: Optional[str] = None
    token: Optional[str] = None
    user: Optional[User] = None


class AuthResult(BaseSchema):
    """
    Resultado discriminado das operações de sessão.

    As operações do SessionManager nunca lançam exceções para o chamador;
    sucesso ou falha (com mensagem legível) vêm neste valor.
    """
    success: bool
    message: str = ""

    @classmethod
    def ok(cls, message: str = "") -> "AuthResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, message: str) -> "AuthResult":
        return cls(success=False, message=message)


class RegistrationForm(BaseSchema):
    """Dados digitados no formulário de cadastro."""
    # A senha vai para o backend exatamente como foi digitada
    model_config = ConfigDict(str_strip_whitespace=False)

    name: str = ""
    email: str = ""
    whatsapp: str = ""
    password: str = ""
    confirm_password: str = ""
    accept_terms: bool = False

    def to_payload(self) -> dict:
        """Corpo enviado para POST /auth/register."""
        payload = {"nome": self.name, "email": self.email, "password": self.password}
        if self.whatsapp:
            payload["whatsapp"] = self.whatsapp
        return payload
