"""
Validações executadas no cliente, antes de qualquer chamada de rede.

Erros de validação são exibidos no formulário e nunca registrados em log.
"""

import re
from typing import TYPE_CHECKING, Dict, Optional

from vitrine.core.config import get_settings

if TYPE_CHECKING:
    from vitrine.schemas.user import RegistrationForm

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class FormValidationError(Exception):
    """Erros de conversão do estado de um formulário, por campo."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        self.message = "; ".join(errors.values())
        super().__init__(self.message)


def only_digits(value: str) -> str:
    """Remove tudo que não é dígito."""
    return re.sub(r"\D", "", value or "")


def is_valid_email(email: str) -> bool:
    """Valida o formato simples nome@dominio.tld."""
    return bool(EMAIL_RE.match(email or ""))


def is_valid_phone(phone: str) -> bool:
    """Aceita exatamente 10 ou 11 dígitos (DDD + número)."""
    return len(only_digits(phone)) in (10, 11)


def validate_registration(form: "RegistrationForm") -> Optional[str]:
    """
    Valida o formulário de cadastro.

    Returns:
        A primeira mensagem de erro encontrada, ou None se válido
    """
    if not form.name or not form.email or not form.password:
        return "Preencha todos os campos obrigatórios"
    if len(form.name) < 3:
        return "Nome deve ter pelo menos 3 caracteres"
    if not is_valid_email(form.email):
        return "E-mail inválido"
    if form.whatsapp and not is_valid_phone(form.whatsapp):
        return "WhatsApp inválido"
    if len(form.password) < 6:
        return "A senha deve ter pelo menos 6 caracteres"
    if form.password != form.confirm_password:
        return "As senhas não conferem"
    if not form.accept_terms:
        return "Você precisa aceitar os termos de uso"
    return None


def validate_image(size: int, content_type: str) -> Optional[str]:
    """
    Valida uma foto antes do upload.

    Returns:
        Mensagem de rejeição, ou None se a foto pode ser enviada
    """
    settings = get_settings()
    if content_type not in settings.ALLOWED_IMAGE_TYPES:
        return "Formato não permitido. Use JPG, PNG ou WebP."
    if size > settings.MAX_UPLOAD_BYTES:
        max_mb = settings.MAX_UPLOAD_BYTES // (1024 * 1024)
        return f"Arquivo muito grande. Máximo {max_mb}MB."
    return None


def parse_optional_int(value: str) -> Optional[int]:
    """
    Converte texto de formulário em inteiro.

    Texto vazio vira None; texto não numérico levanta ValueError.
    """
    value = (value or "").strip()
    if not value:
        return None
    return int(value)
