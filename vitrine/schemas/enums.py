"""
Enums utilizados nos schemas do cliente.
"""

import enum


class PlanTier(str, enum.Enum):
    """Plano de assinatura, controla visibilidade e ranqueamento."""
    FREE = "free"
    PREMIUM = "premium"
    VIP = "vip"


class ModerationStatus(str, enum.Enum):
    """
    Status de moderação de um anúncio, definido pelos revisores.

    Os valores são os status de post do CMS:
        pending -> publish (aprovado)
        pending -> draft (reprovado)
    """
    PENDING = "pending"
    PUBLISHED = "publish"
    REJECTED = "draft"


class SortMode(str, enum.Enum):
    """Ordenação da listagem, calculada no servidor."""
    RECENT = "recentes"
    POPULAR = "popular"
    PRICE_ASC = "preco_asc"
    PRICE_DESC = "preco_desc"


class ClickType(str, enum.Enum):
    """Tipos de clique registrados pelo endpoint de tracking."""
    WHATSAPP = "whatsapp"
    PHONE = "telefone"
    FAVORITE = "favorito"
