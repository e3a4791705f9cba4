"""
Configuração centralizada do cliente via Pydantic Settings.

Carrega variáveis de ambiente do arquivo .env e valida tipos automaticamente.
O endereço base da API é fixado no deploy e não muda em tempo de execução.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configurações do cliente carregadas de variáveis de ambiente.

    Attributes:
        APP_NAME: Nome exibido no frontend
        ENVIRONMENT: Ambiente atual (development, staging, production)
        API_BASE_URL: URL base da API REST do CMS (inclui o namespace)
        REQUEST_TIMEOUT: Timeout das requisições em segundos
        LISTINGS_PER_PAGE: Tamanho fixo da página de anúncios
        MAX_UPLOAD_BYTES: Tamanho máximo de uma foto enviada
        ALLOWED_IMAGE_TYPES: Tipos MIME aceitos no upload de fotos
        TOKEN_STORAGE_KEY: Chave fixa sob a qual o token é persistido
        TOKEN_STORE_PATH: Arquivo usado pelo armazenamento de token em disco
        WHATSAPP_COUNTRY_CODE: DDI adicionado aos links do WhatsApp
        DEFAULT_STATE: UF padrão do formulário de perfil
        LOG_LEVEL: Nível de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Vitrine"
    ENVIRONMENT: str = "development"

    # API
    API_BASE_URL: str = "http://localhost:8080/wp-json/vitrine/v1"
    REQUEST_TIMEOUT: float = 10.0

    # Listagem
    LISTINGS_PER_PAGE: int = 12

    # Upload
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
    ALLOWED_IMAGE_TYPES: tuple[str, ...] = (
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/webp",
    )

    # Sessão
    TOKEN_STORAGE_KEY: str = "vitrine_token"
    TOKEN_STORE_PATH: Path = Path.home() / ".vitrine" / "session.json"

    # Formatação
    WHATSAPP_COUNTRY_CODE: str = "55"
    DEFAULT_STATE: str = "RJ"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def is_production(self) -> bool:
        """Verifica se está em ambiente de produção."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Retorna instância cacheada das configurações.

    Usa lru_cache para evitar recarregar .env em cada chamada.
    """
    return Settings()
