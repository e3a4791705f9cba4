"""
Persistência do token de sessão.

Somente o bearer token é persistido, sempre sob uma chave fixa.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

from vitrine.core.config import get_settings

logger = logging.getLogger(__name__)


class TokenStore(Protocol):
    """Interface mínima de um armazenamento de token."""

    def load(self) -> Optional[str]: ...

    def save(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemoryTokenStore:
    """Armazenamento em memória, usado em testes e sessões efêmeras."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def load(self) -> Optional[str]:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStore:
    """
    Armazenamento em arquivo JSON.

    O arquivo guarda um objeto com uma única chave (TOKEN_STORAGE_KEY).
    Um arquivo ilegível é tratado como ausência de token.
    """

    def __init__(self, path: Optional[Path] = None, key: Optional[str] = None):
        settings = get_settings()
        self.path = Path(path or settings.TOKEN_STORE_PATH)
        self.key = key or settings.TOKEN_STORAGE_KEY

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"Arquivo de sessão ilegível em {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> Optional[str]:
        token = self._read().get(self.key)
        return token if isinstance(token, str) and token else None

    def save(self, token: str) -> None:
        data = self._read()
        data[self.key] = token
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def clear(self) -> None:
        data = self._read()
        if self.key not in data:
            return
        del data[self.key]
        self.path.write_text(json.dumps(data), encoding="utf-8")
