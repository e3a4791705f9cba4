"""
Configuração de logging do cliente.

Cada registro leva um campo de contexto (por exemplo, a sessão do navegador
no Streamlit), para separar as linhas de usuários diferentes que rodam no
mesmo processo. Nível configurável via LOG_LEVEL.
"""

import logging
import sys
from typing import Callable, Optional, TextIO

from vitrine.core.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(context)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NO_CONTEXT = "-"

# Bibliotecas de terceiros que só interessam em WARNING ou acima
QUIET_LOGGERS = ("httpx", "httpcore", "watchdog")


class ContextFilter(logging.Filter):
    """
    Preenche record.context a partir de uma função do host.

    Sem função, ou quando ela não devolve nada, o campo vale "-".
    """

    def __init__(self, context: Optional[Callable[[], Optional[str]]] = None):
        super().__init__()
        self.context = context

    def filter(self, record: logging.LogRecord) -> bool:
        value = self.context() if self.context else None
        record.context = value or NO_CONTEXT
        return True


def setup_logging(
    level: Optional[str] = None,
    context: Optional[Callable[[], Optional[str]]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configura o sistema de logging do cliente.

    Args:
        level: Nível de logging. Se não fornecido, usa LOG_LEVEL do .env
        context: Função que identifica quem está logando (ex.: id da sessão)
        stream: Destino das linhas; stdout por padrão
    """
    log_level = (level or get_settings().LOG_LEVEL).upper()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(ContextFilter(context))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Um único handler, mesmo com setup repetido a cada nova sessão do Streamlit
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging configurado com nível: {log_level}")


def get_logger(name: str) -> logging.Logger:
    """Retorna o logger do módulo (geralmente __name__)."""
    return logging.getLogger(name)
