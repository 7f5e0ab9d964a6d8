"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

_DEFAULT_API_BIND_HOST = "0.0.0.0"
_DEFAULT_API_PORT = 3000
_DEFAULT_LISTING_URL_TEMPLATE = (
    "https://www.in.gov.br/leiturajornal?secao={section}&data={date}"
)
_DEFAULT_SECTION = "dou1"
_DEFAULT_SETTLE_DELAY_MS = 1000
_TRUE_VALUES = {"1", "true", "yes", "on", "sim"}


def _int_env(name: str, default: int | None, *fallbacks: str) -> int | None:
    for key in (name, *fallbacks):
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            continue
        try:
            return int(raw)
        except ValueError as exc:
            raise RuntimeError(
                f"Invalid integer in environment variable {key!r}: {raw}"
            ) from exc
    return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Parâmetros de execução do coletor e da API."""

    #: Porta TCP usada pelo Uvicorn.
    port: int = _DEFAULT_API_PORT
    #: Interface de rede em que a API escuta conexões.
    bind_host: str = _DEFAULT_API_BIND_HOST
    #: Template da página de índice do diário, com ``{date}`` e ``{section}``.
    listing_url_template: str = _DEFAULT_LISTING_URL_TEMPLATE
    #: Seção do diário consultada (``dou1`` publica as portarias).
    section: str = _DEFAULT_SECTION
    #: Espera adicional após o carregamento da listagem, em milissegundos.
    settle_delay_ms: int = _DEFAULT_SETTLE_DELAY_MS
    #: Limite de navegação do navegador; ``None`` mantém o padrão do Playwright.
    navigation_timeout_ms: int | None = None
    #: Executa o Chromium sem interface gráfica.
    headless: bool = True
    #: User-Agent enviado pelo navegador; ``None`` mantém o do Chromium.
    user_agent: str | None = None
    #: Nível de log aplicado pela CLI.
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Constrói as configurações a partir das variáveis de ambiente."""

        return cls(
            port=_int_env("NATURALIZA_API_PORT", _DEFAULT_API_PORT, "PORT"),
            bind_host=os.getenv("NATURALIZA_API_BIND_HOST", _DEFAULT_API_BIND_HOST),
            listing_url_template=os.getenv(
                "GAZETTE_LISTING_URL_TEMPLATE", _DEFAULT_LISTING_URL_TEMPLATE
            ),
            section=os.getenv("GAZETTE_SECTION", _DEFAULT_SECTION),
            settle_delay_ms=_int_env(
                "GAZETTE_SETTLE_DELAY_MS", _DEFAULT_SETTLE_DELAY_MS
            ),
            navigation_timeout_ms=_int_env("BROWSER_NAVIGATION_TIMEOUT_MS", None),
            headless=_bool_env("BROWSER_HEADLESS", True),
            user_agent=os.getenv("BROWSER_USER_AGENT") or None,
            log_level=os.getenv("NATURALIZA_LOG_LEVEL", "INFO"),
        )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Retorna as configurações do processo, carregando o ``.env`` uma vez."""

    load_dotenv()
    return Settings.from_env()


__all__ = ["Settings", "get_settings"]
