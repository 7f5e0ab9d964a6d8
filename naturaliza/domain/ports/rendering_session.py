"""Porta que abstrai o motor de renderização de páginas."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from naturaliza.domain.entities import RenderedPage


class RenderingSession(ABC):
    """Sessão de navegador exclusiva de uma consulta.

    Implementações devem aguardar a rede ficar ociosa antes de serializar o
    DOM, já que a listagem do diário é montada por script no cliente.
    """

    @abstractmethod
    def render(self, url: str, *, settle_ms: int = 0) -> RenderedPage:
        """Navegar até ``url`` e retornar o HTML renderizado."""

    @abstractmethod
    def close(self) -> None:
        """Liberar o navegador; chamadas repetidas não devem falhar."""

    def __enter__(self) -> "RenderingSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


SessionFactory = Callable[[], RenderingSession]
