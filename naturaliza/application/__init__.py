"""Interface pública dos serviços de aplicação."""

from .servico_naturalizacoes import (
    CERTIFIED_NOT_FOUND_WARNING,
    NaturalizationFetchService,
)

__all__ = ["CERTIFIED_NOT_FOUND_WARNING", "NaturalizationFetchService"]
