"""Entidades que representam as portarias encontradas em uma edição."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .naturalizacao import NaturalizationRecord
from .search_date import SearchDate


@dataclass(frozen=True)
class PortariaListing:
    """Item da listagem diária que aponta para a página de detalhe."""

    #: Texto visível do link na listagem.
    title: str
    #: Endereço absoluto da página de detalhe da portaria.
    detail_url: str


@dataclass(frozen=True)
class ResultEntry:
    """Resultado do processamento de uma portaria da listagem."""

    portaria: PortariaListing
    #: Endereço da versão certificada ou ``None`` quando não localizada.
    certified_url: Optional[str] = None
    naturalizados: Tuple[NaturalizationRecord, ...] = field(default_factory=tuple)
    #: Aviso registrado quando a portaria não pôde ser processada por completo.
    warning: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "portaria": {
                "title": self.portaria.title,
                "detailUrl": self.portaria.detail_url,
                "certifiedUrl": self.certified_url,
            },
            "naturalizados": [record.to_payload() for record in self.naturalizados],
        }
        if self.warning is not None:
            payload["warning"] = self.warning
        return payload


@dataclass(frozen=True)
class FetchResult:
    """Resumo de uma consulta completa para uma data."""

    date: SearchDate
    results: Tuple[ResultEntry, ...] = field(default_factory=tuple)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "date": self.date.value,
            "results": [entry.to_payload() for entry in self.results],
        }
