"""Data de consulta no formato usado pelo Diário Oficial."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

_SEARCH_DATE_RE = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")


@dataclass(frozen=True)
class SearchDate:
    """Data no formato ``DD-MM-YYYY`` aceita pela página de leitura do jornal."""

    value: str

    @classmethod
    def normalize(cls, raw: str | None, today: date | None = None) -> "SearchDate":
        """Mantém ``raw`` quando já está no formato esperado ou usa a data atual.

        A validação é apenas de forma: ``31-02-2030`` é aceito sem verificação
        de calendário. Entradas fora do formato são substituídas silenciosamente
        pela data local corrente (ou ``today``, quando informado).
        """

        if raw is not None and _SEARCH_DATE_RE.fullmatch(raw):
            return cls(raw)
        current = today or date.today()
        return cls(current.strftime("%d-%m-%Y"))

    def __str__(self) -> str:
        return self.value
