"""Entidade que descreve o diário oficial consultado."""
from __future__ import annotations

from dataclasses import dataclass

from .search_date import SearchDate


@dataclass(frozen=True)
class Gazette:
    """Publicação oficial indexada por data."""

    #: Template da página de leitura diária contendo ``{date}``.
    listing_url_template: str
    #: Seção do jornal substituída em ``{section}`` quando presente.
    section: str = "dou1"

    def listing_url_for(self, search_date: SearchDate) -> str:
        """Gerar a URL da listagem correspondente à data desejada."""

        if "{date}" not in self.listing_url_template:
            raise ValueError(
                "O template de listagem deve conter '{date}' para consulta por data."
            )
        try:
            return self.listing_url_template.format(
                date=search_date.value, section=self.section
            )
        except (KeyError, IndexError) as exc:
            raise ValueError(
                "O template de listagem aceita apenas '{date}' e '{section}': "
                f"{self.listing_url_template}"
            ) from exc
