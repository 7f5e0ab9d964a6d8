"""Serviço de orquestração da consulta de naturalizações."""
from __future__ import annotations

import logging
from typing import Callable, List

from naturaliza.domain import (
    FetchResult,
    Gazette,
    PortariaListing,
    RenderingSession,
    ResultEntry,
    SearchDate,
    SessionFactory,
)
from naturaliza.extraction import (
    DEFAULT_PORTARIA_MARKER,
    extract_portarias,
    find_certified_link,
    parse_naturalizacoes,
)

CERTIFIED_NOT_FOUND_WARNING = "Certified version not found"


class NaturalizationFetchService:
    """Coordena listagem, resolução do link certificado e extração."""

    def __init__(
        self,
        session_factory: SessionFactory,
        gazette: Gazette,
        *,
        settle_delay_ms: int = 1000,
        listing_marker: str = DEFAULT_PORTARIA_MARKER,
        status_publisher: Callable[[str], None] | None = None,
    ) -> None:
        """Configura o serviço com todas as dependências necessárias.

        Args:
            session_factory: Fábrica que abre uma sessão de navegador nova a
                cada consulta.
            gazette: Diário consultado, responsável por montar a URL diária.
            settle_delay_ms: Espera extra após carregar a listagem, já que os
                links são inseridos por script depois do carregamento.
            listing_marker: Trecho do ``href`` que identifica portarias.
            status_publisher: Callback opcional para mensagens de progresso.
        """

        self._session_factory = session_factory
        self._gazette = gazette
        self._settle_delay_ms = settle_delay_ms
        self._listing_marker = listing_marker
        self._status_publisher = status_publisher
        self._log = logging.getLogger("naturaliza.fetcher")

    def with_status_publisher(
        self, publisher: Callable[[str], None] | None
    ) -> "NaturalizationFetchService":
        """Cria uma nova instância compartilhando dependências e publisher."""

        return NaturalizationFetchService(
            self._session_factory,
            self._gazette,
            settle_delay_ms=self._settle_delay_ms,
            listing_marker=self._listing_marker,
            status_publisher=publisher,
        )

    def _publish_status(self, message: str) -> None:
        if self._status_publisher:
            self._status_publisher(message)

    def fetch(self, search_date: SearchDate) -> FetchResult:
        """Consulta a edição da data e extrai as naturalizações publicadas.

        Qualquer falha de navegação interrompe a consulta inteira: a sessão é
        fechada e a exceção propagada sem resultados parciais.
        """

        listing_url = self._gazette.listing_url_for(search_date)
        with self._session_factory() as session:
            self._log.info("GET %s", listing_url)
            listing_page = session.render(listing_url, settle_ms=self._settle_delay_ms)
            portarias = extract_portarias(listing_page, self._listing_marker)
            self._log.info("%d portarias na listagem", len(portarias))
            self._publish_status(f"{search_date}: {len(portarias)} portarias")

            results: List[ResultEntry] = []
            for idx, portaria in enumerate(portarias, start=1):
                entry = self._process_portaria(session, portaria)
                results.append(entry)
                self._publish_status(
                    f"[{idx}/{len(portarias)}] {portaria.title}: "
                    f"{len(entry.naturalizados)} naturalizados"
                )

        return FetchResult(date=search_date, results=tuple(results))

    def _process_portaria(
        self, session: RenderingSession, portaria: PortariaListing
    ) -> ResultEntry:
        self._log.debug("GET detalhe %s", portaria.detail_url)
        detail_page = session.render(portaria.detail_url)
        certified_url = find_certified_link(detail_page)
        if certified_url is None:
            self._log.warning(
                "versão certificada não encontrada em %s", portaria.detail_url
            )
            return ResultEntry(portaria=portaria, warning=CERTIFIED_NOT_FOUND_WARNING)

        self._log.debug("GET versão certificada %s", certified_url)
        certified_page = session.render(certified_url)
        records = parse_naturalizacoes(certified_page.html)
        self._log.info("%s: %d naturalizados", portaria.title, len(records))
        return ResultEntry(
            portaria=portaria,
            certified_url=certified_url,
            naturalizados=tuple(records),
        )


__all__ = ["CERTIFIED_NOT_FOUND_WARNING", "NaturalizationFetchService"]
