"""Extração dos links de portarias da página de leitura diária."""
from __future__ import annotations

import re
from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from naturaliza.domain import PortariaListing, RenderedPage

DEFAULT_PORTARIA_MARKER = "portaria-n-"


def document_base_url(soup: BeautifulSoup, page_url: str) -> str:
    """Endereço usado pelo navegador para resolver links relativos."""

    base = soup.find("base", href=True)
    if base is None:
        return page_url
    return urljoin(page_url, base["href"])


def extract_portarias(
    page: RenderedPage, marker: str = DEFAULT_PORTARIA_MARKER
) -> List[PortariaListing]:
    """Listar as portarias cujo ``href`` contém ``marker``.

    Links repetidos (mesmo endereço absoluto) aparecem uma única vez, na
    ordem em que foram encontrados no documento.
    """

    marker_re = re.compile(re.escape(marker), re.IGNORECASE)
    soup = BeautifulSoup(page.html, "html.parser")

    base_url = document_base_url(soup, page.url)
    listings: List[PortariaListing] = []
    seen: set[str] = set()
    for anchor in soup.find_all("a"):
        href = anchor.get("href") or ""
        if not marker_re.search(href):
            continue
        detail_url = urljoin(base_url, href)
        if detail_url in seen:
            continue
        seen.add(detail_url)
        listings.append(
            PortariaListing(title=anchor.get_text().strip(), detail_url=detail_url)
        )
    return listings


__all__ = ["DEFAULT_PORTARIA_MARKER", "document_base_url", "extract_portarias"]
