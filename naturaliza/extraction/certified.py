"""Localização do link para a versão certificada de uma portaria."""
from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from naturaliza.domain import RenderedPage

from .listing import document_base_url

_CERTIFIED_VERSION_RE = re.compile(r"vers[aã]o certificada", re.IGNORECASE)
# Variações de texto do link; pode casar com links de navegação da página.
_CERTIFIED_FALLBACK_RE = re.compile(r"certificada", re.IGNORECASE)


def _first_link(soup: BeautifulSoup, pattern: re.Pattern[str], base_url: str) -> Optional[str]:
    for anchor in soup.find_all("a"):
        if pattern.search(anchor.get_text()):
            href = anchor.get("href")
            if href is None:
                return None
            return urljoin(base_url, href)
    return None


def find_certified_link(page: RenderedPage) -> Optional[str]:
    """Retornar o endereço da "Versão certificada" ou ``None``.

    O texto exato tem prioridade; na ausência dele vale o primeiro link que
    apenas contenha "certificada".
    """

    soup = BeautifulSoup(page.html, "html.parser")
    base_url = document_base_url(soup, page.url)
    return _first_link(soup, _CERTIFIED_VERSION_RE, base_url) or _first_link(
        soup, _CERTIFIED_FALLBACK_RE, base_url
    )


__all__ = ["find_certified_link"]
