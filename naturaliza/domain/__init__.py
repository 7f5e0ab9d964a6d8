"""API pública do domínio do coletor de naturalizações.

O módulo centraliza as entidades e portas mais utilizadas para que possam ser
importadas diretamente de ``naturaliza.domain``.
"""

from .entities import (
    FetchResult,
    Gazette,
    NaturalizationRecord,
    PortariaListing,
    RenderedPage,
    ResultEntry,
    SearchDate,
)
from .ports import RenderingSession, SessionFactory

__all__ = [
    "FetchResult",
    "Gazette",
    "NaturalizationRecord",
    "PortariaListing",
    "RenderedPage",
    "RenderingSession",
    "ResultEntry",
    "SearchDate",
    "SessionFactory",
]
