"""Naturaliza - coletor de naturalizações publicadas no Diário Oficial."""
from .application import NaturalizationFetchService
from .container import build_container
from .domain import (
    FetchResult,
    NaturalizationRecord,
    PortariaListing,
    ResultEntry,
    SearchDate,
)

__all__ = [
    "FetchResult",
    "NaturalizationFetchService",
    "NaturalizationRecord",
    "PortariaListing",
    "ResultEntry",
    "SearchDate",
    "build_container",
]
