"""Entidades de domínio do coletor de naturalizações."""

from .gazette import Gazette
from .naturalizacao import NaturalizationRecord
from .page import RenderedPage
from .portaria import FetchResult, PortariaListing, ResultEntry
from .search_date import SearchDate

__all__ = [
    "FetchResult",
    "Gazette",
    "NaturalizationRecord",
    "PortariaListing",
    "RenderedPage",
    "ResultEntry",
    "SearchDate",
]
