"""Extração de portarias, links certificados e registros de naturalização."""

from .certified import find_certified_link
from .listing import DEFAULT_PORTARIA_MARKER, extract_portarias
from .naturalizacao import (
    PATTERN_VERSION,
    collapse_line_breaks,
    find_grant_block,
    parse_naturalizacoes,
)

__all__ = [
    "DEFAULT_PORTARIA_MARKER",
    "PATTERN_VERSION",
    "collapse_line_breaks",
    "extract_portarias",
    "find_certified_link",
    "find_grant_block",
    "parse_naturalizacoes",
]
