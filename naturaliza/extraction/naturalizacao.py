"""Parser das cláusulas de concessão de nacionalidade brasileira.

O texto das portarias não tem estrutura fixa: os registros são obtidos por
uma única expressão regular aplicada ao HTML da versão certificada. Alterar
``PERSON_PATTERN`` muda o formato dos dados publicados, por isso o padrão é
versionado em ``PATTERN_VERSION``.
"""
from __future__ import annotations

import re
from typing import List

from naturaliza.domain import NaturalizationRecord

PATTERN_VERSION = "1"

_LINE_BREAK_RE = re.compile(r"\r?\n")

GRANT_BLOCK_PATTERN = re.compile(
    r"CONCEDER a nacionalidade brasileira[\s\S]*?PORTARIA Nº", re.IGNORECASE
)

# nome - identificador, natural da <origem>, nascid[oa] em <data>,
# filh[oa] de <pai> e <mãe>, ... Processo [nº] <número>
PERSON_PATTERN = re.compile(
    r"([A-ZÀ-Ú\s\-'’]+?)\s*-\s*"
    r"([A-Z0-9\-/]+),\s*"
    r"natural da\s*([^,]+),\s*"
    r"nascid[oa]\s+em\s+([^,]+),\s*"
    r"filh[oa]\s+de\s+([^,]+?)\s+e\s+([^,]+?),"
    r"[\s\S]*?Processo\s+(?:n[ºo]\s*)?([0-9./]+)",
    re.IGNORECASE,
)


def collapse_line_breaks(text: str) -> str:
    """Unir as linhas para que cláusulas quebradas sejam lidas como uma só."""

    return _LINE_BREAK_RE.sub(" ", text)


def find_grant_block(text: str) -> str:
    """Recortar o trecho "CONCEDER a nacionalidade brasileira ... PORTARIA Nº".

    Sem esse trecho o texto inteiro é devolvido para a busca de registros.
    """

    match = GRANT_BLOCK_PATTERN.search(text)
    return match.group(0) if match else text


def parse_naturalizacoes(html: str) -> List[NaturalizationRecord]:
    """Extrair os naturalizandos na ordem em que aparecem no documento."""

    block = find_grant_block(collapse_line_breaks(html))
    records: List[NaturalizationRecord] = []
    for match in PERSON_PATTERN.finditer(block):
        name, identifier, origin, birth_date, parent1, parent2, process = (
            group.strip() for group in match.groups()
        )
        records.append(
            NaturalizationRecord(
                name=name,
                id=identifier,
                origin=origin,
                birth_date=birth_date,
                parent1=parent1,
                parent2=parent2,
                process=process,
            )
        )
    return records


__all__ = [
    "GRANT_BLOCK_PATTERN",
    "PATTERN_VERSION",
    "PERSON_PATTERN",
    "collapse_line_breaks",
    "find_grant_block",
    "parse_naturalizacoes",
]
