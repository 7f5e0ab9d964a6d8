"""Registro extraído de uma cláusula de concessão de nacionalidade."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class NaturalizationRecord:
    """Dados de um naturalizando, todos mantidos como texto livre."""

    name: str
    id: str
    origin: str
    birth_date: str
    parent1: str
    parent2: str
    process: str

    def to_payload(self) -> Dict[str, str]:
        """Serializa o registro com as chaves publicadas pela API."""

        return {
            "name": self.name,
            "id": self.id,
            "origin": self.origin,
            "birthDate": self.birth_date,
            "parent1": self.parent1,
            "parent2": self.parent2,
            "process": self.process,
        }
