"""Instantâneo de uma página após a renderização no navegador."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedPage:
    """HTML serializado do DOM e o endereço final após redirecionamentos."""

    url: str
    html: str
