"""Adaptadores de infraestrutura do coletor."""

from .browser import PlaywrightRenderingSession, playwright_session_factory

__all__ = ["PlaywrightRenderingSession", "playwright_session_factory"]
