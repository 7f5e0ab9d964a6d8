"""Portas que conectam o domínio com adaptadores externos."""
from .rendering_session import RenderingSession, SessionFactory

__all__ = ["RenderingSession", "SessionFactory"]
