"""Dependency container for the naturalization fetcher."""
from __future__ import annotations

from dataclasses import dataclass

from naturaliza.application import NaturalizationFetchService
from naturaliza.domain import Gazette, SessionFactory
from naturaliza.infrastructure import playwright_session_factory
from naturaliza.settings import Settings, get_settings


@dataclass
class AppContainer:
    """Container exposing the fetcher dependencies."""

    settings: Settings
    session_factory: SessionFactory
    fetch_service: NaturalizationFetchService


def build_container(
    settings: Settings | None = None,
    *,
    session_factory: SessionFactory | None = None,
) -> AppContainer:
    """Build the container, using Playwright unless a factory is given."""

    settings = settings or get_settings()
    session_factory = session_factory or playwright_session_factory(settings)
    gazette = Gazette(
        listing_url_template=settings.listing_url_template,
        section=settings.section,
    )
    fetch_service = NaturalizationFetchService(
        session_factory,
        gazette,
        settle_delay_ms=settings.settle_delay_ms,
    )
    return AppContainer(
        settings=settings,
        session_factory=session_factory,
        fetch_service=fetch_service,
    )
