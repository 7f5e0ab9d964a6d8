"""Sessão de renderização baseada no Playwright (API síncrona)."""
from __future__ import annotations

import logging
from typing import Sequence

from playwright.sync_api import sync_playwright

from naturaliza.domain import RenderedPage, RenderingSession, SessionFactory
from naturaliza.settings import Settings

_DEFAULT_LAUNCH_ARGS = ("--no-sandbox",)


class PlaywrightRenderingSession(RenderingSession):
    """Um Chromium com uma única página, aberto para uma consulta."""

    def __init__(
        self,
        *,
        headless: bool = True,
        launch_args: Sequence[str] = _DEFAULT_LAUNCH_ARGS,
        navigation_timeout_ms: int | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._log = logging.getLogger("naturaliza.browser")
        self._pw = sync_playwright().start()
        try:
            self._browser = self._pw.chromium.launch(
                headless=headless, args=list(launch_args)
            )
            self._page = self._browser.new_page(user_agent=user_agent)
        except Exception:
            self._pw.stop()
            raise
        if navigation_timeout_ms is not None:
            self._page.set_default_navigation_timeout(navigation_timeout_ms)
        self._closed = False

    def render(self, url: str, *, settle_ms: int = 0) -> RenderedPage:
        self._log.debug("GET %s", url)
        self._page.goto(url, wait_until="networkidle")
        if settle_ms > 0:
            self._page.wait_for_timeout(settle_ms)
        return RenderedPage(url=self._page.url, html=self._page.content())

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._browser.close()
        except Exception as exc:
            self._log.warning("falha ao fechar o navegador: %s", exc)
        try:
            self._pw.stop()
        except Exception as exc:
            self._log.warning("falha ao encerrar o Playwright: %s", exc)


def playwright_session_factory(settings: Settings) -> SessionFactory:
    """Criar uma fábrica de sessões configurada a partir de ``settings``."""

    def factory() -> RenderingSession:
        return PlaywrightRenderingSession(
            headless=settings.headless,
            navigation_timeout_ms=settings.navigation_timeout_ms,
            user_agent=settings.user_agent,
        )

    return factory


__all__ = ["PlaywrightRenderingSession", "playwright_session_factory"]
