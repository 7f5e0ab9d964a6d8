"""Testes da sessão Playwright com um driver falso."""
from __future__ import annotations

import logging

import pytest

from naturaliza.infrastructure import browser
from naturaliza.infrastructure.browser import (
    PlaywrightRenderingSession,
    playwright_session_factory,
)
from naturaliza.settings import Settings


class _DummyPage:
    def __init__(self) -> None:
        self.url = "about:blank"
        self.calls: list[tuple] = []

    def goto(self, url: str, wait_until: str | None = None) -> None:
        self.calls.append(("goto", url, wait_until))
        self.url = url

    def wait_for_timeout(self, timeout: int) -> None:
        self.calls.append(("wait_for_timeout", timeout))

    def content(self) -> str:
        return f"<html><body>{self.url}</body></html>"

    def set_default_navigation_timeout(self, timeout: int) -> None:
        self.calls.append(("set_default_navigation_timeout", timeout))


class _DummyBrowser:
    def __init__(self, fail_on_close: bool = False) -> None:
        self.page = _DummyPage()
        self.page_kwargs: dict | None = None
        self.close_calls = 0
        self._fail_on_close = fail_on_close

    def new_page(self, **kwargs) -> _DummyPage:
        self.page_kwargs = kwargs
        return self.page

    def close(self) -> None:
        self.close_calls += 1
        if self._fail_on_close:
            raise RuntimeError("Target closed")


class _DummyChromium:
    def __init__(self, browser_instance: _DummyBrowser, fail_on_launch: bool) -> None:
        self._browser = browser_instance
        self._fail_on_launch = fail_on_launch
        self.launch_kwargs: dict | None = None

    def launch(self, **kwargs) -> _DummyBrowser:
        self.launch_kwargs = kwargs
        if self._fail_on_launch:
            raise RuntimeError("Executable doesn't exist")
        return self._browser


class _DummyPlaywright:
    def __init__(self, fail_on_launch: bool = False, fail_on_close: bool = False) -> None:
        self.browser = _DummyBrowser(fail_on_close=fail_on_close)
        self.chromium = _DummyChromium(self.browser, fail_on_launch)
        self.stop_calls = 0

    def start(self) -> "_DummyPlaywright":
        return self

    def stop(self) -> None:
        self.stop_calls += 1


def _install(monkeypatch, **kwargs) -> _DummyPlaywright:
    driver = _DummyPlaywright(**kwargs)
    monkeypatch.setattr(browser, "sync_playwright", lambda: driver)
    return driver


def test_failed_launch_stops_driver_and_reraises(monkeypatch):
    driver = _install(monkeypatch, fail_on_launch=True)

    with pytest.raises(RuntimeError, match="Executable"):
        PlaywrightRenderingSession()

    assert driver.stop_calls == 1


def test_launch_uses_headless_and_no_sandbox(monkeypatch):
    driver = _install(monkeypatch)

    PlaywrightRenderingSession(headless=False, navigation_timeout_ms=45000)

    assert driver.chromium.launch_kwargs == {"headless": False, "args": ["--no-sandbox"]}
    assert ("set_default_navigation_timeout", 45000) in driver.browser.page.calls


def test_render_waits_for_network_idle_and_settle_delay(monkeypatch):
    driver = _install(monkeypatch)
    session = PlaywrightRenderingSession()

    listing = session.render("https://www.in.gov.br/leiturajornal", settle_ms=1000)
    detail = session.render("https://www.in.gov.br/web/dou/-/portaria-n-1")

    assert driver.browser.page.calls == [
        ("goto", "https://www.in.gov.br/leiturajornal", "networkidle"),
        ("wait_for_timeout", 1000),
        ("goto", "https://www.in.gov.br/web/dou/-/portaria-n-1", "networkidle"),
    ]
    assert listing.url == "https://www.in.gov.br/leiturajornal"
    assert "portaria-n-1" in detail.html


def test_close_is_idempotent(monkeypatch):
    driver = _install(monkeypatch)
    session = PlaywrightRenderingSession()

    session.close()
    session.close()

    assert driver.browser.close_calls == 1
    assert driver.stop_calls == 1


def test_close_logs_browser_failure_and_still_stops_driver(monkeypatch, caplog):
    driver = _install(monkeypatch, fail_on_close=True)
    session = PlaywrightRenderingSession()

    with caplog.at_level(logging.WARNING, logger="naturaliza.browser"):
        session.close()

    assert driver.stop_calls == 1
    assert any(
        record.name == "naturaliza.browser" and "Target closed" in record.getMessage()
        for record in caplog.records
    )


def test_context_manager_closes_session(monkeypatch):
    driver = _install(monkeypatch)

    with PlaywrightRenderingSession() as session:
        session.render("https://www.in.gov.br/")

    assert driver.browser.close_calls == 1
    assert driver.stop_calls == 1


def test_factory_forwards_settings(monkeypatch):
    driver = _install(monkeypatch)
    settings = Settings(headless=False, navigation_timeout_ms=5000, user_agent="Naturaliza/1.0")

    session = playwright_session_factory(settings)()

    assert isinstance(session, PlaywrightRenderingSession)
    assert driver.chromium.launch_kwargs["headless"] is False
    assert driver.browser.page_kwargs == {"user_agent": "Naturaliza/1.0"}
    assert ("set_default_navigation_timeout", 5000) in driver.browser.page.calls
