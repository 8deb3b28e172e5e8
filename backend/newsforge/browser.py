"""
Shared Chromium instance and isolated per-extraction page sessions.

One browser is launched lazily on first use and reused by every caller.
Each session gets its own browser context (no shared cookies, storage or
script state) and one page. A semaphore bounds how many sessions can be
open at once; extra callers wait for a slot.
"""

import asyncio
import logging

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from newsforge.config import get_settings
from newsforge.errors import BrowserUnavailable

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]


class PageSession:
    """
    One isolated page. Exposes the four operations the extraction
    pipeline needs: navigate, evaluate, screenshot, close.
    """

    def __init__(self, context: BrowserContext, page: Page, on_close=None):
        self._context = context
        self._page = page
        self._on_close = on_close
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def navigate(self, url: str, wait_until: str = "networkidle", timeout_ms: int = 30000):
        """Load a URL. Raises playwright's TimeoutError when the deadline passes."""
        return await self._page.goto(url, wait_until=wait_until, timeout=timeout_ms)

    async def evaluate(self, script: str, arg=None):
        if arg is None:
            return await self._page.evaluate(script)
        return await self._page.evaluate(script, arg)

    async def screenshot(self, type: str = "png", full_page: bool = False) -> bytes:
        return await self._page.screenshot(type=type, full_page=full_page)

    async def close(self):
        """Release the page and its context. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._context.close()
        except Exception as e:
            # A crashed page or a dead browser leaves nothing to release
            logger.warning(f"[browser] Context close failed: {e}")
        finally:
            if self._on_close:
                self._on_close()


class BrowserManager:
    def __init__(self, max_sessions: int | None = None):
        settings = get_settings()
        self.max_sessions = max_sessions or settings.max_concurrent_extractions
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._init_lock = asyncio.Lock()
        self._slots = asyncio.Semaphore(self.max_sessions)
        self._open_sessions = 0

    @property
    def is_running(self) -> bool:
        return self._browser is not None and self._browser.is_connected()

    @property
    def open_sessions(self) -> int:
        return self._open_sessions

    async def _launch(self) -> tuple[Playwright, Browser]:
        settings = get_settings()
        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.launch(
                headless=settings.browser_headless,
                args=LAUNCH_ARGS,
            )
        except Exception:
            await playwright.stop()
            raise
        return playwright, browser

    async def get_browser(self) -> Browser:
        """Return the shared browser, launching it once and again only after a crash."""
        if self.is_running:
            return self._browser

        async with self._init_lock:
            if self._browser is not None and not self._browser.is_connected():
                logger.warning("[browser] Shared Chromium instance disconnected, relaunching")
                await self._discard()
            # A concurrent first caller may have finished launching while we waited
            if self._browser is None:
                logger.info("[browser] Launching shared Chromium instance")
                try:
                    self._playwright, self._browser = await self._launch()
                except Exception as e:
                    logger.error(f"[browser] Launch failed: {e}")
                    raise BrowserUnavailable(f"Could not start browser: {e}") from e
        return self._browser

    async def acquire_session(self) -> PageSession:
        """Open a fresh context + page. Waits when all session slots are busy."""
        settings = get_settings()
        await self._slots.acquire()
        context = None
        try:
            browser = await self.get_browser()
            context = await browser.new_context(
                viewport={"width": settings.viewport_width, "height": settings.viewport_height},
                user_agent=settings.user_agent,
            )
            page = await context.new_page()
        except BrowserUnavailable:
            await self._abandon(context)
            raise
        except Exception as e:
            await self._abandon(context)
            raise BrowserUnavailable(f"Could not open a page session: {e}") from e
        except BaseException:
            # Cancelled while waiting on the browser
            await self._abandon(context)
            raise

        self._open_sessions += 1
        return PageSession(context, page, on_close=self._release)

    async def _abandon(self, context: BrowserContext | None):
        """Undo a half-finished acquire: close the context if one was opened, free the slot."""
        try:
            if context is not None:
                await context.close()
        except Exception as e:
            logger.warning(f"[browser] Context close failed: {e}")
        finally:
            self._slots.release()

    def _release(self):
        self._open_sessions -= 1
        self._slots.release()

    async def _discard(self):
        """Close and forget the current browser. Caller holds _init_lock."""
        browser, playwright = self._browser, self._playwright
        self._browser = None
        self._playwright = None
        if browser is not None:
            try:
                await browser.close()
            except Exception as e:
                logger.warning(f"[browser] Browser close failed: {e}")
        if playwright is not None:
            await playwright.stop()
            logger.info("[browser] Shared Chromium instance stopped")

    async def shutdown(self):
        """Close the shared browser. Idempotent."""
        async with self._init_lock:
            await self._discard()


# Global singleton
browser_manager = BrowserManager()
