"""
Template extraction — drive one page session through the full sequence:

  navigate → wait for network idle → strip <script> elements →
  style filter, skeleton, layout fingerprint, sidebar →
  viewport screenshot → close

The session is closed on every exit path. Any failure after the session is
open surfaces as ExtractionFailed; partial results are never returned.
"""

import logging

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from newsforge.browser import BrowserManager, browser_manager
from newsforge.config import get_settings
from newsforge.errors import ExtractionFailed
from newsforge.image_utils import screenshot_to_data_url
from newsforge.layout_analyzer import analyze_layout
from newsforge.models import ExtractedTemplate
from newsforge.sidebar import detect_sidebar
from newsforge.skeleton import extract_skeleton
from newsforge.style_filter import extract_layout_css

logger = logging.getLogger(__name__)

# Freezes the DOM: nothing can mutate the page while it is being measured
STRIP_SCRIPTS_JS = '''() => {
    document.querySelectorAll('script').forEach((script) => script.remove());
}'''


class TemplateExtractor:
    def __init__(self, browser: BrowserManager | None = None):
        self._browser = browser or browser_manager

    async def extract(self, url: str, timeout_ms: int | None = None) -> ExtractedTemplate:
        settings = get_settings()
        timeout_ms = timeout_ms or settings.page_load_timeout

        # BrowserUnavailable propagates as-is: no session was opened
        session = await self._browser.acquire_session()
        try:
            logger.info(f"[extract] Loading {url}")
            try:
                await session.navigate(url, wait_until="networkidle", timeout_ms=timeout_ms)
            except PlaywrightTimeoutError as e:
                raise ExtractionFailed(url, f"navigation timed out after {timeout_ms}ms") from e

            await session.evaluate(STRIP_SCRIPTS_JS)

            css_styles = await extract_layout_css(session)
            html_structure = await extract_skeleton(session)
            layout_metadata = await analyze_layout(session)
            has_sidebar = await detect_sidebar(session)

            screenshot = await session.screenshot(type="png", full_page=False)
            preview_image = None
            if screenshot:
                preview_image = screenshot_to_data_url(
                    screenshot,
                    compress=settings.preview_compress,
                    max_width=settings.preview_max_width,
                    quality=settings.preview_quality,
                )
        except ExtractionFailed as e:
            logger.error(f"[extract] {e}")
            raise
        except Exception as e:
            logger.error(f"[extract] Extraction of {url} failed: {e}")
            raise ExtractionFailed(url, str(e) or type(e).__name__) from e
        finally:
            await session.close()

        logger.info(
            f"[extract] {url}: {layout_metadata.grid_system.value}, "
            f"{layout_metadata.columns} column(s), sidebar={has_sidebar}, "
            f"{len(layout_metadata.responsive.breakpoints)} breakpoint(s)"
        )
        return ExtractedTemplate(
            css_styles=css_styles,
            html_structure=html_structure,
            has_sidebar=has_sidebar,
            layout_metadata=layout_metadata,
            preview_image=preview_image,
        )


# Global singleton
template_extractor = TemplateExtractor()
