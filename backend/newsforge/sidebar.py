"""Sidebar detection over the usual secondary-column selectors."""

SIDEBAR_SELECTORS = [
    "aside",
    ".sidebar",
    '[role="complementary"]',
    ".side-column",
    ".widget-area",
]

# Anything smaller is decoration or a hidden widget, not a column
MIN_SIDEBAR_WIDTH = 100
MIN_SIDEBAR_HEIGHT = 100

MEASURE_CANDIDATES_JS = '''(selectors) => selectors.map((selector) => {
    const el = document.querySelector(selector);
    if (!el) return null;
    const rect = el.getBoundingClientRect();
    return { selector, width: rect.width, height: rect.height };
})'''


def is_substantial(box: dict | None) -> bool:
    if not box:
        return False
    width = box.get("width") or 0
    height = box.get("height") or 0
    return width > MIN_SIDEBAR_WIDTH and height > MIN_SIDEBAR_HEIGHT


def has_sidebar(candidates: list[dict | None] | None) -> bool:
    """True when the first match of any selector, checked in order, is big enough."""
    for box in candidates or []:
        if is_substantial(box):
            return True
    return False


async def detect_sidebar(session) -> bool:
    candidates = await session.evaluate(MEASURE_CANDIDATES_JS, SIDEBAR_SELECTORS)
    return has_sidebar(candidates)
