"""
Layout fingerprint — grid system, column count, typography, colors and
responsive breakpoints of a rendered page.

A single page script reads the raw signals (computed styles, bounding
boxes, media rule conditions). Each heuristic below turns its slice of
those signals into one LayoutMetadata field and falls back to a fixed
default when the page had nothing to read. None of them raise.
"""

import math

from newsforge.models import ColorScheme, GridSystem, LayoutMetadata, Responsive, Typography

CONTENT_ROOT_SELECTOR = "main, article, .content"

DEFAULT_BODY_SIZE = "16px"
DEFAULT_LINK_COLOR = "#0000ff"
DEFAULT_BORDER_COLOR = "#cccccc"

COLLECT_SIGNALS_JS = '''(rootSelector) => {
    const safe = (read, fallback) => {
        try { return read(); } catch (e) { return fallback; }
    };

    const root = document.querySelector(rootSelector);
    const body = document.body;

    return {
        root: safe(() => {
            if (!root) return null;
            const s = getComputedStyle(root);
            return {
                display: s.display,
                float: s.float,
                gridTemplateColumns: s.gridTemplateColumns,
                width: root.getBoundingClientRect().width,
                childWidths: Array.from(root.children).map(
                    (child) => child.getBoundingClientRect().width
                ),
            };
        }, null),

        fonts: safe(() => Array.from(
            document.querySelectorAll('h1, h2, h3, h4, h5, h6, p, body')
        ).map((el) => getComputedStyle(el).fontFamily), []),

        headingSizes: safe(() => ['h1', 'h2', 'h3'].map((tag) => {
            const el = document.querySelector(tag);
            return el ? getComputedStyle(el).fontSize : null;
        }), []),

        bodySize: safe(() => getComputedStyle(body).fontSize, null),

        colors: safe(() => {
            const bs = getComputedStyle(body);
            const link = document.querySelector('a');
            return {
                background: bs.backgroundColor,
                text: bs.color,
                links: link ? getComputedStyle(link).color : null,
                borders: bs.borderColor || null,
            };
        }, null),

        mediaConditions: safe(() => {
            const conditions = [];
            for (const sheet of Array.from(document.styleSheets)) {
                try {
                    if (!sheet.cssRules) continue;
                    for (const rule of Array.from(sheet.cssRules)) {
                        if (rule.type === CSSRule.MEDIA_RULE) {
                            conditions.push(rule.conditionText || rule.media.mediaText);
                        }
                    }
                } catch (e) {
                    continue;
                }
            }
            return conditions;
        }, []),
    };
}'''


def detect_grid_system(root: dict | None) -> GridSystem:
    """Precedence: grid, then flex, then float."""
    if not root:
        return GridSystem.UNKNOWN
    display = root.get("display")
    if display == "grid":
        return GridSystem.GRID
    if display == "flex":
        return GridSystem.FLEXBOX
    float_value = root.get("float")
    if float_value and float_value != "none":
        return GridSystem.FLOAT
    return GridSystem.UNKNOWN


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def count_columns(root: dict | None, grid_system: GridSystem) -> int:
    """
    Estimate content columns.

    Grid roots count their grid-template-columns tracks. Everything else
    divides the root width by the mean width of its direct children. This is
    approximate and misfires on deliberately uneven columns.
    """
    if not root:
        return 1

    if grid_system == GridSystem.GRID:
        tracks = (root.get("gridTemplateColumns") or "").split()
        if tracks and tracks != ["none"]:
            return len(tracks)

    widths = [w for w in (root.get("childWidths") or []) if isinstance(w, (int, float))]
    if not widths:
        return 1
    mean_width = sum(widths) / len(widths)
    container_width = root.get("width") or 0
    if mean_width <= 0 or container_width <= 0:
        return 1
    return max(1, _round_half_up(container_width / mean_width))


def extract_typography(fonts, heading_sizes, body_size) -> Typography:
    return Typography(
        fonts=[f for f in (fonts or []) if f],
        heading_sizes=[s for s in (heading_sizes or []) if s],
        body_size=body_size or DEFAULT_BODY_SIZE,
    )


def extract_color_scheme(colors: dict | None) -> ColorScheme:
    colors = colors or {}
    defaults = ColorScheme()
    return ColorScheme(
        background=colors.get("background") or defaults.background,
        text=colors.get("text") or defaults.text,
        links=colors.get("links") or DEFAULT_LINK_COLOR,
        borders=colors.get("borders") or DEFAULT_BORDER_COLOR,
    )


def harvest_breakpoints(conditions) -> Responsive:
    return Responsive(breakpoints=[c for c in (conditions or []) if c])


def build_layout_metadata(signals: dict | None) -> LayoutMetadata:
    signals = signals or {}
    root = signals.get("root")
    grid_system = detect_grid_system(root)
    return LayoutMetadata(
        columns=count_columns(root, grid_system),
        grid_system=grid_system,
        typography=extract_typography(
            signals.get("fonts"),
            signals.get("headingSizes"),
            signals.get("bodySize"),
        ),
        color_scheme=extract_color_scheme(signals.get("colors")),
        responsive=harvest_breakpoints(signals.get("mediaConditions")),
    )


async def analyze_layout(session) -> LayoutMetadata:
    signals = await session.evaluate(COLLECT_SIGNALS_JS, CONTENT_ROOT_SELECTOR)
    return build_layout_metadata(signals)
