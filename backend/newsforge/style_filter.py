"""
Layout-relevant CSS from the loaded page.

Collects every rule the page can see and keeps the ones that touch page
structure, typography or responsive behaviour.
"""

# Stylesheets from other origins without CORS throw on .cssRules; skip them
COLLECT_RULES_JS = '''() => {
    const rules = [];
    for (const sheet of Array.from(document.styleSheets)) {
        try {
            if (!sheet.cssRules) continue;
            for (const rule of Array.from(sheet.cssRules)) {
                rules.push(rule.cssText);
            }
        } catch (e) {
            continue;
        }
    }
    return rules;
}'''

STRUCTURAL_KEYWORDS = (
    "article",
    "main",
    "content",
    "container",
    "layout",
    "grid",
    "sidebar",
    "header",
)
TYPOGRAPHIC_KEYWORDS = ("h1", "h2", "h3", "body", "p {")
MEDIA_KEYWORD = "@media"

LAYOUT_KEYWORDS = STRUCTURAL_KEYWORDS + TYPOGRAPHIC_KEYWORDS + (MEDIA_KEYWORD,)


def is_layout_rule(rule_text: str) -> bool:
    return any(keyword in rule_text for keyword in LAYOUT_KEYWORDS)


def filter_layout_rules(rules: list[str] | None) -> str:
    """Keep layout-relevant rules in source order, separated by blank lines."""
    if not rules:
        return ""
    return "\n\n".join(r for r in rules if r and is_layout_rule(r))


async def extract_layout_css(session) -> str:
    rules = await session.evaluate(COLLECT_RULES_JS)
    return filter_layout_rules(rules)
