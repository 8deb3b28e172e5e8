"""
Structural skeleton of the article region.

The page script snapshots the DOM under the article root (tags, ids and
classes only). Rendering walks the snapshot and emits nested tags for
container-like elements and placeholder comments for headings and
paragraphs. Text content never reaches the skeleton.
"""

from html import escape

MAX_DEPTH = 5

ROOT_SELECTORS = ["article", "main", '[role="main"]', ".content", ".article"]

FALLBACK_SKELETON = (
    '<main class="content">\n'
    "  <article>\n"
    "    <!-- article content -->\n"
    "  </article>\n"
    "</main>"
)

CONTAINER_TAGS = {"article", "main", "section"}
CONTAINER_CLASSES = {"content", "article"}
TEXT_TAGS = {"h1", "h2", "h3", "p"}

# One level past MAX_DEPTH is captured so the renderer owns the cutoff
SNAPSHOT_DOM_JS = '''([selectors, maxDepth]) => {
    const snapshot = (el, depth) => ({
        tag: el.tagName.toLowerCase(),
        id: el.id || '',
        className: el.getAttribute('class') || '',
        children: depth < maxDepth
            ? Array.from(el.children).map((child) => snapshot(child, depth + 1))
            : [],
    });

    for (const selector of selectors) {
        const root = document.querySelector(selector);
        if (root) return snapshot(root, 0);
    }
    return null;
}'''


def _is_container(tag: str, classes: list[str]) -> bool:
    return tag in CONTAINER_TAGS or any(c in CONTAINER_CLASSES for c in classes)


def render_node(node: dict, depth: int = 0) -> str:
    if depth > MAX_DEPTH:
        return ""

    tag = (node.get("tag") or "div").lower()
    node_id = node.get("id") or ""
    class_name = (node.get("className") or "").strip()
    classes = class_name.split()

    id_attr = f' id="{escape(node_id)}"' if node_id else ""
    class_attr = f' class="{escape(class_name)}"' if class_name else ""

    indent = "  " * depth
    html = f"{indent}<{tag}{id_attr}{class_attr}>"

    if _is_container(tag, classes):
        inner = "".join(render_node(child, depth + 1) for child in node.get("children") or [])
        if inner:
            html += "\n" + inner + indent
    elif tag in TEXT_TAGS:
        html += f"<!-- {tag} content -->"

    html += f"</{tag}>\n"
    return html


def render_skeleton(root: dict | None) -> str:
    """Skeleton for a DOM snapshot, or the generic fallback when no root matched."""
    if not root:
        return FALLBACK_SKELETON
    return render_node(root)


async def extract_skeleton(session) -> str:
    root = await session.evaluate(SNAPSHOT_DOM_JS, [ROOT_SELECTORS, MAX_DEPTH + 1])
    return render_skeleton(root)
