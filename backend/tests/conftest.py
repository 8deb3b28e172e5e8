"""
Shared fixtures: a scripted page session, a browser manager that hands it
out, and an in-memory stand-in for the Supabase template table.
"""

import itertools
from datetime import datetime, timezone

import pytest

from newsforge import database
from newsforge.errors import BrowserUnavailable
from newsforge.layout_analyzer import COLLECT_SIGNALS_JS
from newsforge.sidebar import MEASURE_CANDIDATES_JS
from newsforge.skeleton import SNAPSHOT_DOM_JS
from newsforge.style_filter import COLLECT_RULES_JS

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d49444154789c63000100000500010d0a2db40000000049454e44ae426082"
)


class FakeSession:
    """
    Answers each page script with canned signals.

    `responses` maps a script constant to either a value or an exception
    instance (raised when that script is evaluated).
    """

    def __init__(self, responses=None, navigate_error=None, screenshot=PNG_BYTES):
        self.responses = responses or {}
        self.navigate_error = navigate_error
        self.screenshot_bytes = screenshot
        self.navigations = []
        self.evaluated = []
        self.close_calls = 0

    @property
    def closed(self) -> bool:
        return self.close_calls > 0

    async def navigate(self, url, wait_until="networkidle", timeout_ms=30000):
        self.navigations.append({"url": url, "wait_until": wait_until, "timeout_ms": timeout_ms})
        if self.navigate_error:
            raise self.navigate_error

    async def evaluate(self, script, arg=None):
        self.evaluated.append(script)
        value = self.responses.get(script)
        if isinstance(value, Exception):
            raise value
        return value

    async def screenshot(self, type="png", full_page=False):
        return self.screenshot_bytes

    async def close(self):
        self.close_calls += 1


class FakeBrowserManager:
    def __init__(self, session=None, error=None):
        self.session = session or FakeSession()
        self.error = error
        self.acquired = 0

    async def acquire_session(self):
        if self.error:
            raise self.error
        self.acquired += 1
        return self.session


def page_responses(rules=None, dom=None, signals=None, sidebar=None):
    return {
        COLLECT_RULES_JS: rules if rules is not None else [],
        SNAPSHOT_DOM_JS: dom,
        COLLECT_SIGNALS_JS: signals if signals is not None else {},
        MEASURE_CANDIDATES_JS: sidebar if sidebar is not None else [None] * 5,
    }


@pytest.fixture
def grid_article_page():
    """
    Article root laid out as a two-track grid, a 300x600 sidebar and one
    768px breakpoint.
    """
    return page_responses(
        rules=[
            "body { margin: 0px; }",
            "article { display: grid; grid-template-columns: 1fr 1fr; }",
            ".footer-links li { color: gray; }",
            "@media (max-width: 768px) {\n  article { grid-template-columns: 1fr; }\n}",
        ],
        dom={
            "tag": "article",
            "id": "story",
            "className": "post",
            "children": [
                {"tag": "h1", "id": "", "className": "headline", "children": []},
                {"tag": "p", "id": "", "className": "", "children": []},
            ],
        },
        signals={
            "root": {
                "display": "grid",
                "float": "none",
                "gridTemplateColumns": "600px 600px",
                "width": 1200,
                "childWidths": [600, 600],
            },
            "fonts": ['Georgia, serif', 'Georgia, serif', '"Helvetica Neue", Arial'],
            "headingSizes": ["40px", "32px", None],
            "bodySize": "18px",
            "colors": {
                "background": "rgb(255, 255, 255)",
                "text": "rgb(17, 17, 17)",
                "links": "rgb(0, 102, 204)",
                "borders": "rgb(17, 17, 17)",
            },
            "mediaConditions": ["(max-width: 768px)"],
        },
        sidebar=[{"selector": "aside", "width": 300, "height": 600}, None, None, None, None],
    )


@pytest.fixture
def fake_session(grid_article_page):
    return FakeSession(grid_article_page)


@pytest.fixture
def fake_browser(fake_session):
    return FakeBrowserManager(fake_session)


@pytest.fixture
def unavailable_browser():
    return FakeBrowserManager(error=BrowserUnavailable("Could not start browser: missing libnss3"))


@pytest.fixture
def memory_db(monkeypatch):
    """Swap the Supabase calls for a dict keyed by template id."""
    rows = {}
    ids = itertools.count(1)

    async def insert_template(data):
        row = dict(data)
        row["id"] = f"tpl-{next(ids)}"
        row["created_at"] = datetime.now(timezone.utc).isoformat()
        rows[row["id"]] = row
        return dict(row)

    async def fetch_template(template_id):
        row = rows.get(template_id)
        return dict(row) if row else None

    async def fetch_templates(filters=None):
        matches = [
            dict(r) for r in rows.values()
            if all(r.get(k) == v for k, v in (filters or {}).items())
        ]
        return sorted(matches, key=lambda r: r["created_at"], reverse=True)

    async def patch_template(template_id, data):
        if template_id not in rows:
            return {}
        rows[template_id].update(data)
        return dict(rows[template_id])

    async def find_template(name, template_type):
        for r in rows.values():
            if r["name"] == name and r["type"] == template_type:
                return dict(r)
        return None

    monkeypatch.setattr(database, "insert_template", insert_template)
    monkeypatch.setattr(database, "fetch_template", fetch_template)
    monkeypatch.setattr(database, "fetch_templates", fetch_templates)
    monkeypatch.setattr(database, "patch_template", patch_template)
    monkeypatch.setattr(database, "find_template", find_template)
    return rows
