"""
Layout fingerprint heuristic tests.

Run:
    pytest backend/tests/test_layout_analyzer.py -v
"""

import pytest

from conftest import FakeSession, page_responses
from newsforge.layout_analyzer import (
    analyze_layout,
    build_layout_metadata,
    count_columns,
    detect_grid_system,
    extract_color_scheme,
    extract_typography,
    harvest_breakpoints,
)
from newsforge.models import GridSystem


def root(display="block", float="none", grid_template_columns="none", width=1200, child_widths=None):
    return {
        "display": display,
        "float": float,
        "gridTemplateColumns": grid_template_columns,
        "width": width,
        "childWidths": child_widths if child_widths is not None else [width],
    }


class TestDetectGridSystem:

    def test_grid(self):
        assert detect_grid_system(root(display="grid")) == GridSystem.GRID

    def test_flex(self):
        assert detect_grid_system(root(display="flex")) == GridSystem.FLEXBOX

    def test_float(self):
        assert detect_grid_system(root(float="left")) == GridSystem.FLOAT

    def test_display_wins_over_float(self):
        assert detect_grid_system(root(display="grid", float="left")) == GridSystem.GRID
        assert detect_grid_system(root(display="flex", float="right")) == GridSystem.FLEXBOX

    def test_plain_block_is_unknown(self):
        assert detect_grid_system(root()) == GridSystem.UNKNOWN

    def test_missing_root_is_unknown(self):
        assert detect_grid_system(None) == GridSystem.UNKNOWN


class TestCountColumns:

    def test_grid_counts_tracks(self):
        r = root(display="grid", grid_template_columns="300px 300px 300px")
        assert count_columns(r, GridSystem.GRID) == 3

    def test_grid_without_tracks_falls_back_to_widths(self):
        r = root(display="grid", grid_template_columns="none", width=900, child_widths=[450, 450])
        assert count_columns(r, GridSystem.GRID) == 2

    def test_width_ratio_for_non_grid(self):
        r = root(display="flex", width=1200, child_widths=[400, 400, 400])
        assert count_columns(r, GridSystem.FLEXBOX) == 3

    def test_uneven_children_use_the_mean(self):
        # mean 400 → 1200 / 400
        r = root(width=1200, child_widths=[800, 200, 200])
        assert count_columns(r, GridSystem.UNKNOWN) == 3

    def test_ratio_rounds_half_up(self):
        r = root(width=1000, child_widths=[400])
        assert count_columns(r, GridSystem.UNKNOWN) == 3  # 2.5

    def test_single_full_width_child(self):
        assert count_columns(root(width=960, child_widths=[960]), GridSystem.UNKNOWN) == 1

    def test_floors_at_one(self):
        r = root(width=300, child_widths=[1200])
        assert count_columns(r, GridSystem.UNKNOWN) == 1

    def test_no_children(self):
        assert count_columns(root(child_widths=[]), GridSystem.UNKNOWN) == 1

    def test_zero_width_children(self):
        assert count_columns(root(child_widths=[0, 0]), GridSystem.UNKNOWN) == 1

    def test_missing_root(self):
        assert count_columns(None, GridSystem.UNKNOWN) == 1


class TestTypography:

    def test_fonts_are_distinct_in_first_seen_order(self):
        t = extract_typography(["Georgia, serif", "Arial", "Georgia, serif"], [], "18px")
        assert t.fonts == ["Georgia, serif", "Arial"]

    def test_missing_heading_levels_are_omitted(self):
        t = extract_typography([], ["40px", None, "24px"], "16px")
        assert t.heading_sizes == ["40px", "24px"]

    def test_body_size_default(self):
        assert extract_typography([], [], None).body_size == "16px"


class TestColorScheme:

    def test_reads_body_and_link_colors(self):
        colors = extract_color_scheme({
            "background": "rgb(250, 250, 250)",
            "text": "rgb(20, 20, 20)",
            "links": "rgb(0, 0, 238)",
            "borders": "rgb(20, 20, 20)",
        })
        assert colors.background == "rgb(250, 250, 250)"
        assert colors.text == "rgb(20, 20, 20)"
        assert colors.links == "rgb(0, 0, 238)"
        assert colors.borders == "rgb(20, 20, 20)"

    def test_no_anchor_and_no_border(self):
        colors = extract_color_scheme({"background": "white", "text": "black", "links": None, "borders": ""})
        assert colors.links == "#0000ff"
        assert colors.borders == "#cccccc"

    def test_unreadable_body(self):
        colors = extract_color_scheme(None)
        assert colors.links == "#0000ff"
        assert colors.borders == "#cccccc"


class TestBreakpoints:

    def test_duplicates_across_stylesheets_collapse(self):
        responsive = harvest_breakpoints([
            "(max-width: 768px)",
            "(min-width: 1024px)",
            "(max-width: 768px)",
        ])
        assert responsive.breakpoints == ["(max-width: 768px)", "(min-width: 1024px)"]

    def test_none_found(self):
        assert harvest_breakpoints([]).breakpoints == []
        assert harvest_breakpoints(None).breakpoints == []


class TestBuildLayoutMetadata:

    def test_empty_page_degrades_to_defaults(self):
        metadata = build_layout_metadata({})

        assert metadata.columns == 1
        assert metadata.grid_system == GridSystem.UNKNOWN
        assert metadata.typography.fonts == []
        assert metadata.typography.heading_sizes == []
        assert metadata.typography.body_size == "16px"
        assert metadata.color_scheme.links == "#0000ff"
        assert metadata.responsive.breakpoints == []

    def test_null_signals(self):
        assert build_layout_metadata(None).columns == 1


@pytest.mark.asyncio
async def test_analyze_layout_grid_page(grid_article_page):
    metadata = await analyze_layout(FakeSession(grid_article_page))

    assert metadata.grid_system == GridSystem.GRID
    assert metadata.columns == 2
    assert metadata.typography.fonts == ["Georgia, serif", '"Helvetica Neue", Arial']
    assert metadata.typography.heading_sizes == ["40px", "32px"]
    assert metadata.typography.body_size == "18px"
    assert metadata.color_scheme.links == "rgb(0, 102, 204)"
    assert metadata.responsive.breakpoints == ["(max-width: 768px)"]


@pytest.mark.asyncio
async def test_analyze_layout_three_track_grid():
    session = FakeSession(page_responses(signals={
        "root": root(display="grid", grid_template_columns="200px 200px 200px", child_widths=[200]),
    }))

    metadata = await analyze_layout(session)

    assert metadata.columns == 3
