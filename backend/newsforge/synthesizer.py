"""
Template synthesizer — layout fingerprint in, self-contained CSS out.
Pure Python, no browser. The same LayoutMetadata always produces the
same bytes.
"""

from newsforge.models import GridSystem, LayoutMetadata

DEFAULT_FONT_STACK = "Arial, sans-serif"
DEFAULT_HEADING_SIZES = ("2.5rem", "2rem", "1.5rem")


def _heading_size(metadata: LayoutMetadata, level: int) -> str:
    sizes = metadata.typography.heading_sizes
    if level < len(sizes) and sizes[level]:
        return sizes[level]
    return DEFAULT_HEADING_SIZES[level]


def _container_layout_lines(metadata: LayoutMetadata) -> list[str]:
    if metadata.grid_system == GridSystem.GRID:
        lines = ["  display: grid;"]
        if metadata.columns > 1:
            lines.append(f"  grid-template-columns: repeat({metadata.columns}, 1fr);")
        return lines
    if metadata.grid_system == GridSystem.FLEXBOX:
        return ["  display: flex;"]
    return []


def _responsive_block(metadata: LayoutMetadata) -> str:
    # Only the first harvested breakpoint is used, even when several exist
    breakpoints = metadata.responsive.breakpoints
    if not breakpoints:
        return ""
    return f"""
/* Responsive */
@media {breakpoints[0]} {{
  .article-container {{
    grid-template-columns: 1fr;
  }}
  .sidebar {{
    width: 100%;
  }}
}}
"""


def synthesize(metadata: LayoutMetadata) -> str:
    """Build the reusable template stylesheet for a layout fingerprint."""
    typography = metadata.typography
    colors = metadata.color_scheme
    font_family = typography.fonts[0] if typography.fonts else DEFAULT_FONT_STACK

    container = "\n".join(
        ["  max-width: 1200px;", "  margin: 0 auto;", "  padding: 20px;"]
        + _container_layout_lines(metadata)
        + ["  gap: 30px;"]
    )

    css = f"""
/* Base Styles */
body {{
  font-family: {font_family};
  font-size: {typography.body_size};
  color: {colors.text};
  background-color: {colors.background};
  line-height: 1.6;
  margin: 0;
  padding: 0;
}}

/* Layout Container */
.article-container {{
{container}
}}

/* Article Content */
.article-content {{
  flex: 1;
}}

/* Typography */
h1 {{
  font-size: {_heading_size(metadata, 0)};
  margin-bottom: 0.5rem;
  line-height: 1.2;
}}

h2 {{
  font-size: {_heading_size(metadata, 1)};
  margin-top: 2rem;
  margin-bottom: 1rem;
}}

h3 {{
  font-size: {_heading_size(metadata, 2)};
  margin-top: 1.5rem;
  margin-bottom: 0.75rem;
}}

p {{
  margin-bottom: 1rem;
}}

a {{
  color: {colors.links};
  text-decoration: none;
}}

a:hover {{
  text-decoration: underline;
}}

/* Sidebar */
.sidebar {{
  width: 300px;
  flex-shrink: 0;
}}
{_responsive_block(metadata)}"""

    return css.strip() + "\n"
