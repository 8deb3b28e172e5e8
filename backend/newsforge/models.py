"""
Data models for layout fingerprints, extraction results and templates.

LayoutMetadata and its parts are frozen: once an extraction produces a
fingerprint nothing downstream mutates it.
"""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator


def _dedupe(values: list[str]) -> list[str]:
    """Drop duplicates and empty strings, keeping first-seen order."""
    return [v for v in dict.fromkeys(values) if v]


# ---------------------------------------------------------------------------
# Layout fingerprint
# ---------------------------------------------------------------------------

class GridSystem(str, Enum):
    GRID = "grid"
    FLEXBOX = "flexbox"
    FLOAT = "float"
    UNKNOWN = "unknown"


class Typography(BaseModel):
    model_config = ConfigDict(frozen=True)

    fonts: list[str] = []
    heading_sizes: list[str] = []  # h1, h2, h3 in order; absent levels omitted
    body_size: str = "16px"

    @field_validator("fonts")
    @classmethod
    def _unique_fonts(cls, v: list[str]) -> list[str]:
        return _dedupe(v)

    @field_validator("heading_sizes")
    @classmethod
    def _at_most_three(cls, v: list[str]) -> list[str]:
        return list(v[:3])


class ColorScheme(BaseModel):
    model_config = ConfigDict(frozen=True)

    background: str = "rgba(0, 0, 0, 0)"
    text: str = "rgb(0, 0, 0)"
    links: str = "#0000ff"
    borders: str = "#cccccc"


class Responsive(BaseModel):
    model_config = ConfigDict(frozen=True)

    breakpoints: list[str] = []

    @field_validator("breakpoints")
    @classmethod
    def _unique_breakpoints(cls, v: list[str]) -> list[str]:
        return _dedupe(v)


class LayoutMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    columns: int = 1
    grid_system: GridSystem = GridSystem.UNKNOWN
    typography: Typography = Typography()
    color_scheme: ColorScheme = ColorScheme()
    responsive: Responsive = Responsive()

    @field_validator("columns")
    @classmethod
    def _at_least_one_column(cls, v: int) -> int:
        return max(1, v)


class ExtractedTemplate(BaseModel):
    """Result of one extraction run, before synthesis and persistence."""
    css_styles: str           # raw layout-relevant rules from the source page
    html_structure: str
    has_sidebar: bool
    layout_metadata: LayoutMetadata
    preview_image: str | None = None


# ---------------------------------------------------------------------------
# Persisted templates
# ---------------------------------------------------------------------------

TemplateType = Literal["default", "custom", "extracted"]
Language = Literal["en", "es"]


class Template(BaseModel):
    id: str
    name: str
    type: TemplateType
    brand_id: str | None = None
    css_styles: str
    html_structure: str
    has_sidebar: bool = True
    language: Language = "en"
    source_url: str | None = None
    extraction_method: str | None = None
    layout_metadata: LayoutMetadata | None = None
    preview_image: str | None = None
    is_active: bool = True
    created_at: datetime | None = None


class TemplateCreate(BaseModel):
    name: str
    type: TemplateType
    brand_id: str | None = None
    css_styles: str
    html_structure: str
    has_sidebar: bool = True
    language: Language = "en"
    source_url: str | None = None
    extraction_method: str | None = None
    layout_metadata: LayoutMetadata | None = None


class TemplateUpdate(BaseModel):
    name: str | None = None
    css_styles: str | None = None
    html_structure: str | None = None
    has_sidebar: bool | None = None
    is_active: bool | None = None
    preview_image: str | None = None
