"""
Template service — CRUD over persisted templates plus the URL-to-template
pipeline (extract → synthesize → store).
"""

import json
import logging

from newsforge import database
from newsforge.default_templates import DEFAULT_HTML_STRUCTURE, DEFAULT_TEMPLATES
from newsforge.errors import TemplateNotFound
from newsforge.extractor import TemplateExtractor, template_extractor
from newsforge.models import Template, TemplateCreate, TemplateUpdate
from newsforge.synthesizer import synthesize

logger = logging.getLogger(__name__)

EXTRACTION_METHOD = "automated-browser"


def _to_template(row: dict) -> Template:
    row = dict(row)
    # Older rows stored the fingerprint as a JSON string
    if isinstance(row.get("layout_metadata"), str):
        row["layout_metadata"] = json.loads(row["layout_metadata"])
    return Template.model_validate(row)


async def create_template(data: TemplateCreate) -> Template:
    row = data.model_dump(mode="json")
    row["is_active"] = True
    inserted = await database.insert_template(row)
    logger.info(f"[templates] Created {data.type} template '{data.name}'")
    return _to_template(inserted)


async def get_template(template_id: str) -> Template:
    row = await database.fetch_template(template_id)
    if not row:
        raise TemplateNotFound(template_id)
    return _to_template(row)


async def list_templates(
    brand_id: str | None = None,
    language: str | None = None,
    is_active: bool | None = None,
    type: str | None = None,
) -> list[Template]:
    filters = {}
    if brand_id:
        filters["brand_id"] = brand_id
    if language:
        filters["language"] = language
    if is_active is not None:
        filters["is_active"] = is_active
    if type:
        filters["type"] = type
    rows = await database.fetch_templates(filters)
    return [_to_template(r) for r in rows]


async def update_template(template_id: str, data: TemplateUpdate) -> Template:
    fields = data.model_dump(exclude_unset=True)
    if not fields:
        return await get_template(template_id)
    row = await database.patch_template(template_id, fields)
    if not row:
        raise TemplateNotFound(template_id)
    return _to_template(row)


async def deactivate_template(template_id: str) -> Template:
    """Templates are never hard-deleted; they are switched off."""
    return await update_template(template_id, TemplateUpdate(is_active=False))


async def extract_template(
    url: str,
    name: str,
    brand_id: str | None = None,
    extractor: TemplateExtractor | None = None,
) -> Template:
    """
    Fingerprint the page at `url`, synthesize fresh CSS from the fingerprint
    and store the result as an `extracted` template.

    ExtractionFailed and BrowserUnavailable propagate unchanged; nothing is
    stored when extraction fails.
    """
    extractor = extractor or template_extractor
    extracted = await extractor.extract(url)

    template = await create_template(TemplateCreate(
        name=name,
        type="extracted",
        brand_id=brand_id,
        css_styles=synthesize(extracted.layout_metadata),
        html_structure=extracted.html_structure,
        has_sidebar=extracted.has_sidebar,
        source_url=url,
        extraction_method=EXTRACTION_METHOD,
        layout_metadata=extracted.layout_metadata,
    ))

    if extracted.preview_image:
        template = await update_template(
            template.id, TemplateUpdate(preview_image=extracted.preview_image)
        )
    else:
        logger.warning(f"[templates] No preview captured for {url}")

    return template


async def seed_default_templates() -> list[Template]:
    """Create any built-in template that does not exist yet. Returns the ones created."""
    created = []
    for builtin in DEFAULT_TEMPLATES:
        if await database.find_template(builtin["name"], "default"):
            continue
        created.append(await create_template(TemplateCreate(
            name=builtin["name"],
            type="default",
            css_styles=builtin["css_styles"],
            html_structure=DEFAULT_HTML_STRUCTURE,
            has_sidebar=builtin["has_sidebar"],
            language="en",
        )))
    return created
