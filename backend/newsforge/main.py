import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from newsforge import template_service
from newsforge.browser import browser_manager
from newsforge.config import get_settings
from newsforge.errors import BrowserUnavailable, ExtractionFailed, TemplateNotFound
from newsforge.models import Language, Template, TemplateCreate, TemplateType, TemplateUpdate

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: make sure the built-in templates exist
    try:
        created = await template_service.seed_default_templates()
        if created:
            logger.info(f"[templates] Seeded {len(created)} default template(s)")
    except Exception as e:
        logger.warning(f"[templates] Default template seeding skipped: {e}")
    yield
    # Shutdown: the shared browser outlives every request
    await browser_manager.shutdown()


app = FastAPI(title="Newsforge API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ExtractTemplateRequest(BaseModel):
    url: str
    name: str
    brand_id: str | None = None


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"status": "ok", "browser_running": browser_manager.is_running}


@app.post("/templates/extract", response_model=Template, status_code=201)
async def extract_template_endpoint(request: ExtractTemplateRequest):
    """Fingerprint a published article page and store a synthesized template."""
    url = request.url.strip()
    if not url.startswith(("http://", "https://")):
        raise HTTPException(status_code=400, detail="URL must start with http:// or https://")
    if not request.name.strip():
        raise HTTPException(status_code=400, detail="Template name is required")

    try:
        return await template_service.extract_template(url, request.name.strip(), request.brand_id)
    except (ExtractionFailed, BrowserUnavailable) as e:
        logger.error(f"[templates] Extraction failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to extract template")


@app.post("/templates", response_model=Template, status_code=201)
async def create_template_endpoint(request: TemplateCreate):
    try:
        return await template_service.create_template(request)
    except Exception as e:
        logger.error(f"[templates] Create failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to create template")


@app.get("/templates", response_model=list[Template])
async def list_templates_endpoint(
    brand_id: str | None = None,
    language: Language | None = None,
    is_active: bool | None = None,
    type: TemplateType | None = None,
):
    try:
        return await template_service.list_templates(
            brand_id=brand_id, language=language, is_active=is_active, type=type,
        )
    except Exception as e:
        logger.error(f"[templates] List failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to list templates")


@app.get("/templates/{template_id}", response_model=Template)
async def get_template_endpoint(template_id: str):
    try:
        return await template_service.get_template(template_id)
    except TemplateNotFound:
        raise HTTPException(status_code=404, detail="Template not found")


@app.put("/templates/{template_id}", response_model=Template)
async def update_template_endpoint(template_id: str, request: TemplateUpdate):
    try:
        return await template_service.update_template(template_id, request)
    except TemplateNotFound:
        raise HTTPException(status_code=404, detail="Template not found")


@app.delete("/templates/{template_id}")
async def delete_template_endpoint(template_id: str):
    """Deactivate a template. Rows are kept for articles that still use them."""
    try:
        await template_service.deactivate_template(template_id)
    except TemplateNotFound:
        raise HTTPException(status_code=404, detail="Template not found")
    return {"message": "Template deleted successfully"}
