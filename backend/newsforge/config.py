from pydantic_settings import BaseSettings
from functools import lru_cache
import os


# .env lives in the repo root (two levels up from backend/newsforge/).
# In deployed environments vars are injected directly and .env is optional.
_ENV_PATH = os.path.join(os.path.dirname(__file__), "..", "..", ".env")


class Settings(BaseSettings):
    supabase_url: str = ""
    supabase_key: str = ""
    templates_table: str = "templates"

    # Extraction defaults
    page_load_timeout: int = 30000  # milliseconds
    viewport_width: int = 1920
    viewport_height: int = 1080
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/131.0.0.0 Safari/537.36"
    )
    browser_headless: bool = True
    max_concurrent_extractions: int = 4

    # Preview screenshots are stored as data URLs on the template row
    preview_compress: bool = False
    preview_max_width: int = 1280
    preview_quality: int = 75

    log_level: str = "INFO"

    class Config:
        env_file = _ENV_PATH if os.path.exists(_ENV_PATH) else None
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()
