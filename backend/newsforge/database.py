"""
Supabase client for template record CRUD.
"""

from newsforge.config import get_settings


def _get_client():
    """Get a Supabase client. Raises if credentials are missing."""
    settings = get_settings()
    url = settings.supabase_url
    key = settings.supabase_key
    if not url or not key:
        raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set in .env")
    from supabase import create_client
    return create_client(url, key)


def _table(client):
    return client.table(get_settings().templates_table)


async def insert_template(data: dict) -> dict:
    """Insert a template record. Returns the inserted row."""
    client = _get_client()
    result = _table(client).insert(data).execute()
    return result.data[0] if result.data else {}


async def fetch_template(template_id: str) -> dict | None:
    """Get a single template by ID, or None."""
    client = _get_client()
    result = (
        _table(client)
        .select("*")
        .eq("id", template_id)
        .limit(1)
        .execute()
    )
    return result.data[0] if result.data else None


async def fetch_templates(filters: dict | None = None) -> list:
    """Get templates matching the equality filters, newest first."""
    client = _get_client()
    query = _table(client).select("*")
    for column, value in (filters or {}).items():
        query = query.eq(column, value)
    result = query.order("created_at", desc=True).execute()
    return result.data


async def patch_template(template_id: str, data: dict) -> dict:
    """Update a template record. Returns the updated row, or {} if none matched."""
    client = _get_client()
    result = _table(client).update(data).eq("id", template_id).execute()
    return result.data[0] if result.data else {}


async def find_template(name: str, template_type: str) -> dict | None:
    """First template with this name and type, or None."""
    client = _get_client()
    result = (
        _table(client)
        .select("id, name, type")
        .eq("name", name)
        .eq("type", template_type)
        .limit(1)
        .execute()
    )
    return result.data[0] if result.data else None
