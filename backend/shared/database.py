"""
Supabase access for the Scholaris backend.

Every repository shares one service-role client. Row Level Security is not
relied on; the service layer decides who may read or write what.
"""

import logging
from typing import Optional

from supabase import create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

# Table queried by readiness checks. It exists from the first migration.
PING_TABLE = "categories"

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the process-wide service-role client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _client

    if _client is None:
        settings = get_settings()
        missing = [
            name
            for name, value in (
                ("SUPABASE_URL", settings.supabase_url),
                ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
            )
            if not value
        ]
        if missing:
            raise RuntimeError(f"Supabase configuration missing: {', '.join(missing)}")
        _client = create_client(settings.supabase_url, settings.supabase_service_role_key)
        logger.info("Connected Supabase client to %s", settings.supabase_url)

    return _client


def ping_database(client: Client) -> bool:
    """Run a one-row select and report whether the database answered."""
    try:
        client.table(PING_TABLE).select("id").limit(1).execute()
    except Exception as e:
        logger.warning("Database ping failed: %s", e)
        return False
    return True


def reset_client_cache() -> None:
    """Forget the cached client so the next call rebuilds it."""
    global _client
    _client = None
