"""Supabase client construction"""
import logging

from supabase import Client, create_client  # type: ignore

from app.config import Settings

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client:
    """Create a Supabase client from explicit settings.

    The caller owns the returned client; there is no module-level singleton.
    """
    if not settings.supabase_url or not settings.supabase_key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

    client = create_client(settings.supabase_url, settings.supabase_key)
    logger.info(f"Supabase client created for {settings.supabase_url}")
    return client
