"""
Supabase client construction for Garden Swap
Clients are built from explicit settings and handed to their users;
nothing here is cached at module level.
"""

from supabase import create_client, Client, ClientOptions
from gardenswap.config.settings import Settings
from gardenswap.logging_config import get_logger

logger = get_logger(__name__)


def create_service_supabase(settings: Settings) -> Client:
    """
    Build a Supabase client with the service role key for trusted backend calls.
    Server-only: the key bypasses row level security.
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise ValueError("Supabase URL and SERVICE_ROLE_KEY must be configured for admin operations")

    try:
        client = create_client(
            supabase_url=settings.SUPABASE_URL,
            supabase_key=settings.SUPABASE_SERVICE_ROLE_KEY,
            options=ClientOptions(
                auto_refresh_token=False,
                persist_session=False,
            ),
        )
        logger.info("supabase_service_client_initialized")
        return client
    except Exception as e:
        logger.error("supabase_service_client_failed", error=str(e))
        raise
