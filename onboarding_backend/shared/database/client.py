"""Supabase client factories for backend operations"""
import os
import logging

from supabase import create_client, Client, ClientOptions

from .config import DatabaseConfig
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _require_env(name: str, hint: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigurationError(
            f"Missing {name} environment variable. {hint} "
            "Get it from: Supabase Dashboard > Settings > API"
        )
    return value


def get_supabase_client() -> Client:
    """
    Get Supabase client with anon key

    Used to validate access tokens. For user-scoped reads and writes use
    get_supabase_user_client(token) so RLS policies apply.

    Returns:
        Client: Supabase client instance

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_KEY is not set
    """
    supabase_url = _require_env('SUPABASE_URL', 'Add it to your .env file.')
    supabase_key = _require_env('SUPABASE_KEY', 'The anon key is required for authenticated access.')

    return create_client(supabase_url, supabase_key)


def get_supabase_user_client(access_token: str) -> Client:
    """
    Get Supabase client with user's JWT token

    This client will respect RLS policies based on the user's token

    Args:
        access_token: User's JWT access token

    Returns:
        Client: Supabase client instance with user context
    """
    client = get_supabase_client()

    client.postgrest.auth(access_token)

    return client


def create_admin_client() -> Client:
    """
    Create an admin Supabase client that bypasses RLS.

    Uses the service_role key. Session persistence and token auto-refresh are
    disabled; a fresh client is built for every call so nothing is shared
    between requests.

    Only use this server-side: API routes, query helpers, background jobs.

    Returns:
        Client: Supabase admin client instance

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is not set
    """
    supabase_url = _require_env('SUPABASE_URL', 'Add it to your .env file.')
    supabase_service_key = _require_env(
        'SUPABASE_SERVICE_ROLE_KEY',
        'This is required for admin/server operations.'
    )

    logger.debug("Creating Supabase admin client (bypasses RLS)")

    options = ClientOptions(
        auto_refresh_token=False,
        persist_session=False,
        postgrest_client_timeout=DatabaseConfig.POSTGREST_TIMEOUT,
    )
    return create_client(supabase_url, supabase_service_key, options=options)
