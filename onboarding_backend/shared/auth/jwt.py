"""Supabase JWT validation helpers"""
import logging
from typing import Any, Optional

from shared.database.client import get_supabase_client

logger = logging.getLogger(__name__)


def extract_bearer_token(auth_header: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an 'Authorization: Bearer <token>' header value.

    Returns:
        The token, or None if the header is missing, malformed or not Bearer
    """
    if not auth_header:
        return None

    try:
        token_type, token = auth_header.split(' ', 1)
    except ValueError:
        logger.warning("Malformed Authorization header")
        return None

    if token_type.lower() != 'bearer':
        logger.warning(f"Invalid token type: {token_type}")
        return None

    token = token.strip()
    return token or None


def get_authenticated_user(token: str) -> Optional[Any]:
    """
    Ask Supabase Auth who owns the token.

    Args:
        token: JWT access token from the Authorization header

    Returns:
        The Supabase user object, or None if the token is invalid or expired

    Raises:
        ConfigurationError: If the anon client cannot be configured
    """
    supabase = get_supabase_client()
    response = supabase.auth.get_user(token)

    if not response or not response.user:
        logger.warning("Invalid or expired token")
        return None
    return response.user
