"""
Access mode resolution.

Routes call resolve_access_context() once per request and use the returned
data handle for every query, so the demo/authenticated decision lives here
and nowhere else.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from flask import request
from supabase import Client

from shared.auth.jwt import extract_bearer_token, get_authenticated_user
from shared.database.client import create_admin_client, get_supabase_user_client
from shared.database.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class AccessMode(str, Enum):
    AUTHENTICATED = "authenticated"
    DEMO = "demo"


@dataclass
class AccessContext:
    """Capability-scoped data handle for one request.

    Attributes:
        client: RLS-scoped client when authenticated, admin client in demo mode
        mode: Which of the two the client is
        user_id: Authenticated user id, None in demo mode
        access_token: The caller's JWT, None in demo mode
    """
    client: Client
    mode: AccessMode
    user_id: Optional[str] = None
    access_token: Optional[str] = None

    @property
    def is_demo(self) -> bool:
        return self.mode == AccessMode.DEMO


def resolve_access_context(auth_header: Optional[str] = None) -> AccessContext:
    """
    Decide between authenticated and demo access for the current request.

    A valid Bearer token yields an RLS-scoped client. A missing, malformed or
    rejected token falls back to demo mode with the admin client. Auth provider
    errors are treated as "not authenticated"; configuration errors are not.

    Args:
        auth_header: Authorization header value. Defaults to the current
            Flask request's header.

    Returns:
        AccessContext for this request

    Raises:
        ConfigurationError: If required Supabase settings are missing
    """
    if auth_header is None:
        auth_header = request.headers.get('Authorization')

    token = extract_bearer_token(auth_header)
    user = None

    if token:
        try:
            user = get_authenticated_user(token)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.debug(f"Token validation failed (continuing in demo mode): {str(e)}")

    if user:
        return AccessContext(
            client=get_supabase_user_client(token),
            mode=AccessMode.AUTHENTICATED,
            user_id=user.id,
            access_token=token,
        )

    logger.info("No authenticated user - using demo mode with admin client")
    return AccessContext(client=create_admin_client(), mode=AccessMode.DEMO)
