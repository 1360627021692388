"""Authentication and access mode resolution"""
from shared.auth.jwt import extract_bearer_token, get_authenticated_user
from shared.auth.access import AccessMode, AccessContext, resolve_access_context

__all__ = [
    'extract_bearer_token',
    'get_authenticated_user',
    'AccessMode',
    'AccessContext',
    'resolve_access_context',
]
