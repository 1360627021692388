"""Client-side session state and API access"""
from client.api_client import SessionApiClient, SessionLoadError
from client.session_store import SessionState, SessionStore, UnsupportedInMode
from client.selectors import (
    select_session_id,
    select_business_id,
    select_business_name,
    select_is_session_active,
)

__all__ = [
    'SessionApiClient',
    'SessionLoadError',
    'SessionState',
    'SessionStore',
    'UnsupportedInMode',
    'select_session_id',
    'select_business_id',
    'select_business_name',
    'select_is_session_active',
]
