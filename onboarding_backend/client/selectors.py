"""Read-only views over a SessionState snapshot. None of these fetch."""
from typing import Optional

from client.session_store import SessionState, DEFAULT_BUSINESS_DISPLAY_NAME


def select_session_id(state: SessionState) -> Optional[str]:
    return state.session.get('id') if state.session else None


def select_business_id(state: SessionState) -> Optional[str]:
    return state.business.get('id') if state.business else None


def select_business_name(state: SessionState) -> str:
    """Business name, or a generic label until one is loaded."""
    if state.business and state.business.get('name'):
        return state.business['name']
    return DEFAULT_BUSINESS_DISPLAY_NAME


def select_is_session_active(state: SessionState) -> bool:
    return bool(state.session) and state.session.get('status') == 'active'
