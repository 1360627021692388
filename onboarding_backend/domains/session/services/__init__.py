# Session services
from domains.session.services.session_service import (
    create_demo_user,
    create_onboarding_session,
    fetch_session_with_messages
)

__all__ = [
    'create_demo_user',
    'create_onboarding_session',
    'fetch_session_with_messages'
]
