"""
Input validation functions for database operations.
"""

from typing import Any, Dict

from .config import DatabaseConfig

# Columns the database owns on conversation_messages
RESERVED_MESSAGE_FIELDS = ('id', 'session_id', 'sequence', 'created_at')


def validate_session_id(session_id: str) -> bool:
    """Validate session ID format.

    Onboarding sessions are keyed by UUID primary keys.

    Args:
        session_id: The session ID to validate

    Returns:
        bool: True if valid, False otherwise
    """
    if not session_id or not isinstance(session_id, str):
        return False

    return bool(DatabaseConfig.UUID_PATTERN.match(session_id))


def strip_reserved_message_fields(message: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys that the message table assigns itself.

    Args:
        message: Caller-supplied message fields (role, content, metadata, ...)

    Returns:
        dict: Copy of message without id, session_id, sequence, created_at
    """
    return {
        key: value for key, value in (message or {}).items()
        if key not in RESERVED_MESSAGE_FIELDS
    }
