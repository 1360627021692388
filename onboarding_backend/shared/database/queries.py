"""
Server-side query functions for onboarding sessions and messages.

Every function here uses the admin client and therefore bypasses RLS.
Only call them from API routes and server jobs, never from client code.
"""

import logging
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import Client

from .client import create_admin_client
from .config import DatabaseConfig, SessionDefaults, TableNames
from .exceptions import DatabaseError
from .validators import strip_reserved_message_fields

logger = logging.getLogger(__name__)


def get_session(session_id: str) -> Optional[Dict[str, Any]]:
    """Get a session by ID (bypasses RLS).

    Query failures are logged and reported as None, the same as a missing row.

    Args:
        session_id: UUID of the onboarding session

    Returns:
        dict: Session row, or None if not found or the query failed
    """
    supabase = create_admin_client()

    try:
        response = supabase.table(TableNames.SESSIONS)\
            .select('*')\
            .eq('id', session_id)\
            .limit(1)\
            .execute()
    except Exception as e:
        logger.error(f"Failed to fetch session {session_id}: {e}")
        return None

    if not response.data:
        logger.info(f"Session {session_id} not found")
        return None

    return response.data[0]


def get_session_messages(
    session_id: str,
    limit: int = SessionDefaults.MESSAGE_LIMIT
) -> List[Dict[str, Any]]:
    """Get messages for a session in ascending sequence order (bypasses RLS).

    Args:
        session_id: UUID of the onboarding session
        limit: Maximum number of messages to return

    Returns:
        list: Message rows, oldest first

    Raises:
        DatabaseError: If the query fails
    """
    supabase = create_admin_client()

    try:
        response = supabase.table(TableNames.MESSAGES)\
            .select('*')\
            .eq('session_id', session_id)\
            .order('sequence')\
            .limit(limit)\
            .execute()
    except APIError as e:
        logger.error(f"Failed to fetch messages for session {session_id}: {e.message}")
        raise DatabaseError(f"Failed to fetch messages: {e.message}") from e

    return response.data or []


def get_recent_messages(
    session_id: str,
    count: int = SessionDefaults.RECENT_MESSAGE_COUNT
) -> List[Dict[str, Any]]:
    """Get the most recent messages of a session (bypasses RLS).

    Fetches the `count` highest sequence numbers and returns them oldest first.

    Args:
        session_id: UUID of the onboarding session
        count: Number of messages to return

    Returns:
        list: Message rows in ascending sequence order

    Raises:
        DatabaseError: If the query fails
    """
    supabase = create_admin_client()

    try:
        response = supabase.table(TableNames.MESSAGES)\
            .select('*')\
            .eq('session_id', session_id)\
            .order('sequence', desc=True)\
            .limit(count)\
            .execute()
    except APIError as e:
        logger.error(f"Failed to fetch recent messages for session {session_id}: {e.message}")
        raise DatabaseError(f"Failed to fetch recent messages: {e.message}") from e

    return list(reversed(response.data or []))


def _read_max_sequence(supabase: Client, session_id: str) -> int:
    response = supabase.table(TableNames.MESSAGES)\
        .select('sequence')\
        .eq('session_id', session_id)\
        .order('sequence', desc=True)\
        .limit(1)\
        .execute()

    if not response.data:
        return 0
    return response.data[0].get('sequence') or 0


def save_message(session_id: str, message: Dict[str, Any]) -> Dict[str, Any]:
    """Append a message to a session with the next sequence number (bypasses RLS).

    The insert is a compare-and-swap against UNIQUE (session_id, sequence):
    read max(sequence), insert max + 1, and on a unique violation re-read and
    try again. Concurrent writers therefore never share or skip a sequence.

    Args:
        session_id: UUID of the onboarding session
        message: Content fields (role, content, metadata, ...). id, session_id,
            sequence and created_at are assigned here and ignored if passed.

    Returns:
        dict: The persisted message row

    Raises:
        DatabaseError: If the insert fails or every attempt hits a conflict
    """
    supabase = create_admin_client()
    fields = strip_reserved_message_fields(message)
    max_attempts = DatabaseConfig.SEQUENCE_CONFLICT_RETRIES + 1

    for attempt in range(1, max_attempts + 1):
        try:
            next_sequence = _read_max_sequence(supabase, session_id) + 1

            response = supabase.table(TableNames.MESSAGES).insert({
                **fields,
                'session_id': session_id,
                'sequence': next_sequence,
            }).execute()
        except APIError as e:
            if e.code == DatabaseConfig.UNIQUE_VIOLATION_CODE:
                logger.warning(
                    f"Sequence conflict for session {session_id} "
                    f"(attempt {attempt}/{max_attempts}), retrying"
                )
                continue
            logger.error(f"Failed to save message for session {session_id}: {e.message}")
            raise DatabaseError(f"Failed to save message: {e.message}") from e

        if not response.data:
            raise DatabaseError("Insert into conversation_messages did not return data.")

        return response.data[0]

    logger.error(f"Gave up assigning a sequence for session {session_id} after {max_attempts} attempts")
    raise DatabaseError(
        f"Could not assign message sequence for session {session_id} "
        f"after {max_attempts} attempts"
    )
