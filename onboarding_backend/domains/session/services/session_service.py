"""
Onboarding session service.

Multi-step write (demo user -> business -> session) and multi-table read
(session + business -> messages). Every query goes through the data handle
of the caller's AccessContext.
"""

import logging
import uuid
from typing import Any, Dict, Tuple

from postgrest.exceptions import APIError

from shared.auth.access import AccessContext
from shared.database.config import SessionDefaults, TableNames
from shared.database.exceptions import SessionCreationError, SessionNotFoundError
from shared.validation.schemas import BusinessStatus, SessionStatus

logger = logging.getLogger(__name__)


def _insert_one(ctx: AccessContext, table: str, row: Dict[str, Any], failure_message: str) -> Dict[str, Any]:
    try:
        response = ctx.client.table(table).insert(row).execute()
    except APIError as e:
        logger.error(f"{failure_message}: {e.message}")
        raise SessionCreationError(failure_message, e.message) from e

    if not response.data:
        logger.error(f"{failure_message}: insert into '{table}' did not return data")
        raise SessionCreationError(failure_message, f"Insert into '{table}' did not return data")

    return response.data[0]


def create_demo_user(ctx: AccessContext) -> Dict[str, Any]:
    """
    Insert a throwaway user so a demo business satisfies its user_id foreign key.

    The row is never reused or cleaned up.
    """
    demo_email = f"demo-{uuid.uuid4()}@{SessionDefaults.DEMO_EMAIL_DOMAIN}"
    demo_user = _insert_one(
        ctx, TableNames.USERS, {'email': demo_email}, 'Failed to create demo user'
    )
    logger.info(f"Demo user created: {demo_user['id']}")
    return demo_user


def create_onboarding_session(
    ctx: AccessContext,
    business_name: str = SessionDefaults.BUSINESS_NAME
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Create a business and its onboarding session.

    Steps short-circuit on the first failure. Earlier inserts are not rolled
    back, so a business without a session can be left behind.

    Args:
        ctx: Access context for the current request
        business_name: Display name for the new business

    Returns:
        tuple: (session row, business row)

    Raises:
        SessionCreationError: If any insert fails; message names the step
    """
    user_id = ctx.user_id

    if ctx.is_demo:
        user_id = create_demo_user(ctx)['id']

    business = _insert_one(ctx, TableNames.BUSINESSES, {
        'user_id': user_id,
        'name': business_name,
        'status': BusinessStatus.ACTIVE.value,
    }, 'Failed to create business')

    logger.info(f"Business created: {business['id']}")

    session = _insert_one(ctx, TableNames.SESSIONS, {
        'business_id': business['id'],
        'status': SessionStatus.ACTIVE.value,
        'current_focus_bucket': SessionDefaults.FOCUS_BUCKET,
    }, 'Failed to create session')

    logger.info(
        f"Session created: session={session['id']}, business={business['id']}, "
        f"demo_mode={ctx.is_demo}"
    )

    return session, business


def fetch_session_with_messages(ctx: AccessContext, session_id: str) -> Dict[str, Any]:
    """
    Load a session, its business and its full message history.

    Args:
        ctx: Access context for the current request
        session_id: UUID of the onboarding session

    Returns:
        dict: {'session': ..., 'business': ..., 'messages': [...]}, messages
        in ascending sequence order

    Raises:
        SessionNotFoundError: If the session row is missing or the lookup failed
    """
    try:
        session_response = ctx.client.table(TableNames.SESSIONS)\
            .select('*, business:businesses(*)')\
            .eq('id', session_id)\
            .limit(1)\
            .execute()
    except APIError as e:
        logger.error(f"Session not found: {session_id} ({e.message})")
        raise SessionNotFoundError(e.message) from e

    if not session_response.data:
        logger.error(f"Session not found: {session_id}")
        raise SessionNotFoundError()

    session = session_response.data[0]

    messages_response = ctx.client.table(TableNames.MESSAGES)\
        .select('*')\
        .eq('session_id', session_id)\
        .order('sequence')\
        .execute()
    messages = messages_response.data or []

    logger.info(f"Session fetched: {session_id}, message_count={len(messages)}")

    return {
        'session': session,
        'business': session.get('business'),
        'messages': messages,
    }
