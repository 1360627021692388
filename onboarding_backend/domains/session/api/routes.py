"""
Onboarding session routes.

POST /api/session         - Create a business and its onboarding session
GET  /api/session?id=xxx  - Get a session with its business and messages
"""

import logging

from flask import Blueprint, request, jsonify

from domains.session.services.session_service import (
    create_onboarding_session,
    fetch_session_with_messages
)
from shared.auth.access import resolve_access_context
from shared.database.exceptions import SessionCreationError, SessionNotFoundError
from shared.database.validators import validate_session_id
from shared.validation.schemas import validate_create_session_request
from utils.validation import create_error_response

bp = Blueprint('session', __name__)
logger = logging.getLogger(__name__)


@bp.route('', methods=['POST'])
def create_session():
    """Create a new session (demo mode when the caller is not authenticated)."""
    logger.info("Creating new session")

    try:
        body = validate_create_session_request(request.get_json(silent=True))
    except ValueError as e:
        return create_error_response(str(e), 400)

    try:
        ctx = resolve_access_context()
        session, business = create_onboarding_session(ctx, body.businessName)

        return jsonify({
            'session': session,
            'business': business
        })

    except SessionCreationError as e:
        return jsonify(e.to_dict()), 500
    except Exception as e:
        logger.error(f"Session creation error: {str(e)}")
        return create_error_response('Failed to create session', 500, details=str(e))


@bp.route('', methods=['GET'])
def get_session():
    """Get session details, its business and all messages."""
    session_id = request.args.get('id')

    if not session_id:
        return create_error_response('Session ID required', 400)

    if not validate_session_id(session_id):
        logger.warning(f"Session id is not a UUID: {session_id}")

    logger.info(f"Fetching session {session_id}")

    try:
        ctx = resolve_access_context()
        result = fetch_session_with_messages(ctx, session_id)

        return jsonify(result)

    except SessionNotFoundError as e:
        return create_error_response('Session not found', 404, details=str(e) or None)
    except Exception as e:
        logger.error(f"Session fetch error for {session_id}: {str(e)}")
        return create_error_response('Failed to fetch session', 500, details=str(e))
