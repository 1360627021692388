"""
Response helpers for API routes
Provides standardized error response formatting
"""

from flask import jsonify


def create_error_response(message, status_code=400, details=None):
    """
    Create standardized error response.

    Args:
        message: Error message to return
        status_code: HTTP status code (default: 400)
        details: Optional underlying error detail (e.g. database message)

    Returns:
        tuple: (Flask JSON response, status_code)
    """
    body = {'error': message}
    if details is not None:
        body['details'] = details
    return jsonify(body), status_code
