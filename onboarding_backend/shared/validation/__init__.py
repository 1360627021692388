"""Validation schemas and utilities"""
from .schemas import (
    BusinessStatus,
    SessionStatus,
    CreateSessionRequest,
    validate_create_session_request,
)

__all__ = [
    'BusinessStatus',
    'SessionStatus',
    'CreateSessionRequest',
    'validate_create_session_request',
]
