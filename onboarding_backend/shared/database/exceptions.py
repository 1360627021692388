"""
Database exception classes.

This module defines all custom exceptions for database operations,
providing a clear hierarchy for error handling.
"""

from typing import Any, Dict, Optional


class DatabaseError(Exception):
    """Base exception for database operations.

    All database-related exceptions inherit from this class,
    allowing for broad exception catching when needed.
    """
    pass


class SessionNotFoundError(DatabaseError):
    """Raised when an onboarding session cannot be found.

    This exception is raised when:
    - The session row does not exist
    - The session query itself failed (treated the same as missing)
    """
    pass


class ConfigurationError(DatabaseError):
    """Raised when configuration is invalid.

    This exception is raised when:
    - SUPABASE_URL is missing
    - SUPABASE_SERVICE_ROLE_KEY or SUPABASE_KEY is missing

    It is never retried; the server cannot work without these values.
    """
    pass


class SessionCreationError(DatabaseError):
    """Raised when one step of the session creation flow fails.

    Attributes:
        message: Which step failed (e.g. 'Failed to create business')
        details: Underlying database error message
    """

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        return {
            'error': self.message,
            'details': self.details
        }
