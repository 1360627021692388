"""Database client and operations.

This package provides:
- Supabase client management (client.py)
- Configuration constants (config.py)
- Custom exceptions (exceptions.py)
- Input validation (validators.py)
- Server-side session and message queries (queries.py)
"""

from .client import (
    get_supabase_client,
    get_supabase_user_client,
    create_admin_client,
)

from .config import (
    DatabaseConfig,
    SessionDefaults,
    TableNames,
)

from .exceptions import (
    DatabaseError,
    SessionNotFoundError,
    ConfigurationError,
    SessionCreationError,
)

from .queries import (
    get_session,
    get_session_messages,
    get_recent_messages,
    save_message,
)

__all__ = [
    # Client
    'get_supabase_client',
    'get_supabase_user_client',
    'create_admin_client',

    # Configuration
    'DatabaseConfig',
    'SessionDefaults',
    'TableNames',

    # Exceptions
    'DatabaseError',
    'SessionNotFoundError',
    'ConfigurationError',
    'SessionCreationError',

    # Queries
    'get_session',
    'get_session_messages',
    'get_recent_messages',
    'save_message',
]
