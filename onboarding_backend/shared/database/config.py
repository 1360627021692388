"""
Database configuration constants.

This module centralizes all configuration constants for database operations,
including timeouts, conflict retries, regex patterns, and default values.
"""

import re


class DatabaseConfig:
    """Technical configuration constants for database operations."""

    # PostgREST HTTP timeout (seconds)
    POSTGREST_TIMEOUT = 30

    # Compare-and-swap attempts when two writers race for the same sequence
    SEQUENCE_CONFLICT_RETRIES = 5

    # Postgres error code for unique_violation
    UNIQUE_VIOLATION_CODE = '23505'

    UUID_PATTERN = re.compile(
        r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$',
        re.IGNORECASE
    )


class SessionDefaults:
    """Onboarding domain default values."""

    BUSINESS_NAME = "My Business"
    FOCUS_BUCKET = "basics"
    DEMO_EMAIL_DOMAIN = "demo.local"
    MESSAGE_LIMIT = 50
    RECENT_MESSAGE_COUNT = 5


class TableNames:
    """Database table names - centralized to avoid magic strings."""

    USERS = "users"
    BUSINESSES = "businesses"
    SESSIONS = "onboarding_sessions"
    MESSAGES = "conversation_messages"
