"""
Pytest configuration and fixtures for backend tests.

This module provides common fixtures used across all test modules, including
an in-memory stand-in for the supabase-py query builder.
"""

import pytest
import os
import sys
import uuid
from collections import defaultdict
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

# Add package root to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


class FakeQuery:
    """Chainable query mirroring the supabase-py builder calls the code uses."""

    def __init__(self, db, table):
        self._db = db
        self.table = table
        self.columns = '*'
        self.row = None
        self.filters = []
        self.ordering = None
        self.row_limit = None

    def select(self, columns='*'):
        self.columns = columns
        return self

    def insert(self, row):
        self.row = row
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def execute(self):
        return self._db.execute(self)


class FakeSupabase:
    """
    In-memory tables behind a supabase-like client.

    - insert() assigns an id (and created_at for messages) and returns the row
    - conversation_messages enforces UNIQUE (session_id, sequence) with a 23505 APIError
    - select('*, business:businesses(*)') embeds the owning business
    - fail(table, op) makes the next matching call raise an APIError
    """

    def __init__(self):
        self.tables = defaultdict(list)
        self.calls = []
        self._failures = {}
        self.auth = MagicMock()
        self.postgrest = MagicMock()

    def table(self, name):
        return FakeQuery(self, name)

    def seed(self, table, *rows):
        for row in rows:
            self.tables[table].append(dict(row))

    def fail(self, table, op, message='database exploded', code='XX000'):
        self._failures[(table, op)] = APIError({
            'message': message, 'code': code, 'hint': None, 'details': None
        })

    def inserts(self, table):
        return [payload for name, op, payload in self.calls if name == table and op == 'insert']

    def execute(self, query):
        op = 'insert' if query.row is not None else 'select'
        self.calls.append((query.table, op, query.row))

        failure = self._failures.pop((query.table, op), None)
        if failure:
            raise failure

        if op == 'insert':
            return SimpleNamespace(data=[self._insert(query.table, query.row)])
        return SimpleNamespace(data=self._select(query))

    def _insert(self, table, payload):
        row = {'id': str(uuid.uuid4()), **payload}

        if table == 'conversation_messages':
            for existing in self.tables[table]:
                if (existing['session_id'], existing['sequence']) == (row['session_id'], row['sequence']):
                    raise APIError({
                        'message': 'duplicate key value violates unique constraint',
                        'code': '23505', 'hint': None, 'details': None
                    })
            row.setdefault('created_at', datetime.now(timezone.utc).isoformat())

        self.tables[table].append(row)
        return dict(row)

    def _select(self, query):
        rows = [
            dict(row) for row in self.tables[query.table]
            if all(row.get(column) == value for column, value in query.filters)
        ]

        if query.ordering:
            column, desc = query.ordering
            rows.sort(key=lambda row: row[column], reverse=desc)

        if query.row_limit is not None:
            rows = rows[:query.row_limit]

        if 'business:businesses' in query.columns:
            for row in rows:
                row['business'] = next(
                    (dict(b) for b in self.tables['businesses'] if b['id'] == row.get('business_id')),
                    None
                )
        elif query.columns != '*':
            wanted = [column.strip() for column in query.columns.split(',')]
            rows = [{column: row.get(column) for column in wanted} for row in rows]

        return rows


@pytest.fixture
def fake_supabase():
    """Empty in-memory Supabase."""
    return FakeSupabase()


@pytest.fixture
def patched_clients(monkeypatch, fake_supabase):
    """
    Route every client factory to the same fake.

    Returns:
        The FakeSupabase instance
    """
    factory = lambda *args, **kwargs: fake_supabase
    monkeypatch.setattr('shared.database.queries.create_admin_client', factory)
    monkeypatch.setattr('shared.auth.access.create_admin_client', factory)
    monkeypatch.setattr('shared.auth.access.get_supabase_user_client', factory)
    monkeypatch.setattr('shared.auth.jwt.get_supabase_client', factory)
    return fake_supabase


@pytest.fixture
def supabase_env(monkeypatch):
    """Complete Supabase configuration."""
    monkeypatch.setenv('SUPABASE_URL', 'https://example.supabase.co')
    monkeypatch.setenv('SUPABASE_KEY', 'anon-key')
    monkeypatch.setenv('SUPABASE_SERVICE_ROLE_KEY', 'service-role-key')


@pytest.fixture
def app():
    """
    Create Flask app for testing.

    Returns:
        Flask application instance configured for testing
    """
    from core.app_factory import create_app

    app = create_app()
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """
    Create test client.

    Args:
        app: Flask application fixture

    Returns:
        Flask test client
    """
    return app.test_client()


@pytest.fixture
def auth_user():
    """Supabase user object as returned by auth.get_user()."""
    return SimpleNamespace(id='user-123', email='owner@example.com')


@pytest.fixture
def seeded_session(fake_supabase):
    """
    One business with a session holding five messages (sequence 1..5), inserted out of order.

    Returns:
        dict with 'business', 'session' and 'messages'
    """
    business = {'id': 'biz-1', 'user_id': 'user-123', 'name': 'Acme Bakery', 'status': 'active'}
    session = {
        'id': '11111111-1111-1111-1111-111111111111',
        'business_id': 'biz-1',
        'status': 'active',
        'current_focus_bucket': 'basics',
    }
    messages = [
        {'id': f'msg-{n}', 'session_id': session['id'], 'sequence': n,
         'role': 'user', 'content': f'message {n}'}
        for n in (3, 1, 5, 2, 4)
    ]

    fake_supabase.seed('businesses', business)
    fake_supabase.seed('onboarding_sessions', session)
    fake_supabase.seed('conversation_messages', *messages)

    return {'business': business, 'session': session, 'messages': messages}
