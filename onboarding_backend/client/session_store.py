"""
Session Store
Client-side mirror of the current onboarding session.

The database stays the source of truth; this store only holds what the last
successful load returned plus local, not-yet-persisted changes. Pass one
SessionStore instance to whatever UI code needs it and use subscribe() to
react to changes.
"""
import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional

from client.api_client import SessionApiClient, SessionLoadError

logger = logging.getLogger(__name__)

DEFAULT_BUCKET = 'basics'
DEFAULT_BUSINESS_DISPLAY_NAME = 'Your Business'
DEMO_MODE = 'demo'


@dataclass(frozen=True)
class SessionState:
    """Immutable snapshot of the store."""
    business: Optional[Dict[str, Any]] = None
    session: Optional[Dict[str, Any]] = None
    current_bucket: str = DEFAULT_BUCKET
    is_loading: bool = False
    error: Optional[str] = None


@dataclass(frozen=True)
class UnsupportedInMode:
    """Result of an action that has no implementation in the current access mode.

    Attributes:
        action: Name of the store action that was called
        mode: Access mode the store runs in
        suggestion: What to use instead
    """
    action: str
    mode: str
    suggestion: str

    @property
    def message(self) -> str:
        return f"{self.action} is not supported in {self.mode} mode. {self.suggestion}"


Listener = Callable[[SessionState], None]


class SessionStore:
    """
    State container for the current business and onboarding session.

    State swaps are guarded by a lock; listeners are called after each swap
    with the new snapshot. Overlapping load_session calls are not deduplicated,
    so the last response to arrive wins.
    """

    def __init__(self, api: SessionApiClient, mode: str = DEMO_MODE):
        self._api = api
        self._mode = mode
        self._state = SessionState()
        self._lock = threading.Lock()
        self._listeners: List[Listener] = []

    # ========================================================================
    # State access
    # ========================================================================

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Callable that removes the listener again
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes) -> SessionState:
        with self._lock:
            self._state = replace(self._state, **changes)
            snapshot = self._state
            listeners = list(self._listeners)

        for listener in listeners:
            listener(snapshot)
        return snapshot

    # ========================================================================
    # Actions
    # ========================================================================

    def initialize_session(self, user_id: str, business_name: Optional[str] = None) -> UnsupportedInMode:
        """
        Create a business and session for an authenticated user.

        Not available in demo mode, where sessions are created through
        POST /api/session.
        """
        logger.warning("initialize_session should use the API route in demo mode")
        return UnsupportedInMode(
            action='initialize_session',
            mode=self._mode,
            suggestion='Create sessions with POST /api/session.'
        )

    def load_session(self, session_id: str) -> None:
        """
        Load an existing session by ID through the session API.

        Raises:
            SessionLoadError: If the request fails or the response lacks a
                session or business. The message is also stored in state.error.
        """
        logger.info(f"Loading session {session_id}")

        try:
            self._set(is_loading=True, error=None)
            data = self._api.fetch_session(session_id)
            session = data.get('session')
            business = data.get('business')

            if not session:
                raise SessionLoadError('Session not found')

            if not business:
                raise SessionLoadError('Business not found')

            self._set(
                session=session,
                business=business,
                current_bucket=session.get('current_focus_bucket') or DEFAULT_BUCKET,
                is_loading=False,
            )

            logger.info(
                f"Session loaded: {session.get('id')} "
                f"(status={session.get('status')}, bucket={session.get('current_focus_bucket')})"
            )
        except Exception as e:
            message = str(e) or 'Failed to load session'
            logger.error(f"Session load failed: {message}")
            self._set(error=message, is_loading=False)
            raise

    def resume_or_create_session(self, business_id: str) -> UnsupportedInMode:
        """
        Resume the business's latest session or start a new one.

        Not available in demo mode, where load_session is used instead.
        """
        logger.warning("resume_or_create_session should use load_session in demo mode")
        return UnsupportedInMode(
            action='resume_or_create_session',
            mode=self._mode,
            suggestion='Use load_session with a known session id.'
        )

    def update_bucket(self, bucket_id: str) -> None:
        """Change the current focus bucket. Local only; nothing is persisted."""
        logger.info(f"Bucket updated: {self.state.current_bucket} -> {bucket_id}")
        self._set(current_bucket=bucket_id)

    def _set_session_status(self, status: str, verb: str) -> None:
        session = self.state.session
        if not session:
            logger.warning(f"No session to {verb}")
            return

        logger.info(f"Setting session {session.get('id')} to {status}")
        self._set(session={**session, 'status': status})

    def pause_session(self) -> None:
        """Mark the session paused. Local only; nothing is persisted."""
        self._set_session_status('paused', 'pause')

    def complete_session(self) -> None:
        """Mark the session completed. Local only; nothing is persisted."""
        self._set_session_status('completed', 'complete')

    def reset(self) -> None:
        """Reset the store to initial state."""
        logger.info("Resetting session store")
        self._set(
            business=None,
            session=None,
            current_bucket=DEFAULT_BUCKET,
            is_loading=False,
            error=None,
        )
