"""
HTTP client for the session API.

Used by SessionStore and by scripts that drive the backend from outside.
"""
import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class SessionLoadError(Exception):
    """Raised when the session API cannot be reached or rejects a request.

    Attributes:
        message: Human-readable reason, taken from the API's 'error' field when present
        status_code: HTTP status of the failed response, None for network errors
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SessionApiClient:
    """Thin requests wrapper around /api/session."""

    def __init__(
        self,
        base_url: str,
        http: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        access_token: Optional[str] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.http = http or requests.Session()
        self.timeout = timeout
        self.access_token = access_token

    @property
    def session_url(self) -> str:
        return f"{self.base_url}/api/session"

    def _headers(self) -> Dict[str, str]:
        headers = {'Accept': 'application/json'}
        if self.access_token:
            headers['Authorization'] = f"Bearer {self.access_token}"
        return headers

    @staticmethod
    def _error_message(response, default: str) -> str:
        try:
            body = response.json()
        except ValueError:
            return default
        if isinstance(body, dict) and body.get('error'):
            return body['error']
        return default

    def _decode(self, response, failure_message: str) -> Dict[str, Any]:
        if not response.ok:
            raise SessionLoadError(
                self._error_message(response, failure_message),
                status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise SessionLoadError('Invalid response from session API') from e

        if not isinstance(data, dict):
            raise SessionLoadError('Invalid response from session API')
        return data

    def fetch_session(self, session_id: str) -> Dict[str, Any]:
        """
        GET /api/session?id=<session_id>

        Returns:
            dict: {'session', 'business', 'messages'}

        Raises:
            SessionLoadError: On network failure, non-2xx status or a bad body
        """
        try:
            response = self.http.get(
                self.session_url,
                params={'id': session_id},
                headers=self._headers(),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Session API unreachable: {e}")
            raise SessionLoadError(f"Could not reach session API: {e}") from e

        return self._decode(response, 'Session not found')

    def create_session(self, business_name: Optional[str] = None) -> Dict[str, Any]:
        """
        POST /api/session

        Returns:
            dict: {'session', 'business'}

        Raises:
            SessionLoadError: On network failure, non-2xx status or a bad body
        """
        payload = {}
        if business_name is not None:
            payload['businessName'] = business_name

        try:
            response = self.http.post(
                self.session_url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Session API unreachable: {e}")
            raise SessionLoadError(f"Could not reach session API: {e}") from e

        return self._decode(response, 'Failed to create session')
