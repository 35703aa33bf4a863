"""
Session Module
Credentialed HTTP session for the Skysmart edu API.
"""

import logging
import random
from typing import Any, Dict, Optional, Type

import requests

from .config import AUTH_URL, REQUEST_TIMEOUT, USER_AGENTS
from .errors import AuthError, RemoteError, SkyAnswersError, TransportError

logger = logging.getLogger(__name__)


class SkysmartSession:
    """
    HTTP session that lazily obtains a bearer token and attaches it to every call.

    The token is fetched on the first authenticated request and reused until
    close() clears it. Expiry is not detected; a cleared token is simply
    requested again on the next call.
    """

    def __init__(self, http: Optional[requests.Session] = None,
                 timeout: Optional[float] = REQUEST_TIMEOUT,
                 auth_url: str = AUTH_URL):
        """
        Initialize the session.

        Args:
            http: Transport to use, a fresh requests.Session when omitted
            timeout: Per-request timeout in seconds, None for the transport default
            auth_url: Endpoint issuing student tokens
        """
        self.session = http or requests.Session()
        self.timeout = timeout
        self.auth_url = auth_url
        self.user_agent = random.choice(USER_AGENTS)
        self.token: Optional[str] = None

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    def _base_headers(self) -> Dict[str, str]:
        return {
            'Connection': 'keep-alive',
            'Content-Type': 'application/json',
            'User-Agent': self.user_agent,
        }

    def authenticate(self) -> str:
        """Request a new bearer token and cache it."""
        logger.info("Requesting Skysmart token")
        try:
            response = self.session.post(self.auth_url, headers=self._base_headers(),
                                         timeout=self.timeout)
        except requests.RequestException as e:
            raise AuthError(f"Authentication request failed: {e}") from e

        if not response.ok:
            raise AuthError(f"Authentication failed with status: {response.status_code}")

        data = json_body(response, AuthError)
        token = data.get('jwtToken') if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise AuthError("Token not found in response")

        self.token = token
        return token

    def _headers(self) -> Dict[str, str]:
        if not self.token:
            self.authenticate()

        headers = self._base_headers()
        headers['Accept'] = 'application/json, text/plain, */*'
        headers['Authorization'] = f"Bearer {self.token}"
        return headers

    def request(self, method: str, url: str, json: Any = None) -> requests.Response:
        """
        Perform an authenticated request.

        Args:
            method: HTTP method
            url: Absolute URL
            json: Optional JSON body

        Returns:
            The successful response

        Raises:
            AuthError: token could not be obtained
            TransportError: the call did not complete
            RemoteError: the remote answered with a non-success status
        """
        headers = self._headers()
        try:
            response = self.session.request(method, url, headers=headers, json=json,
                                            timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise RemoteError(response.status_code, url) from e
        return response

    def get(self, url: str) -> requests.Response:
        return self.request('GET', url)

    def post(self, url: str, json: Any = None) -> requests.Response:
        return self.request('POST', url, json=json)

    def close(self):
        """Forget the cached token. The transport stays open for reuse."""
        if self.token:
            logger.debug("Clearing cached token")
        self.token = None


def json_body(response: requests.Response,
              error: Type[SkyAnswersError] = TransportError) -> Any:
    """Decode a response body as JSON, raising *error* when it is not JSON."""
    try:
        return response.json()
    except (ValueError, RecursionError) as e:
        raise error(f"Response from {response.url} is not valid JSON") from e
