# okta_lifecycle/api/okta_api/client.py

import requests
import logging
from typing import Any, Dict, Mapping, Optional
from dataclasses import dataclass

from okta_lifecycle import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"okta-lifecycle/{__version__}"

@dataclass
class OktaResponse:
    """
    Standardized response wrapper for Okta API calls.

    ``data`` holds the decoded JSON body, or None when the body was empty or
    not valid JSON. ``parsed`` tells those two cases apart from a JSON null.
    """
    success: bool
    status_code: int
    data: Any = None
    parsed: bool = False
    message: str = None
    error: str = None

class OktaAPIError(Exception):
    """Custom exception for Okta API errors."""
    def __init__(self, message: str, status_code: Optional[int] = None, response_text: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_text = response_text

class BaseOktaClient:
    """
    Base client for Okta API operations.
    Handles the shared session, default headers, and response decoding.
    """

    def __init__(self, address: str, headers: Mapping[str, str]):
        """
        Initialize the base client.

        Args:
            address (str): The Okta org base URL, e.g. https://example.okta.com
            headers (Mapping[str, str]): Authorization headers for every request
        """
        self.address = address.rstrip('/')
        self.session = requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'User-Agent': USER_AGENT,
        })
        self.session.headers.update(dict(headers))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self) -> None:
        """Release the session's pooled connections."""
        self.session.close()

    def _make_request(self, method: str, url: str, **kwargs) -> OktaResponse:
        """
        Make an HTTP request and decode the response body when possible.

        Non-2xx responses are returned, not raised; callers decide what a
        given status means. Transport failures are raised as OktaAPIError.

        Args:
            method (str): HTTP method (GET, POST)
            url (str): The URL to request
            **kwargs: Additional arguments to pass to requests

        Returns:
            OktaResponse: Standardized response object
        """
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request exception: {e}")
            raise OktaAPIError(f"Network error occurred: {e}") from e

        success = 200 <= response.status_code < 300
        try:
            data = response.json()
            parsed = True
        except ValueError:
            data = None
            parsed = False

        if success:
            message = "Request successful" if parsed else "Request successful (non-JSON response)"
            return OktaResponse(
                success=True,
                status_code=response.status_code,
                data=data,
                parsed=parsed,
                message=message
            )
        return OktaResponse(
            success=False,
            status_code=response.status_code,
            data=data,
            parsed=parsed,
            message=f"Request failed with status {response.status_code}",
            error=response.text
        )

    def url(self, path: str) -> str:
        return f"{self.address}/{path.lstrip('/')}"

    def get(self, path: str) -> OktaResponse:
        """Make a GET request."""
        return self._make_request('GET', self.url(path))

    def post(self, path: str, json: Dict = None) -> OktaResponse:
        """Make a POST request."""
        return self._make_request('POST', self.url(path), json=json)
