# okta_lifecycle/api/okta_api/users.py

from urllib.parse import quote
from .client import BaseOktaClient, OktaResponse
import logging

logger = logging.getLogger(__name__)

def encode_user_id(user_id: str) -> str:
    """
    Percent-encode a user id so it stays a single path segment.

    '/', '@', spaces and other reserved characters are escaped. A value made
    only of dots would still read as a dot segment, so its dots are escaped too.
    """
    encoded = quote(user_id, safe='')
    if encoded.strip('.') == '':
        encoded = encoded.replace('.', '%2E')
    return encoded

class UsersClient(BaseOktaClient):
    """
    Client for Okta API user-related operations.
    """

    def user_path(self, user_id: str) -> str:
        return f"api/v1/users/{encode_user_id(user_id)}"

    def unsuspend_user(self, user_id: str) -> OktaResponse:
        """
        Move a suspended user back to ACTIVE.

        Args:
            user_id (str): The Okta user id or login

        Returns:
            OktaResponse: Raw outcome of the lifecycle call
        """
        logger.info(f"POST lifecycle/unsuspend for user {user_id}")
        return self.post(f"{self.user_path(user_id)}/lifecycle/unsuspend")

    def get_user(self, user_id: str) -> OktaResponse:
        """Retrieve a user resource."""
        logger.info(f"GET user {user_id}")
        return self.get(self.user_path(user_id))
