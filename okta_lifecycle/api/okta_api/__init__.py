# okta_lifecycle/api/okta_api/__init__.py

from .client import BaseOktaClient, OktaResponse, OktaAPIError
from .auth import (
    BearerAuth,
    BasicAuth,
    OAuth2ClientCredentials,
    OAuth2AuthorizationCode,
    resolve_auth,
    get_authorization_headers,
    normalize_okta_headers,
)
from .config import load_context, get_base_url
from .users import UsersClient, encode_user_id
from .unsuspend import invoke, error, halt

# Export main classes for direct import
__all__ = [
    'BaseOktaClient',
    'OktaResponse',
    'OktaAPIError',
    'BearerAuth',
    'BasicAuth',
    'OAuth2ClientCredentials',
    'OAuth2AuthorizationCode',
    'resolve_auth',
    'get_authorization_headers',
    'normalize_okta_headers',
    'load_context',
    'get_base_url',
    'UsersClient',
    'encode_user_id',
    'invoke',
    'error',
    'halt',
]
